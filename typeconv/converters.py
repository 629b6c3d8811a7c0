"""Type converter contract, JSON capability and null-aware wrappers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeGuard, TypeVar

D = TypeVar("D")
S = TypeVar("S")


class TypeConverter(ABC, Generic[D, S]):
    """
    Maps a domain value of type ``D`` to a storage primitive of type ``S``.

    ``S`` should be one of the primitives listed in ``typeconv.types.SqlPrimitive``;
    this is a convention for the storage layer and is not checked here.

    Implementations are expected to satisfy the round-trip law
    ``from_sql(to_sql(x)) == x`` for every valid domain value ``x``. The reverse
    direction does not have to be total: ``from_sql`` may raise
    ``ConversionError`` for stored values it cannot interpret.

    Converters hold no mutable state, so one instance can be built once and
    shared freely.

    Example:
        class CentsConverter(TypeConverter[Decimal, int]):
            def to_sql(self, value):
                return int(value * 100)

            def from_sql(self, raw):
                return Decimal(raw) / 100

    """

    __slots__ = ()

    @abstractmethod
    def to_sql(self, value: D) -> S:
        """Map a domain value into something the storage layer understands."""

    @abstractmethod
    def from_sql(self, raw: S) -> D:
        """Map a stored value back to the domain."""


class JsonTypeConverter(TypeConverter[D, S]):
    """
    A type converter that also applies to JSON serialization.

    A plain ``TypeConverter`` only affects the storage representation. When a
    serializer finds a ``JsonTypeConverter`` (see ``is_json_converter``), it
    calls ``to_json``/``from_json`` instead of emitting the raw storage value.

    Both default to the storage mapping. Override them to give JSON a
    different representation, e.g. store a date as an ``int`` timestamp but
    write it to JSON as ISO-8601 text.
    """

    __slots__ = ()

    def to_json(self, value: D) -> Any:
        """Map a domain value to JSON. Defaults to ``to_sql``."""
        return self.to_sql(value)

    def from_json(self, raw: Any) -> D:
        """Map a JSON value back to the domain. Defaults to ``from_sql``."""
        return self.from_sql(raw)

    @staticmethod
    def as_nullable(inner: TypeConverter[D, S]) -> JsonTypeConverter[D | None, S | None]:
        """
        Wrap a converter for non-null values into one that also handles ``None``.

        The result is JSON-capable. ``None`` maps to ``None`` in every
        direction and everything else is delegated to ``inner``.

        Args:
            inner: Converter that only deals with non-null values.

        Returns:
            A null-aware JSON type converter.

        """
        return _NullWrappingTypeConverterWithJson(inner)


class NullAwareTypeConverter(TypeConverter[D | None, S | None]):
    """
    A type converter mapping ``None`` to ``None`` in both directions.

    Subclasses implement ``require_from_sql`` and ``require_to_sql``, which
    only ever see non-null values, instead of ``from_sql`` and ``to_sql``.
    """

    __slots__ = ()

    @staticmethod
    def wrap(inner: TypeConverter[D, S]) -> NullAwareTypeConverter[D, S]:
        """
        Wrap a converter for non-null values into one that also handles ``None``.

        The result is not JSON-capable; use ``JsonTypeConverter.as_nullable``
        for that.
        """
        return _NullWrappingTypeConverter(inner)

    def from_sql(self, raw: S | None) -> D | None:
        return None if raw is None else self.require_from_sql(raw)

    def to_sql(self, value: D | None) -> S | None:
        return None if value is None else self.require_to_sql(value)

    @abstractmethod
    def require_from_sql(self, raw: S) -> D:
        """Map a non-null stored value back to the domain."""

    @abstractmethod
    def require_to_sql(self, value: D) -> S:
        """Map a non-null domain value to its storage representation."""


class _NullWrappingTypeConverter(NullAwareTypeConverter[D, S]):
    __slots__ = ("_inner",)

    def __init__(self, inner: TypeConverter[D, S]) -> None:
        self._inner = inner

    @property
    def inner(self) -> TypeConverter[D, S]:
        """The wrapped converter."""
        return self._inner

    def require_from_sql(self, raw: S) -> D:
        return self._inner.from_sql(raw)

    def require_to_sql(self, value: D) -> S:
        return self._inner.to_sql(value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._inner == other._inner  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._inner))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._inner!r})"


# to_json/from_json come from JsonTypeConverter and route through the
# null-aware to_sql/from_sql above.
class _NullWrappingTypeConverterWithJson(
    _NullWrappingTypeConverter[D, S],
    JsonTypeConverter[D | None, S | None],
):
    __slots__ = ()


def is_json_converter(converter: TypeConverter[Any, Any] | None) -> TypeGuard[JsonTypeConverter[Any, Any]]:
    """Check whether a converter should also be used for JSON serialization."""
    return isinstance(converter, JsonTypeConverter)
