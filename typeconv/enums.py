"""Converters for enum-like values."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from enum import Enum
from typing import Any, TypeVar

from typeconv.converters import JsonTypeConverter, TypeConverter
from typeconv.exceptions import ConversionError, InvalidIndexError

T = TypeVar("T", bound=Hashable)
E = TypeVar("E", bound=Enum)


class EnumIndexConverter(TypeConverter[T, int]):
    """
    Stores a member by its position in an ordered list of all members.

    The list order is the mapping: index ``i`` is ``values[i]``. Reordering
    or inserting members changes what already-stored indexes mean.

    Example:
        converter = EnumIndexConverter.for_enum(Color)
        converter.to_sql(Color.GREEN)  # -> 1
        converter.from_sql(2)          # -> Color.BLUE

    """

    __slots__ = ("_values", "_positions")

    def __init__(self, values: Sequence[T]) -> None:
        self._values: tuple[T, ...] = tuple(values)
        self._positions: dict[T, int] = {}
        for index, value in enumerate(self._values):
            self._positions.setdefault(value, index)

    @classmethod
    def for_enum(cls, enum_type: type[E]) -> EnumIndexConverter[E]:
        """Create a converter over all members of ``enum_type`` in definition order."""
        return cls(list(enum_type))  # type: ignore[arg-type, return-value]

    @property
    def values(self) -> tuple[T, ...]:
        """All members, in storage order."""
        return self._values

    def to_sql(self, value: T) -> int:
        try:
            return self._positions[value]
        except (KeyError, TypeError) as e:
            raise ConversionError(f"{value!r} is not one of the converter's values") from e

    def from_sql(self, raw: int) -> T:
        if not isinstance(raw, int) or isinstance(raw, bool):
            raise ConversionError(f"Enum index must be an int, got {raw!r}")
        # Negative indexes must not wrap around like plain list indexing.
        if not 0 <= raw < len(self._values):
            raise InvalidIndexError(raw, len(self._values))
        return self._values[raw]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnumIndexConverter):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(("EnumIndexConverter", self._values))

    def __repr__(self) -> str:
        return f"EnumIndexConverter({list(self._values)!r})"


class EnumNameConverter(JsonTypeConverter[E, str]):
    """
    Stores an ``Enum`` member by its name.

    Unlike ``EnumIndexConverter``, stored data survives reordering members;
    renaming a member breaks it instead.
    """

    __slots__ = ("_enum_type",)

    def __init__(self, enum_type: type[E]) -> None:
        self._enum_type = enum_type

    @property
    def enum_type(self) -> type[E]:
        return self._enum_type

    def to_sql(self, value: E) -> str:
        if not isinstance(value, self._enum_type):
            raise ConversionError(f"{value!r} is not a member of {self._enum_type.__name__}")
        return value.name

    def from_sql(self, raw: Any) -> E:
        try:
            return self._enum_type[raw]
        except (KeyError, TypeError) as e:
            raise ConversionError(
                f"{raw!r} is not a member name of {self._enum_type.__name__}"
            ) from e

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnumNameConverter):
            return NotImplemented
        return self._enum_type is other._enum_type

    def __hash__(self) -> int:
        return hash(("EnumNameConverter", self._enum_type))

    def __repr__(self) -> str:
        return f"EnumNameConverter({self._enum_type.__name__})"
