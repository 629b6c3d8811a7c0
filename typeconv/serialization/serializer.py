"""JSON serialization honoring JSON-capable type converters."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from typeconv.converters import NullAwareTypeConverter, TypeConverter, is_json_converter

logger = logging.getLogger(__name__)


def _accepts_none(converter: TypeConverter[Any, Any], value: Any) -> bool:
    return value is not None or isinstance(converter, NullAwareTypeConverter)


class ValueSerializer:
    """
    Serializes single field values to and from JSON-compatible values.

    A field whose converter is a ``JsonTypeConverter`` goes through
    ``to_json``/``from_json``. Any other field is emitted as its raw storage
    primitive, unchanged.

    ``None`` is only handed to converters that are also null-aware, so those
    may give it a JSON form of their own; for every other converter ``None``
    stays ``None``.

    Example:
        serializer = ValueSerializer()
        serializer.to_json(Status.ACTIVE, EnumNameConverter(Status))  # -> "ACTIVE"
        serializer.to_json(3, EnumIndexConverter.for_enum(Status))    # -> 3

    """

    __slots__ = ()

    def to_json(self, value: Any, converter: TypeConverter[Any, Any] | None = None) -> Any:
        """Serialize a value, using ``converter`` only if it is JSON-capable."""
        if not is_json_converter(converter) or not _accepts_none(converter, value):
            return value
        return converter.to_json(value)

    def from_json(self, raw: Any, converter: TypeConverter[Any, Any] | None = None) -> Any:
        """Deserialize a value, using ``converter`` only if it is JSON-capable."""
        if not is_json_converter(converter) or not _accepts_none(converter, raw):
            return raw
        return converter.from_json(raw)


# Default serializer instance
default_serializer = ValueSerializer()


class CompiledSerializer:
    """
    Pre-compiled JSON serializer for a fixed set of fields.

    Resolves once which fields have JSON-capable converters, so repeated
    row conversions skip the capability check.

    Example:
        compiled = CompiledSerializer({"status": EnumNameConverter(Status)})
        compiled.dump_row({"status": Status.ACTIVE, "name": "Alice"})
        # -> {"status": "ACTIVE", "name": "Alice"}

    """

    __slots__ = ("_json_converters", "_serializer")

    def __init__(
        self,
        field_converters: Mapping[str, TypeConverter[Any, Any]],
        serializer: ValueSerializer | None = None,
    ) -> None:
        self._serializer = serializer or default_serializer
        self._json_converters: dict[str, TypeConverter[Any, Any]] = {}

        for name, converter in field_converters.items():
            if is_json_converter(converter):
                self._json_converters[name] = converter
            else:
                logger.debug(
                    "Field %s: %s is not JSON-capable, emitting raw value",
                    name,
                    type(converter).__name__,
                )
        logger.debug("Compiled JSON fields: %s", sorted(self._json_converters))

    @property
    def json_fields(self) -> frozenset[str]:
        """Names of fields serialized through their converter."""
        return frozenset(self._json_converters)

    def dump_row(self, row: Mapping[str, Any]) -> dict[str, Any]:
        """Serialize all values in a row dict."""
        result = dict(row)
        for name, converter in self._json_converters.items():
            if name in result:
                result[name] = self._serializer.to_json(result[name], converter)
        return result

    def load_row(self, row: Mapping[str, Any]) -> dict[str, Any]:
        """Deserialize all values in a row dict."""
        result = dict(row)
        for name, converter in self._json_converters.items():
            if name in result:
                result[name] = self._serializer.from_json(result[name], converter)
        return result

    def dump_value(self, name: str, value: Any) -> Any:
        """Serialize a single value by field name."""
        return self._serializer.to_json(value, self._json_converters.get(name))

    def load_value(self, name: str, raw: Any) -> Any:
        """Deserialize a single value by field name."""
        return self._serializer.from_json(raw, self._json_converters.get(name))
