"""
JSON serialization built on typeconv converters.

This is where the JSON capability is checked: fields whose converter is a
``JsonTypeConverter`` go through ``to_json``/``from_json``, everything else
is emitted unchanged.

Usage:
    from typeconv.serialization import (
        ValueSerializer,
        CompiledSerializer,
        default_serializer,
    )

Example:
    from typeconv import EnumIndexConverter, EnumNameConverter
    from typeconv.serialization import CompiledSerializer

    compiled = CompiledSerializer({
        "status": EnumNameConverter(Status),
        "priority": EnumIndexConverter.for_enum(Priority),
    })
    compiled.dump_row({"status": Status.ACTIVE, "priority": 2})
    # -> {"status": "ACTIVE", "priority": 2}
"""

from typeconv.serialization.serializer import (
    CompiledSerializer,
    ValueSerializer,
    default_serializer,
)

__all__ = [
    "ValueSerializer",
    "CompiledSerializer",
    "default_serializer",
]
