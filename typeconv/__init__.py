__version__ = "0.1.0"

from typeconv.converters import (
    JsonTypeConverter,
    NullAwareTypeConverter,
    TypeConverter,
    is_json_converter,
)
from typeconv.enums import EnumIndexConverter, EnumNameConverter
from typeconv.exceptions import ConversionError, InvalidIndexError, TypeConvError
from typeconv.types import SQL_PRIMITIVE_TYPES, SqlPrimitive

__all__ = [
    # Converter contract
    "TypeConverter",
    "JsonTypeConverter",
    "NullAwareTypeConverter",
    "is_json_converter",
    # Converters
    "EnumIndexConverter",
    "EnumNameConverter",
    # Storage primitives
    "SqlPrimitive",
    "SQL_PRIMITIVE_TYPES",
    # Exceptions
    "TypeConvError",
    "ConversionError",
    "InvalidIndexError",
    # Version
    "__version__",
]
