"""Custom exceptions for typeconv."""


class TypeConvError(Exception):
    """Base exception for typeconv."""


class ConversionError(TypeConvError, ValueError):
    """A value could not be converted to or from its storage representation."""


class InvalidIndexError(ConversionError, IndexError):
    """A stored enum index has no corresponding member."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Enum index {index} out of range for {size} members")
