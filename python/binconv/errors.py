"""
binconv Exceptions

All conversion failures derive from ConversionError, which is a ValueError
so callers treating malformed input as a value problem keep working.
"""


class ConversionError(ValueError):
    pass


class ParseError(ConversionError):
    """A token of unknown type reached the parser."""


class GenerationError(ConversionError):
    """A syntax node of unknown type reached the generator."""


class DecodeError(ConversionError):
    """A binary group could not be read back as a character."""


class ValidationError(ConversionError):
    """Input rejected before conversion (empty or missing terminator)."""
