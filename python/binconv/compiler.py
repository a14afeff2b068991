"""
binconv Compiler

Entry point that decides which way to convert:
- Input that is only 0/1/whitespace followed by the terminator is decoded
- Anything else is lexed, parsed and encoded to binary

Also provides the caller-side validation that rejects empty input and
input without the trailing terminator.
"""

import logging
import re

from .decoder import decode
from .encoder import encode
from .errors import ValidationError
from .tokens import TERMINATOR

logger = logging.getLogger(__name__)


BINARY_PATTERN = re.compile(r'[01\s]+' + re.escape(TERMINATOR))

EMPTY_INPUT_MESSAGE = 'Input cannot be empty.'
MISSING_TERMINATOR_MESSAGE = 'Invalid login! Finally entered "!" must be.'


def looks_like_binary(text: str) -> bool:
    """Check if text (already trimmed) is binary digits closed by the terminator."""
    return BINARY_PATTERN.fullmatch(text) is not None


def convert(text: str) -> str:
    """
    Convert text to binary, or binary back to text.

    Binary wins when the input qualifies, so '11!' decodes to '\\x03'
    rather than encoding the characters '1' and '1'.

    Args:
        text: Text such as 'hi!' or binary such as '1101000 1101001!'

    Returns:
        The converted string

    Raises:
        DecodeError: If binary input holds a group that is not a character
    """
    trimmed = text.strip()
    if looks_like_binary(trimmed):
        logger.debug("Routing %d chars to decoder", len(trimmed))
        return decode(trimmed[:-1])

    # The untrimmed text goes to the lexer; the terminator becomes a token
    logger.debug("Routing %d chars to encoder", len(text))
    return encode(text)


def validate_input(text: str) -> None:
    """
    Reject input the converter should never see.

    Raises:
        ValidationError: If text is blank or does not end with the terminator
    """
    if not text.strip():
        raise ValidationError(EMPTY_INPUT_MESSAGE)
    if not BINARY_PATTERN.fullmatch(text) and not text.endswith(TERMINATOR):
        raise ValidationError(MISSING_TERMINATOR_MESSAGE)


def convert_input(text: str) -> str:
    """Validate then convert, as a front end would."""
    validate_input(text)
    return convert(text)
