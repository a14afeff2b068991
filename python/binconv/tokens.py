"""
binconv Token Types and Character Encoding Utilities

Defines the token model shared by the lexer and parser, and the
per-character helpers used by the encoder and decoder:
- Character to binary group (no padding)
- Binary group to character
"""

import re
from dataclasses import dataclass
from enum import Enum

# Format constants
TERMINATOR = '!'
GROUP_SEPARATOR = ' '

# Highest value accepted by chr()
MAX_CODE_POINT = 0x10FFFF

# UTF-16 surrogates; chr() accepts them but they cannot be encoded
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF

GROUP_PATTERN = re.compile(r'[01]+')


class TokenType(Enum):
    """Token kinds produced by the lexer."""

    STRING = 'STRING'     # run of non-terminator characters
    END_OP = 'END_OP'     # the terminator


@dataclass(frozen=True)
class Token:
    """
    A single lexer token.

    Attributes:
        type: Token kind
        value: Text payload (the terminator itself for END_OP)
    """
    type: TokenType
    value: str = ''


def string_token(value: str) -> Token:
    return Token(TokenType.STRING, value)


def end_token() -> Token:
    return Token(TokenType.END_OP, TERMINATOR)


def encode_char(char: str) -> str:
    """
    Encode a character as its code point in base 2.

    The result has no fixed width: 'h' (104) becomes '1101000'
    and '\\x01' becomes '1'.
    """
    return format(ord(char), 'b')


def is_binary_group(group: str) -> bool:
    """Check if group is a non-empty run of '0' and '1'."""
    return GROUP_PATTERN.fullmatch(group) is not None


def decode_group(group: str) -> str:
    """
    Decode a single binary group to its character.

    Args:
        group: Base-2 digits, e.g. '1101000'

    Returns:
        The character with that code point

    Raises:
        ValueError: If group is not base-2, out of code point range,
            or a surrogate
    """
    if not is_binary_group(group):
        raise ValueError(f"Invalid binary group: {group!r}")

    code = int(group, 2)
    if code > MAX_CODE_POINT:
        raise ValueError(f"Code point out of range: {group!r}")
    if SURROGATE_MIN <= code <= SURROGATE_MAX:
        raise ValueError(f"Surrogate code point: {group!r}")
    return chr(code)
