"""
binconv - String and Binary Converter
"""

__version__ = "0.1.0"

from .tokens import TokenType, Token, TERMINATOR
from .nodes import NodeType, Node
from .lexer import Lexer, tokenize
from .parser import Parser, parse
from .encoder import BinaryEncoder, generate, encode
from .decoder import BinaryDecoder, decode
from .compiler import convert, convert_input, validate_input, looks_like_binary
from .errors import (
    ConversionError,
    ParseError,
    GenerationError,
    DecodeError,
    ValidationError,
)

__all__ = [
    "TokenType",
    "Token",
    "TERMINATOR",
    "NodeType",
    "Node",
    "Lexer",
    "tokenize",
    "Parser",
    "parse",
    "BinaryEncoder",
    "generate",
    "encode",
    "BinaryDecoder",
    "decode",
    "convert",
    "convert_input",
    "validate_input",
    "looks_like_binary",
    "ConversionError",
    "ParseError",
    "GenerationError",
    "DecodeError",
    "ValidationError",
]
