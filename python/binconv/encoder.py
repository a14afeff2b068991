"""
binconv Binary Encoder

Walks a syntax tree and renders each character of every string
literal as its unpadded base-2 code:
- Characters within a literal are separated by a single space
- Children of a program are concatenated with no separator
- The end operator contributes nothing
"""

import logging

from .errors import GenerationError
from .lexer import tokenize
from .nodes import Node, NodeType
from .parser import parse
from .tokens import GROUP_SEPARATOR, encode_char

logger = logging.getLogger(__name__)


class BinaryEncoder:
    """Syntax tree to binary text generator."""

    def encode(self, text: str) -> str:
        """
        Encode terminator-delimited text.

        Runs the full lexer -> parser -> generator pipeline.

        Args:
            text: Input such as 'hi!'

        Returns:
            Binary groups, e.g. '1101000 1101001'
        """
        return self.generate(parse(tokenize(text)))

    def generate(self, node: Node) -> str:
        """
        Generate binary text for a node.

        Raises:
            GenerationError: If node has an unknown type
        """
        if node.type is NodeType.PROGRAM:
            # Adjacent literals are joined without a separator
            return ''.join(self.generate(child) for child in node.body)
        if node.type is NodeType.STRING_LITERAL:
            return self._encode_literal(node.value)
        if node.type is NodeType.END_OPERATOR:
            return ''

        raise GenerationError(f"Unknown node type: {node.type!r}")

    def _encode_literal(self, value: str) -> str:
        groups = [encode_char(char) for char in value]
        logger.debug("Encoded literal of %d chars", len(groups))
        return GROUP_SEPARATOR.join(groups)


def generate(node: Node) -> str:
    encoder = BinaryEncoder()
    return encoder.generate(node)


def encode(text: str) -> str:
    encoder = BinaryEncoder()
    return encoder.encode(text)
