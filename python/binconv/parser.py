"""
binconv Parser

Builds a Program node from a token list, one child per token,
preserving token order. No lookahead beyond the current token.
"""

import logging
from typing import List, Sequence

from .errors import ParseError
from .nodes import Node, program, string_literal, end_operator
from .tokens import Token, TokenType

logger = logging.getLogger(__name__)


class Parser:
    """Linear token-to-node parser."""

    def __init__(self):
        self._tokens: Sequence[Token] = ()
        self._offset: int = 0

    def parse(self, tokens: Sequence[Token]) -> Node:
        """
        Parse tokens into a Program node.

        Args:
            tokens: Output of the lexer

        Returns:
            Program node whose body mirrors the tokens

        Raises:
            ParseError: If a token has an unknown type
        """
        self._tokens = tokens
        self._offset = 0

        body: List[Node] = []
        while self._offset < len(self._tokens):
            body.append(self._walk())

        logger.debug("Parsed %d tokens", len(body))
        return program(*body)

    def _walk(self) -> Node:
        token = self._read_token()

        if token.type is TokenType.STRING:
            return string_literal(token.value)
        if token.type is TokenType.END_OP:
            return end_operator(token.value)

        raise ParseError(f"Unknown token type: {token.type!r}")

    def _read_token(self) -> Token:
        token = self._tokens[self._offset]
        self._offset += 1
        return token

    def reset(self) -> None:
        self._tokens = ()
        self._offset = 0


def parse(tokens: Sequence[Token]) -> Node:
    parser = Parser()
    return parser.parse(tokens)
