"""
binconv Lexer

Splits raw input into STRING and END_OP tokens in a single
left-to-right pass. Any character other than the terminator is
accepted into a STRING token, so the lexer never fails.
"""

import logging
from typing import List

from .tokens import TERMINATOR, Token, string_token, end_token

logger = logging.getLogger(__name__)


class Lexer:
    """Single-pass tokenizer for terminator-delimited text."""

    def __init__(self):
        self._text: str = ''
        self._offset: int = 0

    def tokenize(self, text: str) -> List[Token]:
        """
        Tokenize text.

        Args:
            text: Raw input, e.g. 'hi!'

        Returns:
            Tokens in input order, e.g. [STRING 'hi', END_OP '!']
        """
        self._text = text
        self._offset = 0

        tokens = []
        while self._offset < len(self._text):
            if self._text[self._offset] == TERMINATOR:
                tokens.append(end_token())
                self._offset += 1
                continue
            tokens.append(string_token(self._read_string()))

        logger.debug("Tokenized %d chars into %d tokens", len(text), len(tokens))
        return tokens

    def _read_string(self) -> str:
        start = self._offset
        while self._offset < len(self._text) and self._text[self._offset] != TERMINATOR:
            self._offset += 1
        return self._text[start:self._offset]

    def reset(self) -> None:
        self._text = ''
        self._offset = 0


def tokenize(text: str) -> List[Token]:
    lexer = Lexer()
    return lexer.tokenize(text)
