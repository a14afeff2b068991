"""
binconv Binary Decoder

Reads space-separated base-2 groups back into text. Works directly on
the binary string; the lexer and parser are not involved.
"""

import logging
from typing import List

from .errors import DecodeError
from .tokens import GROUP_SEPARATOR, decode_group

logger = logging.getLogger(__name__)


class BinaryDecoder:
    """Binary text to string decoder."""

    def __init__(self):
        self._groups: List[str] = []
        self._offset: int = 0

    def decode(self, binary: str) -> str:
        """
        Decode binary groups to text.

        Args:
            binary: Groups separated by single spaces, e.g. '1101000 1101001'

        Returns:
            Decoded text, e.g. 'hi'

        Raises:
            DecodeError: If a group is empty, not base-2, or not a code point
        """
        self._groups = binary.split(GROUP_SEPARATOR)
        self._offset = 0

        chars = []
        while self._offset < len(self._groups):
            chars.append(self._decode_next())

        logger.debug("Decoded %d groups", len(chars))
        return ''.join(chars)

    def _decode_next(self) -> str:
        group = self._groups[self._offset]
        try:
            char = decode_group(group)
        except ValueError as e:
            raise DecodeError(f"Group {self._offset}: {e}") from e
        self._offset += 1
        return char

    def reset(self) -> None:
        self._groups = []
        self._offset = 0


def decode(binary: str) -> str:
    decoder = BinaryDecoder()
    return decoder.decode(binary)
