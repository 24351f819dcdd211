"""
Shift Cipher (Caesar)
=====================
Every letter moves a fixed number of places along the alphabet, keeping
its case. Digits, punctuation and whitespace pass through untouched.

Historical note: Suetonius records Julius Caesar shifting by three.
Twenty-five keys, trivially brute-forced.
"""

import logging
from itertools import repeat

from ..base import ClassicalCipher, register
from ..errors import InvalidOffset
from ..rings import shift_text

logger = logging.getLogger(__name__)


@register
class CaesarCipher(ClassicalCipher):
    """Caesar shift by a positive integer offset."""

    name = "caesar"

    def __init__(self, offset: int):
        if not isinstance(offset, int) or isinstance(offset, bool) or offset < 1:
            raise InvalidOffset("expected positive integer offset")
        self._offset = offset
        logger.debug(f"CaesarCipher offset={offset}")

    @property
    def offset(self) -> int:
        return self._offset

    def encode(self, text: str) -> str:
        return shift_text(text, repeat(self._offset))

    def decode(self, text: str) -> str:
        return shift_text(text, repeat(-self._offset))
