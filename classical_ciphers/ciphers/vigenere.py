"""
Running-Key Cipher (Vigenère)
=============================
Each letter is shifted by the matching letter of a repeating key
("a" = 0 ... "z" = 25). The key advances one step for every character of
the input, letters or not, and non-letters pass through unchanged:

    key "lemon", "attackatdawn"  ->  "lxfopvefrnhr"

Historical note: Giovan Battista Bellaso, 1553; misattributed to Blaise
de Vigenère. "Le chiffre indéchiffrable" until Kasiski (1863).
"""

import logging
from itertools import cycle

from ..base import ClassicalCipher, register
from ..errors import EmptyKey, InvalidKey
from ..rings import UPPER, ring_for, shift_text

logger = logging.getLogger(__name__)


@register
class VigenereCipher(ClassicalCipher):
    """Vigenère cipher with a case-insensitive alphabetic key."""

    name = "vigenere"

    def __init__(self, key: str):
        if not key:
            raise EmptyKey()
        if not all(ring_for(c) for c in key):
            raise InvalidKey("Vigenère key must be alphabetic.")
        self._key    = key.upper()
        self._shifts = [UPPER.index(c) for c in self._key]
        logger.debug(f"VigenereCipher key length={len(self._key)}")

    @property
    def key(self) -> str:
        return self._key

    def encode(self, text: str) -> str:
        """Encode text. Case and non-letters are preserved."""
        return shift_text(text, cycle(self._shifts))

    def decode(self, text: str) -> str:
        return shift_text(text, cycle([-s for s in self._shifts]))
