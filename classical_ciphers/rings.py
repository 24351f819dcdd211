"""
Alphabet rings
==============
An ordered, wrapping 26-letter alphabet in one case. Every cipher in the
package moves letters around one of these: the shift cipher by a fixed
offset, the running-key cipher by the key letter, and the digram cipher
uses the upper-case ring to pad its key square.

Movement is modular in both directions, so `move("a", -1)` is "z" and
`move("z", 2)` is "b".
"""

import logging
import string

from .errors import NotInAlphabet

logger = logging.getLogger(__name__)


class AlphabetRing:
    """Read-only circular alphabet of one letter case."""

    SIZE = 26

    def __init__(self, lower: bool = False):
        self._lower   = lower
        self._letters = string.ascii_lowercase if lower else string.ascii_uppercase
        self._index   = {c: i for i, c in enumerate(self._letters)}

    @property
    def lower(self) -> bool:
        return self._lower

    @property
    def letters(self) -> str:
        return self._letters

    def contains(self, char: str) -> bool:
        return char in self._index

    __contains__ = contains

    def index(self, char: str) -> int:
        """Position of `char` in the ring (0-25)."""
        try:
            return self._index[char]
        except KeyError:
            raise NotInAlphabet(char) from None

    def move(self, char: str, offset: int) -> str:
        """
        Return the letter `offset` places after `char` (before, if negative),
        wrapping around the ring. Raises NotInAlphabet for non-members.
        """
        return self._letters[(self.index(char) + offset) % self.SIZE]

    def __iter__(self):
        return iter(self._letters)

    def __len__(self) -> int:
        return self.SIZE

    def __repr__(self):
        return f"AlphabetRing(lower={self._lower})"


LOWER = AlphabetRing(lower=True)
UPPER = AlphabetRing(lower=False)


def ring_for(char: str):
    """Ring holding `char`, or None when it is not an ASCII letter."""
    if LOWER.contains(char):
        return LOWER
    if UPPER.contains(char):
        return UPPER
    return None


def shift_text(text: str, offsets) -> str:
    """
    Move every letter of `text` by the matching entry of `offsets` on the
    ring of its own case. Non-letters pass through and still consume an
    offset. The whole string is translated before anything is returned, so
    a failing lookup leaves no partial output.
    """
    result = [None] * len(text)
    for pos, (ch, offset) in enumerate(zip(text, offsets)):
        ring = ring_for(ch)
        result[pos] = ring.move(ch, offset) if ring is not None else ch
    logger.debug(f"Shifted {len(text)} chars")
    return "".join(result)
