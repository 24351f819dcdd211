"""
Digram-Grid Cipher (Playfair)
=============================
Letters are enciphered in pairs (digrams) through a 5x5 key square.

    Key square for "playfair example":

        P L A Y F
        I R E X M
        B C D G H
        K N O Q S
        T U V W Z

Each digram is located in the square and transformed by one of three
geometric rules:

  • Same row      — each letter takes its right-hand neighbour (wrapping)
  • Same column   — each letter takes the letter below it (wrapping)
  • Rectangle     — each letter keeps its row and takes the other's column

Decoding runs the row and column rules in the opposite direction; the
rectangle rule is its own inverse.

The square holds 25 letters, so I and J share one cell: whichever of the
two reaches the square first is placed and the other is never used.

Historical note: Charles Wheatstone, 1854; promoted by Lord Playfair.
Used by British forces in the Boer War and the First World War.

Lossy by construction: digits, punctuation and spaces are dropped, and
odd lengths and doubled letters are padded with X. Output is grouped in
space-separated pairs.
"""

import logging
from enum import Enum
from typing import Dict, List, NamedTuple, Tuple

from ..base import ClassicalCipher, register
from ..errors import EmptyKey, NotInAlphabet
from ..rings import UPPER, ring_for

logger = logging.getLogger(__name__)

Digram = Tuple[str, str]


def normalize(text: str) -> str:
    """Strip everything that is not an ASCII letter from `text`, then uppercase it."""
    return "".join(c for c in text if ring_for(c)).upper()


# ─────────────────────────────────────────────────────────────────────────────
# Key square
# ─────────────────────────────────────────────────────────────────────────────

class GridPosition(NamedTuple):
    row: int
    col: int


class Grid:
    """
    Immutable 5x5 key square with a letter → position index built
    alongside it. Use `build_grid` rather than constructing directly.
    """

    SIZE = 5
    INTERCHANGEABLE = ("I", "J")

    def __init__(self, rows: List[List[str]]):
        self._rows = tuple(tuple(r) for r in rows)
        self._positions: Dict[str, GridPosition] = {
            letter: GridPosition(i, j)
            for i, row in enumerate(self._rows)
            for j, letter in enumerate(row)
        }
        # The elided member of {I, J} resolves to its partner's cell
        first, second = self.INTERCHANGEABLE
        if first in self._positions:
            self._positions[second] = self._positions[first]
        else:
            self._positions[first] = self._positions[second]

    @property
    def rows(self) -> Tuple[Tuple[str, ...], ...]:
        return self._rows

    def letters(self) -> str:
        return "".join("".join(row) for row in self._rows)

    def position(self, letter: str) -> GridPosition:
        try:
            return self._positions[letter]
        except KeyError:
            raise NotInAlphabet(letter) from None

    def at(self, row: int, col: int) -> str:
        return self._rows[row % self.SIZE][col % self.SIZE]

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)

    def __str__(self):
        return "\n".join(" ".join(row) for row in self._rows)

    def __repr__(self):
        return f"Grid({self.letters()!r})"


def build_grid(key: str) -> Grid:
    """
    Build the key square for `key`.

    Cells are filled row by row from the normalized key, then from the
    alphabet in order. A candidate is skipped if it is already placed, or
    if it is I or J and its partner is already placed. An empty key is
    accepted and yields the bare alphabet square (A B C D E / F G H I K ...).
    """
    key      = normalize(key)
    alphabet = UPPER.letters
    pair     = set(Grid.INTERCHANGEABLE)
    used: List[str] = []
    key_pos = alpha_pos = 0

    def next_candidate() -> str:
        nonlocal key_pos, alpha_pos
        if key_pos < len(key):
            key_pos += 1
            return key[key_pos - 1]
        alpha_pos += 1
        return alphabet[alpha_pos - 1]

    def rejected(letter: str) -> bool:
        if letter in used:
            return True
        return letter in pair and any(u in pair for u in used)

    rows = []
    for _ in range(Grid.SIZE):
        row = []
        for _ in range(Grid.SIZE):
            letter = next_candidate()
            while rejected(letter):
                letter = next_candidate()
            used.append(letter)
            row.append(letter)
        rows.append(row)

    grid = Grid(rows)
    logger.debug(f"Built key square {grid.letters()}")
    return grid


# ─────────────────────────────────────────────────────────────────────────────
# Segmentation
# ─────────────────────────────────────────────────────────────────────────────

FILLER = "X"


def segment(text: str) -> List[Digram]:
    """
    Split `text` into digrams after normalizing it.

    A pair of identical letters is broken with the filler X (the second
    letter starts the next digram); a lone trailing letter is padded
    with X. A trailing X is itself padded with X.
    """
    chars   = normalize(text)
    digrams = []
    i = 0
    while i < len(chars):
        first = chars[i]
        if i + 1 < len(chars) and chars[i + 1] != first:
            digrams.append((first, chars[i + 1]))
            i += 2
        else:
            digrams.append((first, FILLER))
            i += 1
    return digrams


# ─────────────────────────────────────────────────────────────────────────────
# Digram transformation
# ─────────────────────────────────────────────────────────────────────────────

class Direction(Enum):
    ENCODE = 1
    DECODE = -1

    @property
    def step(self) -> int:
        return self.value


class Shape(Enum):
    ROW       = "row"
    COLUMN    = "column"
    RECTANGLE = "rectangle"


def classify(first: GridPosition, second: GridPosition) -> Shape:
    if first.row == second.row:
        return Shape.ROW
    if first.col == second.col:
        return Shape.COLUMN
    return Shape.RECTANGLE


def transform(digram: Digram, grid: Grid, direction: Direction) -> Digram:
    """
    Encode or decode one digram. The two letters are expected to differ;
    `segment` guarantees this except for the XX pad, which falls to the
    row rule.
    """
    a, b  = grid.position(digram[0]), grid.position(digram[1])
    step  = direction.step
    shape = classify(a, b)

    if shape is Shape.ROW:
        return grid.at(a.row, a.col + step), grid.at(b.row, b.col + step)
    if shape is Shape.COLUMN:
        return grid.at(a.row + step, a.col), grid.at(b.row + step, b.col)
    return grid.at(a.row, b.col), grid.at(b.row, a.col)


# ─────────────────────────────────────────────────────────────────────────────
# Engine
# ─────────────────────────────────────────────────────────────────────────────

@register
class PlayfairCipher(ClassicalCipher):
    """Playfair digram cipher over a 5x5 key square."""

    name      = "playfair"
    FILLER    = FILLER
    SEPARATOR = " "

    def __init__(self, key: str):
        if not normalize(key):
            raise EmptyKey()
        self._grid = build_grid(key)

    @property
    def grid(self) -> Grid:
        return self._grid

    def _run(self, text: str, direction: Direction) -> str:
        digrams = segment(text)
        out = [transform(dg, self._grid, direction) for dg in digrams]
        logger.debug(f"Playfair {direction.name.lower()}: {len(out)} digrams")
        return self.SEPARATOR.join(a + b for a, b in out)

    def encode(self, text: str) -> str:
        """Encode text into space-separated digrams."""
        return self._run(text, Direction.ENCODE)

    def decode(self, text: str) -> str:
        """
        Decode space-separated digrams. Padding X's are left in place,
        since they cannot be told apart from a genuine X.

        An XX pad encodes to a doubled pair, which is re-split with X on
        the way back: with key "playfair example", "box" encodes to
        "DK MM" and that decodes to "BO XE XE".
        """
        return self._run(text, Direction.DECODE)


def encode(key: str, text: str) -> str:
    return PlayfairCipher(key).encode(text)


def decode(key: str, text: str) -> str:
    return PlayfairCipher(key).decode(text)
