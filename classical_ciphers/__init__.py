"""
classical_ciphers — Historical Substitution Ciphers
====================================================
Three classical ciphers over plain text. None of them is secure; they
are here for their mechanics.

Ciphers:
    caesar    — Shift cipher (fixed offset per letter)
    vigenere  — Running-key polyalphabetic cipher
    playfair  — Digram-grid cipher over a 5x5 key square

Shared infrastructure:
    AlphabetRing — wrapping 26-letter alphabet with signed movement
"""

__version__ = "1.0.0"

from .errors               import (CipherError, NotInAlphabet, EmptyKey,
                                   InvalidKey, InvalidOffset, UnknownCipher)
from .rings                import AlphabetRing
from .base                 import ClassicalCipher, CIPHERS, get_cipher
from .ciphers.caesar       import CaesarCipher
from .ciphers.vigenere     import VigenereCipher
from .ciphers.playfair     import PlayfairCipher, Grid, build_grid, segment

__all__ = [
    "AlphabetRing",
    "ClassicalCipher",
    "CIPHERS",
    "get_cipher",
    "CaesarCipher",
    "VigenereCipher",
    "PlayfairCipher",
    "Grid",
    "build_grid",
    "segment",
    "CipherError",
    "NotInAlphabet",
    "EmptyKey",
    "InvalidKey",
    "InvalidOffset",
    "UnknownCipher",
]
