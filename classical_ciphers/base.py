"""
Common cipher contract and name registry.

Every cipher takes its key material in the constructor and exposes a
text-to-text `encode` / `decode` pair.
"""

from abc import ABC, abstractmethod
from typing import Dict, Type

from .errors import UnknownCipher

CIPHERS: Dict[str, Type["ClassicalCipher"]] = {}


class ClassicalCipher(ABC):
    """Abstract base class for the substitution ciphers."""

    name: str = ""

    @abstractmethod
    def encode(self, text: str) -> str:
        ...

    @abstractmethod
    def decode(self, text: str) -> str:
        ...


def register(cls):
    """Class decorator adding a cipher to CIPHERS under its `name`."""
    CIPHERS[cls.name] = cls
    return cls


def get_cipher(name: str) -> Type[ClassicalCipher]:
    try:
        return CIPHERS[name.lower()]
    except KeyError:
        raise UnknownCipher(f"no cipher named {name!r}") from None
