"""
Error kinds raised by the cipher package.

All of them derive from ValueError so callers that only care about
"bad input" can catch that alone.
"""


class CipherError(ValueError):
    """Base class for every error raised by classical_ciphers."""


class NotInAlphabet(CipherError):
    """A ring or grid lookup was attempted for a character it does not hold."""

    def __init__(self, char: str):
        super().__init__(f"{char!r} is not in the alphabet")
        self.char = char


class EmptyKey(CipherError):
    """The key normalizes to zero letters."""

    def __init__(self):
        super().__init__("empty key")


class InvalidKey(CipherError):
    pass


class InvalidOffset(CipherError):
    pass


class UnknownCipher(CipherError):
    pass
