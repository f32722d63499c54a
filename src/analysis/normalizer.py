"""Token canonicalization with fused alphabetic character counting."""

from __future__ import annotations

from string import ascii_lowercase, ascii_uppercase

# Every ASCII byte that is not a letter; non-ASCII code points are already gone
# after the ``ascii``/``ignore`` encode below.
_NON_LETTERS = bytes(code for code in range(128) if not chr(code).isalpha())
_LOWER = bytes.maketrans(ascii_uppercase.encode("ascii"), ascii_lowercase.encode("ascii"))


def canonicalize(token: str) -> str:
    """Drop everything except ASCII letters and lowercase the remainder.

    Tokens such as ``"123"`` or ``"---"`` map to the empty string.
    """
    return token.encode("ascii", "ignore").translate(_LOWER, _NON_LETTERS).decode("ascii")


class Normalizer:
    """Callable canonicalizer that also tallies the letters it keeps.

    The letters of a token are exactly the characters of its canonical form,
    so the running total is advanced from the canonical length without a
    second scan of the token.
    """

    def __init__(self) -> None:
        self.letters = 0

    def __call__(self, token: str) -> str:
        word = canonicalize(token)
        self.letters += len(word)
        return word

    def reset(self) -> None:
        self.letters = 0


__all__ = ["Normalizer", "canonicalize"]
