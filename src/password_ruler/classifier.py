"""
ASCII character classes.

A class is a fixed membership table over the 128 ASCII code points. Characters above
that range never belong to an ASCII class. Whitespace is the one exception: it's tested
with :meth:`str.isspace`, so any Unicode whitespace is recognized.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Self

__all__ = (
    "ASCII_MAX",
    "AsciiClassifier",
    "ASCII_LOWERCASE_LETTER_CHARACTERS",
    "ASCII_UPPERCASE_LETTER_CHARACTERS",
    "ASCII_LETTER_CHARACTERS",
    "ASCII_DIGIT_CHARACTERS",
    "ASCII_ALPHANUMERIC_CHARACTERS",
    "ASCII_SYMBOL_CHARACTERS",
    "ASCII_LOWERCASE_LETTERS",
    "ASCII_UPPERCASE_LETTERS",
    "ASCII_LETTERS",
    "ASCII_DIGITS",
    "ASCII_ALPHANUMERIC",
    "ASCII_SYMBOLS",
    "is_whitespace",
)

ASCII_MAX = 0x7F

_TABLE_SIZE = ASCII_MAX + 1


@dataclass(frozen=True, slots=True)
class AsciiClassifier:
    """
    Membership test for a set of ASCII characters.

    Example::

        >>> vowels = AsciiClassifier.from_characters("aeiou")
        >>> vowels.count_matches("password")
        2
        >>> (vowels | AsciiClassifier.from_characters("s")).count_matches("password")
        4
    """

    table: tuple[bool, ...]

    def __post_init__(self) -> None:
        if len(self.table) != _TABLE_SIZE:
            raise ValueError(
                "Expected a table of %d entries, got %d" % (_TABLE_SIZE, len(self.table))
            )

    @classmethod
    def from_characters(cls, characters: Iterable[str]) -> Self:
        table = [False] * _TABLE_SIZE
        for char in characters:
            code = ord(char)
            if code > ASCII_MAX:
                raise ValueError("Character %r is not an ASCII character" % char)
            table[code] = True
        return cls(tuple(table))

    def matches(self, char: str) -> bool:
        code = ord(char)
        return code <= ASCII_MAX and self.table[code]

    def union(self, other: "AsciiClassifier") -> "AsciiClassifier":
        return AsciiClassifier(tuple(a | b for a, b in zip(self.table, other.table)))

    def intersection(self, other: "AsciiClassifier") -> "AsciiClassifier":
        return AsciiClassifier(tuple(a & b for a, b in zip(self.table, other.table)))

    def count_matches(self, text: str) -> int:
        return sum(1 for char in text if self.matches(char))

    def __or__(self, other: "AsciiClassifier") -> "AsciiClassifier":
        return self.union(other)

    def __and__(self, other: "AsciiClassifier") -> "AsciiClassifier":
        return self.intersection(other)

    def __contains__(self, char: str) -> bool:
        return self.matches(char)

    def __repr__(self) -> str:
        members = "".join(chr(code) for code, hit in enumerate(self.table) if hit)
        return "%s(%r)" % (type(self).__name__, members)


def is_whitespace(char: str) -> bool:
    return char.isspace()


ASCII_LOWERCASE_LETTER_CHARACTERS = "abcdefghijklmnopqrstuvwxyz"
ASCII_UPPERCASE_LETTER_CHARACTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ASCII_LETTER_CHARACTERS = ASCII_LOWERCASE_LETTER_CHARACTERS + ASCII_UPPERCASE_LETTER_CHARACTERS
ASCII_DIGIT_CHARACTERS = "0123456789"
ASCII_ALPHANUMERIC_CHARACTERS = ASCII_LETTER_CHARACTERS + ASCII_DIGIT_CHARACTERS
ASCII_SYMBOL_CHARACTERS = ",.;:?!+-*/=[](){}_@&\"'`$#%^~|<>\\"

# Built once at import time and never mutated afterwards.
ASCII_LOWERCASE_LETTERS = AsciiClassifier.from_characters(
    ASCII_LOWERCASE_LETTER_CHARACTERS
)
ASCII_UPPERCASE_LETTERS = AsciiClassifier.from_characters(
    ASCII_UPPERCASE_LETTER_CHARACTERS
)
ASCII_LETTERS = ASCII_LOWERCASE_LETTERS | ASCII_UPPERCASE_LETTERS
ASCII_DIGITS = AsciiClassifier.from_characters(ASCII_DIGIT_CHARACTERS)
ASCII_ALPHANUMERIC = ASCII_LETTERS | ASCII_DIGITS
ASCII_SYMBOLS = AsciiClassifier.from_characters(ASCII_SYMBOL_CHARACTERS)
