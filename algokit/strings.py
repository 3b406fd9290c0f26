"""String puzzles: palindromes, phone keypad words, and replacing 3.14 with pi."""

from __future__ import annotations

from itertools import product
from typing import Iterator

KEYPAD = {
    "0": " ",
    "1": "abc",
    "2": "def",
    "3": "ghi",
    "4": "jkl",
    "5": "mno",
    "6": "pqrs",
    "7": "tuv",
    "8": "wx",
    "9": "yz",
}


def is_palindrome(word: str) -> bool:
    """Whether ``word`` reads the same backwards, case-sensitively."""
    return word == word[::-1]


def keypad_codes(digits: str) -> Iterator[str]:
    """All letter sequences that the digit string can spell on the keypad."""
    try:
        groups = [KEYPAD[d] for d in digits]
    except KeyError as exc:
        raise ValueError(f"not a keypad digit: {exc.args[0]!r}") from None
    return ("".join(combo) for combo in product(*groups))


def replace_pi(text: str) -> str:
    """Replace every occurrence of ``3.14`` with ``pi``, scanning left to right."""
    return text.replace("3.14", "pi")