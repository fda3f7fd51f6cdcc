"""Count the distinct Morse code spellings of a list of words."""

from __future__ import annotations

from string import ascii_lowercase
from typing import Iterable

MORSE_CODE = dict(
    zip(
        ascii_lowercase,
        [
            ".-", "-...", "-.-.", "-..", ".", "..-.", "--.", "....", "..",
            ".---", "-.-", ".-..", "--", "-.", "---", ".--.", "--.-", ".-.",
            "...", "-", "..-", "...-", ".--", "-..-", "-.--", "--..",
        ],
    )
)


def _transform(word: str) -> str:
    try:
        return "".join(MORSE_CODE[letter] for letter in word)
    except KeyError as exc:
        raise ValueError(f"not a lowercase letter: {exc.args[0]!r}") from None


def unique_morse_representations(words: Iterable[str]) -> int:
    """Return how many different Morse strings the words turn into.

    Words must consist of lowercase ASCII letters; anything else raises
    ValueError.
    """
    return len({_transform(word) for word in words})