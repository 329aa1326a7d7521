"""Word sets used as a memorable numeral alphabet.

A vocabulary of ``k`` words turns an index into base-``k`` digits, each digit
replaced by its word.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, Sequence, Tuple, Union

from .base_n import from_base_digits, to_base_digits
from .exceptions import InvalidEncoding, InvalidLanguage

SEPARATOR = "-"


class Language(str, Enum):
    ENGLISH = "English"
    KOREAN = "Korean"

    @classmethod
    def parse(cls, value: Union["Language", str]) -> "Language":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidLanguage(f"Invalid language: {value!r}")
        for language in cls:
            if value.lower() in (language.value.lower(), language.name.lower()):
                return language
        raise InvalidLanguage(f"Invalid language: {value}")


WORD_SET_BASE_COUNT: Dict[Language, int] = {
    Language.ENGLISH: 6000,
    Language.KOREAN: 5630,
}


class WordSet:
    def __init__(self, words: Iterable[str]) -> None:
        self.words: Tuple[str, ...] = tuple(words)
        if len(self.words) < 2:
            raise InvalidEncoding("a word set needs at least 2 words")
        self._index: Dict[str, int] = {}
        for digit, word in enumerate(self.words):
            if SEPARATOR in word:
                raise InvalidEncoding(f"word {word!r} contains {SEPARATOR!r}")
            if word in self._index:
                raise InvalidEncoding(f"duplicate word {word!r} in word set")
            self._index[word] = digit

    def __len__(self) -> int:
        return len(self.words)

    def __getitem__(self, digit: int) -> str:
        return self.words[digit]

    @property
    def base(self) -> int:
        return len(self.words)

    def digit_of(self, word: str) -> int:
        try:
            return self._index[word]
        except KeyError:
            raise InvalidEncoding(f"unknown word {word!r}") from None


Vocabulary = Union[WordSet, Sequence[str]]


def _as_word_set(vocabulary: Vocabulary) -> WordSet:
    if isinstance(vocabulary, WordSet):
        return vocabulary
    return WordSet(vocabulary)


def encode_by_word_set(n: int, vocabulary: Vocabulary) -> str:
    word_set = _as_word_set(vocabulary)
    digits = to_base_digits(n, word_set.base)
    return SEPARATOR.join(word_set[digit] for digit in digits)


def decode_by_word_set(encoded: Union[str, Sequence[str]], vocabulary: Vocabulary) -> int:
    word_set = _as_word_set(vocabulary)
    words = encoded.split(SEPARATOR) if isinstance(encoded, str) else list(encoded)
    if not words or not all(words):
        raise InvalidEncoding(f"empty word in {encoded!r}")
    digits = [word_set.digit_of(word) for word in words]
    return from_base_digits(digits, word_set.base)
