"""Tokenization and string similarity used by the classifier fallbacks."""

from __future__ import annotations

import re
from collections import Counter

_WORD_RE = re.compile(r"[^\W_]+")
_WHITESPACE_RE = re.compile(r"\s+")


def tokenize(text: str) -> list[str]:
    """Split ``text`` into lower-cased runs of alphanumeric characters.

    Punctuation, underscores and whitespace all act as separators.
    """
    return _WORD_RE.findall(text.lower())


def token_frequencies(text: str) -> Counter[str]:
    """Count occurrences of each token in ``text``."""
    return Counter(tokenize(text))


def _bigrams(text: str) -> Counter[str]:
    return Counter(text[i:i + 2] for i in range(len(text) - 1))


def dice_similarity(first: str, second: str) -> float:
    """Sørensen-Dice coefficient over character bigrams, whitespace ignored.

    Returns a value in ``[0, 1]``. Identical strings score 1; strings
    shorter than two characters share no bigrams and score 0. Comparison is
    case-sensitive.
    """
    first = _WHITESPACE_RE.sub("", first)
    second = _WHITESPACE_RE.sub("", second)

    if first == second:
        return 1.0
    if len(first) < 2 or len(second) < 2:
        return 0.0

    first_bigrams = _bigrams(first)
    second_bigrams = _bigrams(second)
    overlap = sum((first_bigrams & second_bigrams).values())
    return (2.0 * overlap) / (len(first) + len(second) - 2)
