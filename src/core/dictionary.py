"""Dictionary lookups: is this a real word in the given language?"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Protocol

from wordfreq import zipf_frequency

log = logging.getLogger("wordscramble.dictionary")

DEFAULT_LANGUAGE = "en"
DEFAULT_ZIPF_THRESHOLD = 2.5


class DictionaryOracle(Protocol):
    """Anything that can tell whether `word` is a recognized word of `language`."""

    def is_recognized_word(self, word: str, language: str) -> bool:
        ...


class WordSetOracle:
    """
    Offline oracle backed by a fixed set of words.

    Handy for tests and for playing without the frequency tables. Words of
    any language other than the one it was built for are never recognized.
    """

    def __init__(self, words: Iterable[str], language: str = DEFAULT_LANGUAGE):
        self.language = language.lower()
        self.words: FrozenSet[str] = frozenset(w.strip().lower() for w in words if w.strip())

    @classmethod
    def from_file(cls, path: Path | str, language: str = DEFAULT_LANGUAGE) -> WordSetOracle:
        with open(path, "r", encoding="utf-8") as f:
            words = [line for line in f]
        oracle = cls(words, language=language)
        log.info("Loaded %s dictionary words from %s", f"{len(oracle.words):,}", path)
        return oracle

    def is_recognized_word(self, word: str, language: str) -> bool:
        if language.lower() != self.language:
            return False
        return word.lower() in self.words


class WordfreqOracle:
    """
    Oracle backed by `wordfreq` frequency tables.

    A word counts as real when its Zipf frequency reaches `threshold`
    (2.5 is roughly "appears once per 3 million words").
    """

    def __init__(self, threshold: Optional[float] = None):
        if threshold is None:
            threshold = float(os.getenv("WORDSCRAMBLE_ZIPF_THRESHOLD", DEFAULT_ZIPF_THRESHOLD))
        self.threshold = threshold

    def is_recognized_word(self, word: str, language: str) -> bool:
        try:
            freq = zipf_frequency(word, language)
        except (LookupError, ValueError) as exc:
            log.warning("Dictionary lookup failed for %r (%s): %s", word, language, exc)
            return False
        return freq >= self.threshold


def default_oracle() -> DictionaryOracle:
    return WordfreqOracle()
