from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class GameState:
    """
    Immutable container for the WordScramble game state.

    Notes
    -----
    - This object is treated as immutable (`frozen=True`) so that the engine
      can "return a new state" after each accepted word, which keeps a
      rejected submission from ever touching the current state.
    - All rule checks (length, originality, spellability, dictionary) live in
      `core.engine`; this file only defines the data structure and basic
      normalization.
    """

    # Core fields
    root_word: str
    used_words: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """
        Normalize and validate fields.

        Normalization
        -------------
        - `root_word` is stripped and lowercased.
        - `used_words` is coerced to a tuple (most-recent-first order is kept).

        Validation
        ----------
        - `root_word` must be non-empty.
        """
        # Because dataclass is frozen, use object.__setattr__ for normalization.
        rw = (self.root_word or "").strip().lower()
        if not rw:
            raise ValueError("`root_word` must be a non-empty word.")
        object.__setattr__(self, "root_word", rw)
        object.__setattr__(self, "used_words", tuple(self.used_words or ()))

    @property
    def score(self) -> int:
        """One point per word plus one point per letter."""
        return len(self.used_words) + sum(len(w) for w in self.used_words)

    def with_word(self, word: str) -> GameState:
        """Return a new state with `word` placed at the front of `used_words`."""
        return GameState(root_word=self.root_word, used_words=(word,) + self.used_words)
