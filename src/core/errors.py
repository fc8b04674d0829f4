from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class ErrorKind(str, Enum):
    """Closed set of reasons a submitted word can be rejected."""

    REUSED_WORD = "reused_word"
    TOO_SHORT = "too_short"
    EMPTY = "empty"
    ALREADY_USED = "already_used"
    NOT_POSSIBLE = "not_possible"
    NOT_REAL = "not_real"


# (title, message template) shown in the UI error box.
_TEXTS: Dict[ErrorKind, Tuple[str, str]] = {
    ErrorKind.REUSED_WORD: (
        "Reused word",
        "You can't just take the given word and make it look like your own",
    ),
    ErrorKind.TOO_SHORT: (
        "Too short",
        "You need at least three characters to build a word in this game",
    ),
    ErrorKind.EMPTY: ("Empty word", "That's just empty!"),
    ErrorKind.ALREADY_USED: ("Word used already", "Be more original!"),
    ErrorKind.NOT_POSSIBLE: ("Word not possible", "You can't spell '{word}' from '{root}'"),
    ErrorKind.NOT_REAL: ("Word not recognized", "You can't just make them up, you know!"),
}


class WordError(ValueError):
    """
    A recoverable rejection of a submitted word.

    The player simply tries again; the game state is never modified when
    one of these is raised.
    """

    def __init__(self, kind: ErrorKind, title: str, message: str) -> None:
        super().__init__(f"{title}: {message}")
        self.kind = kind
        self.title = title
        self.message = message

    @classmethod
    def of(cls, kind: ErrorKind, word: str = "", root: str = "") -> WordError:
        title, template = _TEXTS[kind]
        return cls(kind, title, template.format(word=word, root=root))


class StartupError(RuntimeError):
    """The start-word list exists but could not be read or decoded."""
