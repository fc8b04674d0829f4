from __future__ import annotations

import logging
import os
import random
from pathlib import Path
from typing import List, Optional

from .errors import StartupError

log = logging.getLogger("wordscramble")

# Bundled start-word list lives at the project root, independent of the cwd:
_DATA_DIR = Path(__file__).resolve().parents[2] / "data"
_DEFAULT_FILE = "start.txt"

# Used whenever the start-word list is missing or empty.
DEFAULT_ROOT_WORD = "silkworm"


def _resolve_path(path: Optional[Path | str] = None) -> Path:
    """Explicit argument, then WORDSCRAMBLE_START_WORDS, then the bundled file."""
    if path:
        return Path(path)
    env_path = os.getenv("WORDSCRAMBLE_START_WORDS")
    if env_path:
        return Path(env_path)
    return _DATA_DIR / _DEFAULT_FILE


def _read_lines(path: Path) -> List[str]:
    """
    Read a text file (UTF-8) and return non-empty, stripped, lowercase lines.

    Notes
    -----
    - Returns an empty list if the file is missing.
    - Raises `StartupError` if the file exists but cannot be read or decoded;
      unlike a missing file, that is a broken install and worth surfacing.
    """
    if not path.exists() or not path.is_file():
        return []
    try:
        raw = path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise StartupError(f"Could not load start words from {path}: {exc}") from exc
    return [ln.strip().lower() for ln in raw if ln.strip()]


def load_start_words(path: Optional[Path | str] = None) -> List[str]:
    """
    Load the candidate root words.

    Blank lines and entries with non-letter characters are dropped, so a
    trailing newline in the file never becomes an empty root word.
    """
    resolved = _resolve_path(path)
    words = [w for w in _read_lines(resolved) if w.isalpha()]
    if words:
        log.info("Loaded %d start words from %s", len(words), resolved)
    else:
        log.warning("No start words found at %s", resolved)
    return words


def pick_root_word(words: List[str], rng: Optional[random.Random] = None) -> str:
    """
    Pick a single root word uniformly at random.

    Parameters
    ----------
    words : List[str]
        Candidate root words, usually from `load_start_words`.
    rng : random.Random | None
        Optional seeded generator for reproducible picks during tests.

    Returns
    -------
    str
        A lowercase word, or `DEFAULT_ROOT_WORD` when `words` is empty.
    """
    if not words:
        log.warning("Start-word list is empty; falling back to '%s'", DEFAULT_ROOT_WORD)
        return DEFAULT_ROOT_WORD
    return (rng or random.Random()).choice(words)


class FileWordSource:
    """Word source that re-reads the start-word file on every call."""

    def __init__(self, path: Optional[Path | str] = None) -> None:
        self.path = path

    def __call__(self) -> List[str]:
        return load_start_words(self.path)
