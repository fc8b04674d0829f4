from __future__ import annotations

from collections import Counter
from typing import Callable, Optional

from .dictionary import DEFAULT_LANGUAGE, DictionaryOracle
from .errors import ErrorKind, WordError
from .state import GameState
from .wordlist import DEFAULT_ROOT_WORD

MIN_WORD_LENGTH = 3


def new_game(picker_fn: Callable[[], str]) -> GameState:
    """
    Start a new game using the provided picker function to choose the root word.

    Parameters
    ----------
    picker_fn : Callable[[], str]
        Function that returns a single lowercase alphabetic word. Usually a
        random pick from the start-word list; the engine does not care.

    Returns
    -------
    GameState
        A fresh, immutable game state with no used words.
    """
    word = (picker_fn() or "").strip().lower()
    if not word.isalpha():
        word = DEFAULT_ROOT_WORD
    return GameState(root_word=word, used_words=())


def normalize(candidate: Optional[str]) -> str:
    """Lowercase and strip surrounding whitespace; `None` becomes ''."""
    return (candidate or "").strip().lower()


def is_original(word: str, state: GameState) -> bool:
    return word not in state.used_words


def is_possible(word: str, root_word: str) -> bool:
    """
    True if `word` can be spelled from the letters of `root_word`.

    Every letter may be used at most as many times as it appears in the
    root word (multiset containment).
    """
    return not (Counter(word) - Counter(root_word))


def is_real(word: str, oracle: DictionaryOracle, language: str = DEFAULT_LANGUAGE) -> bool:
    return oracle.is_recognized_word(word, language)


def score_for(word: str) -> int:
    """Points an accepted word adds to the score: one for the word, one per letter."""
    return 1 + len(word)


def validate_word(
    candidate: Optional[str],
    state: GameState,
    oracle: DictionaryOracle,
    language: str = DEFAULT_LANGUAGE,
) -> str:
    """
    Decide whether `candidate` may be added to `state.used_words`.

    Checks run in a fixed order and the first failure wins:

    1) reused root word
    2) too short (< 3 letters)
    3) empty (unreachable after 2, kept for parity)
    4) already used
    5) not spellable from the root word
    6) not in the dictionary

    Returns
    -------
    str
        The normalized word, ready for insertion.

    Raises
    ------
    WordError
        With the kind of the first failing check.
    """
    word = normalize(candidate)

    if word == state.root_word:
        raise WordError.of(ErrorKind.REUSED_WORD)
    if len(word) < MIN_WORD_LENGTH:
        raise WordError.of(ErrorKind.TOO_SHORT)
    if not word:
        raise WordError.of(ErrorKind.EMPTY)
    if not is_original(word, state):
        raise WordError.of(ErrorKind.ALREADY_USED)
    if not is_possible(word, state.root_word):
        raise WordError.of(ErrorKind.NOT_POSSIBLE, word=word, root=state.root_word)
    if not is_real(word, oracle, language):
        raise WordError.of(ErrorKind.NOT_REAL)
    return word


def submit_word(
    state: GameState,
    raw: Optional[str],
    oracle: DictionaryOracle,
    language: str = DEFAULT_LANGUAGE,
) -> GameState:
    """
    Validate `raw` and return a new GameState with the word prepended.

    Raises `WordError` on rejection; the input state is never modified.
    """
    word = validate_word(raw, state, oracle, language)
    return state.with_word(word)
