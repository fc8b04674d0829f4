from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, List, Optional

from . import engine
from .dictionary import DEFAULT_LANGUAGE, DictionaryOracle
from .errors import WordError
from .state import GameState
from .wordlist import pick_root_word

log = logging.getLogger("wordscramble.session")

WordSource = Callable[[], List[str]]


@dataclass(frozen=True)
class SubmitOutcome:
    """Result of one submission, for the UI to render."""
    accepted: bool
    word: Optional[str] = None          # normalized word when accepted
    error: Optional[WordError] = None   # set when rejected
    points: int = 0                     # score gained by this submission


class GameSession:
    """
    Owns the single GameState of one player and drives it.

    Collaborators are injected so the session can run offline in tests:
    `word_source` returns the candidate root words, `oracle` answers
    dictionary lookups and `rng` makes the root-word pick reproducible.
    """

    def __init__(
        self,
        word_source: WordSource,
        oracle: DictionaryOracle,
        rng: Optional[random.Random] = None,
        language: str = DEFAULT_LANGUAGE,
    ):
        self.word_source = word_source
        self.oracle = oracle
        self.rng = rng or random.Random()
        self.language = language
        self._state: Optional[GameState] = None
        self._validating = False

    @property
    def state(self) -> GameState:
        if self._state is None:
            return self.start_session()
        return self._state

    @property
    def score(self) -> int:
        return self.state.score

    def start_session(self) -> GameState:
        """
        Pick a fresh root word and clear the used words.

        Raises `StartupError` if the word source exists but cannot be read;
        an empty or missing source falls back to the default root word.
        """
        words = self.word_source()
        self._state = engine.new_game(lambda: pick_root_word(words, self.rng))
        log.info("New session with root word '%s'", self._state.root_word)
        return self._state

    def submit_word(self, raw: Optional[str]) -> SubmitOutcome:
        """
        Validate `raw` against the current state and apply it if accepted.

        Only one validation may be in flight at a time; the state is not
        touched until the dictionary lookup has answered.
        """
        if self._validating:
            raise RuntimeError("A submission is already being validated.")
        state = self.state
        self._validating = True
        try:
            new_state = engine.submit_word(state, raw, self.oracle, self.language)
        except WordError as err:
            log.info("Rejected %r: %s", raw, err.kind.value)
            return SubmitOutcome(accepted=False, error=err)
        finally:
            self._validating = False

        word = new_state.used_words[0]
        self._state = new_state
        log.info("Accepted '%s' (score %d)", word, new_state.score)
        return SubmitOutcome(accepted=True, word=word, points=engine.score_for(word))
