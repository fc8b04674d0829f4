"""End-to-end tests for the session controller."""

import random

import pytest

from src.core.dictionary import WordSetOracle
from src.core.errors import ErrorKind, StartupError
from src.core.session import GameSession


class TestStartSession:

    def test_seeded_pick_is_reproducible(self, oracle):
        words = ["scramble", "silkworm", "teaching", "painting"]
        first = GameSession(lambda: words, oracle, rng=random.Random(42)).start_session()
        second = GameSession(lambda: words, oracle, rng=random.Random(42)).start_session()
        assert first.root_word == second.root_word
        assert first.root_word in words

    def test_empty_source_falls_back(self, oracle):
        state = GameSession(lambda: [], oracle).start_session()
        assert state.root_word == "silkworm"

    def test_new_session_clears_used_words(self, scramble_session):
        assert scramble_session.submit_word("cable").accepted
        state = scramble_session.start_session()
        assert state.used_words == ()
        assert scramble_session.score == 0

    def test_source_read_on_every_start(self, oracle):
        calls = []

        def source():
            calls.append(1)
            return ["scramble"]

        session = GameSession(source, oracle)
        session.start_session()
        session.start_session()
        assert len(calls) == 2

    def test_unreadable_source_raises_startup_error(self, oracle):
        def broken():
            raise StartupError("bad bytes")

        with pytest.raises(StartupError):
            GameSession(broken, oracle).start_session()

    def test_submit_before_start_starts_lazily(self, oracle):
        session = GameSession(lambda: ["scramble"], oracle)
        outcome = session.submit_word("cable")
        assert outcome.accepted
        assert session.state.root_word == "scramble"


class TestSubmitWord:

    def test_scramble_walkthrough(self, scramble_session):
        session = scramble_session
        assert session.state.root_word == "scramble"

        outcome = session.submit_word("cable")
        assert outcome.accepted
        assert outcome.word == "cable"
        assert outcome.points == 6
        assert session.state.used_words == ("cable",)
        assert session.score == 6

        assert session.submit_word("cable").error.kind == ErrorKind.ALREADY_USED
        assert session.submit_word("scramble").error.kind == ErrorKind.REUSED_WORD
        assert session.submit_word("xy").error.kind == ErrorKind.TOO_SHORT
        assert session.submit_word("zzzzz").error.kind == ErrorKind.NOT_POSSIBLE

        outcome = session.submit_word(" Clam ")
        assert outcome.accepted
        assert session.state.used_words == ("clam", "cable")
        assert session.score == 6 + 5

    def test_rejection_does_not_mutate_state(self, scramble_session):
        scramble_session.submit_word("cable")
        before = scramble_session.state
        outcome = scramble_session.submit_word("blams")
        assert not outcome.accepted
        assert outcome.error.kind == ErrorKind.NOT_REAL
        assert outcome.word is None
        assert outcome.points == 0
        assert scramble_session.state is before

    def test_error_carries_title_and_message(self, scramble_session):
        scramble_session.submit_word("cable")
        err = scramble_session.submit_word("cable").error
        assert err.title == "Word used already"
        assert err.message == "Be more original!"

    def test_second_submission_while_validating_is_refused(self):
        class ReentrantOracle(WordSetOracle):
            def is_recognized_word(self, word, language):
                with pytest.raises(RuntimeError):
                    session.submit_word("clam")
                return super().is_recognized_word(word, language)

        session = GameSession(lambda: ["scramble"], ReentrantOracle(["cable", "clam"]))
        session.start_session()
        assert session.submit_word("cable").accepted
        # The guard is released once validation finishes.
        assert session.submit_word("clam").accepted
