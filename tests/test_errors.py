import pytest

from src.core.errors import ErrorKind, WordError


class TestWordError:

    @pytest.mark.parametrize("kind, title, message", [
        (ErrorKind.REUSED_WORD, "Reused word",
         "You can't just take the given word and make it look like your own"),
        (ErrorKind.TOO_SHORT, "Too short",
         "You need at least three characters to build a word in this game"),
        (ErrorKind.EMPTY, "Empty word", "That's just empty!"),
        (ErrorKind.ALREADY_USED, "Word used already", "Be more original!"),
        (ErrorKind.NOT_REAL, "Word not recognized", "You can't just make them up, you know!"),
    ])
    def test_fixed_texts(self, kind, title, message):
        err = WordError.of(kind)
        assert err.kind == kind
        assert err.title == title
        assert err.message == message

    def test_not_possible_fills_in_words(self):
        err = WordError.of(ErrorKind.NOT_POSSIBLE, word="milk", root="scramble")
        assert err.title == "Word not possible"
        assert err.message == "You can't spell 'milk' from 'scramble'"

    def test_is_a_value_error(self):
        err = WordError.of(ErrorKind.EMPTY)
        assert isinstance(err, ValueError)
        assert str(err) == "Empty word: That's just empty!"
