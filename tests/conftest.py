import random

import pytest

from src.core.dictionary import WordSetOracle
from src.core.session import GameSession


ENGLISH_WORDS = [
    "cable", "camber", "clam", "scar", "lamb", "ramble", "cram", "bear",
    "bare", "mace", "same", "slab", "cars", "scramble", "silk", "worm",
    "milk", "mask", "cat", "sam", "arc", "lab", "ram", "zzzzz",
]


@pytest.fixture(autouse=True)
def offline(monkeypatch):
    """Never call out to an LLM from tests."""
    monkeypatch.setenv("OFFLINE_MODE", "true")
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


@pytest.fixture
def oracle():
    return WordSetOracle(ENGLISH_WORDS)


@pytest.fixture
def scramble_session(oracle):
    session = GameSession(word_source=lambda: ["scramble"], oracle=oracle, rng=random.Random(0))
    session.start_session()
    return session
