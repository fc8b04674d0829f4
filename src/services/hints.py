from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable, List, Optional

from openai import OpenAI
from wordfreq import top_n_list

from src.core.dictionary import DEFAULT_LANGUAGE, DictionaryOracle
from src.core.engine import MIN_WORD_LENGTH, is_possible, is_real
from src.core.state import GameState

log = logging.getLogger("wordscramble")

VOCABULARY_SIZE = 50000


@dataclass(frozen=True)
class Hint:
    """Container for a hint."""
    text: str                  # one-sentence clue shown to the player
    used_llm: bool             # whether the clue came from the LLM
    candidates_remaining: int  # spellable, unused words still in the vocabulary
    length: int = 0            # length of the target word (0 if none left)


def _default_vocabulary() -> List[str]:
    return top_n_list(DEFAULT_LANGUAGE, VOCABULARY_SIZE)


def find_candidates(state: GameState, vocabulary: Iterable[str], oracle: DictionaryOracle) -> List[str]:
    """
    Filter the vocabulary to words the player could still submit.

    Rules
    -----
    - At least three letters, alphabetic only.
    - Spellable from the root word (letter multiset containment).
    - Not the root word itself and not already used.
    - Recognized by the same dictionary oracle that judges submissions.
    """
    used = set(state.used_words)
    seen = set()
    remaining: List[str] = []
    for raw in vocabulary:
        w = raw.strip().lower()
        if len(w) < MIN_WORD_LENGTH or not w.isalpha() or w in seen:
            continue
        seen.add(w)
        if w == state.root_word or w in used:
            continue
        if is_possible(w, state.root_word) and is_real(w, oracle):
            remaining.append(w)
    return remaining


def _best_target(remaining: List[str]) -> Optional[str]:
    """Longest word wins; ties break alphabetically."""
    if not remaining:
        return None
    return sorted(remaining, key=lambda w: (-len(w), w))[0]


def _contains_answer(text: str, target: str) -> bool:
    return target.lower() in (text or "").lower()


def _local_clue(target: str, remaining_count: int) -> str:
    """A deterministic, non-LLM clue sentence."""
    return (
        f"There are still about {remaining_count} words hiding in here. "
        f"Try a {len(target)}-letter word starting with '{target[0].upper()}'."
    )


def _llm_clue(root_word: str, target: str) -> Optional[str]:
    """
    Ask the LLM for a one-sentence clue for `target`.

    The clue is rejected if it contains the target word itself.
    """
    api_key = os.getenv("OPENAI_API_KEY", "")
    offline = os.getenv("OFFLINE_MODE", "true").lower() == "true"
    if offline or not api_key:
        return None

    client = OpenAI(api_key=api_key)
    model = os.getenv("MODEL_NAME", "gpt-4o-mini")

    user = (
        f"A player is making words from the letters of '{root_word}'. "
        f"Give ONE short clue for the {len(target)}-letter word '{target}'. "
        "Do NOT include the word itself. Reply with the clue only."
    )
    try:
        r = client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": user}],
            temperature=0.7,
            max_tokens=60,
        )
        text = (r.choices[0].message.content or "").strip()
    except Exception as exc:  # any client/network failure -> local clue
        log.warning("LLM hint failed, using local clue: %s", exc)
        return None
    if not text or _contains_answer(text, target):
        return None
    return text


def suggest_hint(
    state: GameState,
    oracle: DictionaryOracle,
    vocabulary: Optional[Iterable[str]] = None,
) -> Hint:
    """
    Suggest a clue for a word the player has not found yet.

    Steps
    -----
    1) Filter the vocabulary to spellable, unused words the oracle accepts.
    2) Pick the longest remaining word as the target.
    3) Phrase a clue with the LLM; fall back to a local sentence.
    """
    words = _default_vocabulary() if vocabulary is None else vocabulary
    remaining = find_candidates(state, words, oracle)
    target = _best_target(remaining)
    if target is None:
        return Hint(text="Looks like you found every word we know. Try a new game!",
                    used_llm=False, candidates_remaining=0)

    llm_text = _llm_clue(state.root_word, target)
    if llm_text:
        return Hint(text=llm_text, used_llm=True, candidates_remaining=len(remaining), length=len(target))

    return Hint(
        text=_local_clue(target, len(remaining)),
        used_llm=False,
        candidates_remaining=len(remaining),
        length=len(target),
    )
