from __future__ import annotations

import logging
import os
import streamlit as st

from dotenv import load_dotenv
load_dotenv(override=False)  # Load .env into process env

# --- Core game imports ---
from src.core.dictionary import default_oracle
from src.core.errors import StartupError
from src.core.session import GameSession
from src.core.wordlist import DEFAULT_ROOT_WORD, FileWordSource

# --- Generative AI services ---
from src.services.hints import suggest_hint   # Hint (LLM clue with local fallback)

logging.basicConfig(
    level=os.getenv("WORDSCRAMBLE_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


# =======================================
# Session-state helpers & game management
# =======================================

def _init_round_state() -> None:
    """Ensure per-round transient keys exist."""
    st.session_state.setdefault("last_error", None)
    st.session_state.setdefault("startup_error", None)
    st.session_state.setdefault("hint", None)
    st.session_state.setdefault("hint_loading", False)


def _start_new_game() -> None:
    """
    Start a new game on the existing session (or create one).
    An unreadable word list is shown as an error and play continues with
    the default root word.
    """
    if not isinstance(st.session_state.get("session"), GameSession):
        st.session_state["session"] = GameSession(word_source=FileWordSource(), oracle=default_oracle())
    session: GameSession = st.session_state["session"]
    session.word_source = FileWordSource()  # retry the file after a previous StartupError

    try:
        session.start_session()
        st.session_state["startup_error"] = None
    except StartupError as exc:
        logging.getLogger("wordscramble").error("Start words unavailable: %s", exc)
        st.session_state["startup_error"] = str(exc)
        session.word_source = lambda: [DEFAULT_ROOT_WORD]
        session.start_session()

    # Reset per-round state
    st.session_state["last_error"] = None
    st.session_state["hint"] = None
    st.session_state["hint_loading"] = False


def _submit() -> None:
    """Form callback: the input is cleared only when the word is accepted."""
    session: GameSession = st.session_state["session"]
    outcome = session.submit_word(st.session_state.get("word_input", ""))
    st.session_state["last_error"] = outcome.error
    if outcome.accepted:
        st.session_state["word_input"] = ""
        st.session_state["hint"] = None


def _ensure_session() -> GameSession:
    """Ensure there is a started GameSession in session state; create one if missing."""
    if not isinstance(st.session_state.get("session"), GameSession):
        _start_new_game()
    _init_round_state()
    return st.session_state["session"]


# =========
# The App
# =========

def main() -> None:
    st.set_page_config(page_title="WordScramble", page_icon="🔤", layout="centered")

    session = _ensure_session()

    # ---- Sidebar ----
    with st.sidebar:
        st.header("Game")
        st.metric("Score", session.score)
        if st.button("🔁 New Game", use_container_width=True):
            _start_new_game()
            st.rerun()

    game = session.state
    st.title(game.root_word)

    if st.session_state["startup_error"]:
        st.error(f"Could not load the start words, playing '{DEFAULT_ROOT_WORD}'.  \n"
                 f"{st.session_state['startup_error']}")

    # ---- Move input ----
    with st.form("word_form"):
        st.text_input("Enter your word", key="word_input", max_chars=32, autocomplete="off")
        st.form_submit_button("Submit", on_click=_submit, disabled=st.session_state["hint_loading"])

    err = st.session_state["last_error"]
    if err is not None:
        st.error(f"**{err.title}**  \n{err.message}")

    # ---- Used words (most recent first) ----
    for word in game.used_words:
        st.markdown(f"`{len(word)}` {word}")

    # ---- Hint section ----
    with st.expander("Stuck? Get a hint"):
        if st.button("✨ Hint", disabled=st.session_state["hint_loading"]):
            st.session_state["hint_loading"] = True
            with st.spinner("Looking for words..."):
                st.session_state["hint"] = suggest_hint(game, session.oracle)
            st.session_state["hint_loading"] = False
            st.rerun()

        hint = st.session_state["hint"]
        if hint:
            src = "LLM" if hint.used_llm else "local"
            st.info(f"{hint.text}  \n*Source: {src}, words left: {hint.candidates_remaining}*")

    st.divider()
    st.caption("Words need three or more letters from the root word. "
               "Each word scores one point plus one per letter.")


if __name__ == "__main__":
    main()
