# main.py — Streamlit "Poem Fill" game for early readers
# ------------------------------------------------------
# Two lines of a children's poem are shown with a few characters taken out.
#   1) Tap a character in the tray to pick it up (you hear it spoken),
#   2) Tap an empty box to put it there,
#   3) Fill every box: all right → celebration; anything wrong → "try again"
#      and, after a short pause, the boxes empty out for another go.
# "↩ Undo" takes back the last character placed. Tap any character to hear it.
#
# Run:  streamlit run main.py

from __future__ import annotations
import time

import streamlit as st

from poemfill.corpus import load_corpus
from poemfill.evaluator import Verdict
from poemfill.logging_config import setup_logging
from poemfill.round import BlankPosition
from poemfill.session import GameSession
from poemfill.settings import ConfigError, GameConfig
from poemfill.speech import speech_html

st.set_page_config(page_title="Poem Fill — 诗词填字", page_icon="📖", layout="centered")

BLANK_FACE = "＿"

# ---------------------- Config ----------------------
try:
    BASE_CONFIG = GameConfig.from_env()
except ConfigError as e:
    st.error(f"Bad POEMFILL_* setting: {e}")
    st.stop()

logger = setup_logging(BASE_CONFIG)

# ---------------------- Sidebar -----------------------
st.sidebar.header("Grown-Up Settings")
remove_count = st.sidebar.slider(
    "Characters to hide", 1, BASE_CONFIG.grid_size, BASE_CONFIG.remove_count,
    help="Takes effect on the next new game.",
)
restore_delay = st.sidebar.slider(
    "'Try again' pause (seconds)", 0.5, 5.0,
    min(5.0, max(0.5, float(BASE_CONFIG.restore_delay))), step=0.5,
    key="restore_delay",
)
use_gtts = st.sidebar.checkbox(
    "Use gTTS voice", value=BASE_CONFIG.use_gtts,
    help="Online voice; turn off to use the browser's built-in speech.",
)
use_overrides = st.sidebar.checkbox(
    "Fix polyphonic characters (多音字)", value=BASE_CONFIG.use_pronunciation_overrides,
    help="Reads characters like 背 / 数 / 觉 the way the poem line means them.",
)
new_game_clicked = st.sidebar.button("New game", use_container_width=True)

config = GameConfig(
    line_length=BASE_CONFIG.line_length,
    remove_count=remove_count,
    restore_delay=restore_delay,
    corpus_path=BASE_CONFIG.corpus_path,
    use_gtts=use_gtts,
    use_pronunciation_overrides=use_overrides,
    log_level=BASE_CONFIG.log_level,
)

# Big, tap-friendly character boxes
st.markdown(
    """
    <style>
    div.stButton > button {
        font-size: 40px !important;
        height: 84px !important;
        line-height: 1 !important;
        padding: 0 !important;
    }
    section[data-testid="stSidebar"] div.stButton > button {
        font-size: 1rem !important;
        height: auto !important;
        padding: 0.25rem 0.6rem !important;
    }
    </style>
    """,
    unsafe_allow_html=True,
)


# ---------------------- State -------------------------

def init_state():
    ss = st.session_state
    if "game" not in ss:
        try:
            corpus = load_corpus(config.corpus_path, config.line_length)
        except ConfigError as e:
            # No usable poem file and no built-in poem of this length
            st.error(f"Bad POEMFILL_* setting: {e}")
            st.stop()
        ss.game = GameSession(corpus, config)
    if "selected" not in ss:
        ss.selected = None          # candidate id picked up from the tray
    if "pending_speech" not in ss:
        ss.pending_speech = None    # text to speak on this render
    if "celebrated_round" not in ss:
        ss.celebrated_round = 0


def new_game():
    ss = st.session_state
    ss.game.config = config.validate()
    logger.info("New game (hiding %d characters)", config.remove_count)
    ss.game.new_round()
    ss.selected = None
    ss.pending_speech = None


init_state()
game: GameSession = st.session_state.game
game.config.use_gtts = use_gtts
game.config.use_pronunciation_overrides = use_overrides
game.config.restore_delay = restore_delay

if new_game_clicked:
    new_game()

# A wrong answer empties the boxes once its pause is over
if game.poll():
    st.session_state.selected = None


# ---------------------- Callbacks ---------------------

def on_cell_click(line: int, index: int):
    ss = st.session_state
    pos = BlankPosition(line, index)
    if game.round.is_blank(pos) and not game.round.is_locked(pos):
        if ss.selected is None:
            return
        result, _ = game.fill(pos, ss.selected)
        if result.ok:
            ss.selected = None
        return
    ss.pending_speech = game.spoken_text_at(line, index)


def on_candidate_click(candidate_id: int):
    ss = st.session_state
    if game.round.is_consumed(candidate_id) or game.restore_pending or game.finished:
        return
    cand = game.round.candidate(candidate_id)
    ss.selected = None if ss.selected == candidate_id else candidate_id
    ss.pending_speech = game.spoken_text(cand.line_text, cand.char)


def on_undo_click():
    if game.undo():
        st.session_state.selected = None


# ---------------------- UI ----------------------------
st.title("📖 诗词填字")
st.caption("Pick a character, then tap an empty box. Tap any character to hear it.")

rnd = game.round
for line_no in range(2):
    row = st.columns(game.config.line_length)
    for index, c in enumerate(row):
        shown = rnd.display_char(line_no, index)
        c.button(
            shown or BLANK_FACE,
            key=f"cell_{game.rounds_played}_{line_no}_{index}",
            use_container_width=True,
            on_click=on_cell_click,
            args=(line_no, index),
        )

st.markdown("---")
st.markdown("**Characters:**")
tray = st.columns(max(1, len(rnd.candidates)))
for c, cand in zip(tray, rnd.candidates):
    used = rnd.is_consumed(cand.id)
    label = " " if used else cand.char
    if st.session_state.selected == cand.id:
        label = f"[{cand.char}]"
    c.button(
        label,
        key=f"cand_{game.rounds_played}_{cand.id}",
        use_container_width=True,
        disabled=used or game.restore_pending or game.finished,
        on_click=on_candidate_click,
        args=(cand.id,),
    )

ctl1, ctl2 = st.columns(2)
ctl1.button(
    "↩ Undo", key="undo", use_container_width=True,
    disabled=not game.can_undo, on_click=on_undo_click,
)
if ctl2.button("🔄 New game", key="restart", use_container_width=True):
    new_game()
    st.rerun()

# ---------------------- Feedback ----------------------
if game.verdict is Verdict.CORRECT:
    st.success(game.message)
    if st.session_state.celebrated_round != game.rounds_played:
        st.session_state.celebrated_round = game.rounds_played
        st.balloons()
elif game.verdict is Verdict.INCORRECT and game.message:
    st.error(game.message)

if st.session_state.pending_speech:
    st.components.v1.html(
        speech_html(
            st.session_state.pending_speech,
            lang=game.config.speech_lang,
            rate=game.config.speech_rate,
            pitch=game.config.speech_pitch,
            use_gtts=game.config.use_gtts,
        ),
        height=0,
    )
    st.session_state.pending_speech = None

# Keep the page live until the wrong answer is cleared
if game.restore_pending:
    time.sleep(min(0.1, game.seconds_until_restore()) or 0.05)
    st.rerun()
