"""Grow or Die (Streamlit)

UI/Experience

Principles:
- UI only renders + triggers.
- Core domain and engine are pure Python modules.
- High score and the tips flag are persisted by engine.storage, never by the UI.

Entry point: streamlit run app.py
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict
from datetime import datetime
from typing import Any, Dict, List

import streamlit as st

from core.levels import LEVELS, get_level, is_max_level
from core.events import get_event_spec
from core.specials import can_activate
from core.state import TERMINAL_WON, state_to_dict, stats_to_dict
from core.upgrades import UPGRADE_DESCRIPTIONS, UPGRADE_KINDS, UPGRADE_LABELS

from engine.config import DEFAULT_STORE_PATH, EngineConfig
from engine.logging import dumps_run_export
from engine.notifications import (
    EventEnded,
    EventStarted,
    Notification,
    RunEnded,
    SpecialEffectShown,
    TipShown,
)
from engine.pipeline import NUTRIENTS, REST, SPECIAL, SUNLIGHT, WATER
from engine.session import GameSession
from engine.storage import ScoreStore


APP_TITLE = "Grow or Die"
APP_SUBTITLE = "Tend your plant one turn at a time: balance water, sunlight and nutrients, survive the weather, grow into an Ancient Tree."
APP_VERSION = "1.0.0"

st.set_page_config(page_title=APP_TITLE, page_icon="🌱", layout="wide", initial_sidebar_state="expanded")

CSS = """
<style>
.block-container {padding-top: 3.2rem; padding-bottom: 2rem;}
.card {
  border: 1px solid rgba(255,255,255,0.08);
  border-radius: 16px;
  padding: 14px 16px;
  background: rgba(255,255,255,0.03);
}
.plant {font-size: 96px; text-align: center; line-height: 1.2;}
.banner {
  border-radius: 12px;
  padding: 10px 14px;
  margin-bottom: .6rem;
}
.banner.event {background: rgba(255,193,7,0.18);}
.banner.special {background: rgba(76,175,80,0.20);}
.banner.tip {background: rgba(33,150,243,0.18);}
hr.soft {border: none; border-top: 1px solid rgba(255,255,255,0.08); margin: 1rem 0;}
.small {font-size: 13px; opacity:.75;}
</style>
"""

st.markdown(CSS, unsafe_allow_html=True)


ACTION_BUTTONS = [
    (WATER, "💧 Water"),
    (SUNLIGHT, "☀️ Sunlight"),
    (NUTRIENTS, "🌾 Nutrients"),
    (REST, "😴 Rest"),
]


# =========================
# Helpers
# =========================


def _now_id() -> str:
    return datetime.utcnow().strftime("%Y%m%d%H%M%S%f")


def _store_path() -> str:
    return os.getenv("GROW_OR_DIE_STORE") or DEFAULT_STORE_PATH


def _bar_label(name: str, value: int) -> str:
    warn = " ⚠️" if value < 20 else ""
    return f"{name.capitalize()}: {value}/100{warn}"


def _banners_from(notes: List[Notification]) -> List[Dict[str, str]]:
    """Translate notifications into short-lived banners (cleared on next rerun)."""
    out: List[Dict[str, str]] = []
    for n in notes:
        if isinstance(n, EventStarted):
            out.append({"cls": "event", "text": f"{n.icon} {n.text}"})
        elif isinstance(n, EventEnded):
            out.append({"cls": "event", "text": f"The {n.event} has passed."})
        elif isinstance(n, SpecialEffectShown):
            out.append({"cls": "special", "text": f"✨ {n.text}"})
        elif isinstance(n, TipShown):
            out.append({"cls": "tip", "text": n.text})
    return out


# =========================
# Session State
# =========================


def _ensure_state() -> None:
    ss = st.session_state
    if "run_id" not in ss:
        ss.run_id = _now_id()
    if "started" not in ss:
        ss.started = False
    if "base_seed" not in ss:
        ss.base_seed = 42
    if "game" not in ss:
        ss.game = None
    if "banners" not in ss:
        ss.banners = []
    if "last_run_end" not in ss:
        ss.last_run_end = None


def _start_run() -> None:
    ss = st.session_state
    cfg = EngineConfig(base_seed=int(ss.base_seed), store_path=_store_path())
    game = GameSession(config=cfg, store=ScoreStore(cfg.store_path))
    ss.game = game
    ss.started = True
    ss.run_id = _now_id()
    ss.banners = []
    ss.last_run_end = None
    if not game.tips_used:
        ss.banners = _banners_from(game.show_tip())


def _dispatch(notes: List[Notification]) -> None:
    ss = st.session_state
    ss.banners = _banners_from(notes)
    for n in notes:
        if isinstance(n, RunEnded):
            ss.last_run_end = n


# =========================
# UI Pages
# =========================


def page_setup() -> None:
    st.title(APP_TITLE)
    st.caption(APP_SUBTITLE)

    st.markdown("""
    ### How to play
    - Each turn pick one action: **Water**, **Sunlight**, **Nutrients** or **Rest**.
    - Resources drain every turn. If any drops below 20 your plant loses health.
    - Random events (pests, drought, rainstorm, heatwave) last a few turns.
    - After enough turns at a level, choose an upgrade to grow to the next form.
    - From the Sprout onward each form has a **special ability** with a 3-turn cooldown.
    - Reach the **Ancient Tree** and survive one more turn to win.
    """)

    st.markdown("#### Growth path")
    cols = st.columns(len(LEVELS))
    for col, lvl in zip(cols, LEVELS):
        col.markdown(f"<div class='plant' style='font-size:42px'>{lvl.icon}</div>", unsafe_allow_html=True)
        col.caption(lvl.name)


def page_end() -> None:
    ss = st.session_state
    game: GameSession = ss.game
    end = ss.last_run_end

    won = bool(end.won) if end else game.state.terminal == TERMINAL_WON
    if won:
        st.markdown("<div class='plant'>🌲</div>", unsafe_allow_html=True)
        st.success("Congratulations! You've grown into a magnificent tree!")
    else:
        st.markdown("<div class='plant'>💀</div>", unsafe_allow_html=True)
        st.error("Game Over. Your plant didn't survive...")

    a, b = st.columns(2)
    a.metric("Final score", game.score)
    b.metric("High score", game.high_score)
    if end and end.new_high_score:
        st.balloons()

    if st.button("Play again", use_container_width=True):
        game.reset()
        ss.banners = []
        ss.last_run_end = None
        st.rerun()


def page_run() -> None:
    ss = st.session_state
    game: GameSession = ss.game
    state = game.state
    level = get_level(state.growth_index)

    st.title(APP_TITLE)

    if state.is_over:
        page_end()
        return

    for b in list(ss.banners):
        st.markdown(f"<div class='banner {b['cls']}'>{b['text']}</div>", unsafe_allow_html=True)

    if state.active_event is not None:
        spec = get_event_spec(state.active_event.kind)
        st.caption(f"{spec.icon} {spec.text} ({state.active_event.remaining_turns} turn(s) left)")

    a, b, c, d = st.columns([1.2, 1.0, 1.0, 1.0])
    a.metric("Form", f"{level.icon} {level.name}")
    b.metric("Score", game.score)
    c.metric("High score", game.high_score)
    if is_max_level(state.growth_index):
        d.metric("Turns at level", f"{state.turns_in_level}")
    else:
        d.metric("Turns at level", f"{state.turns_in_level}/{level.turns_to_next}")

    left, right = st.columns([1.0, 2.0])
    with left:
        st.markdown(f"<div class='plant'>{level.icon}</div>", unsafe_allow_html=True)
        st.caption(f"Background: {level.background}")
    with right:
        for name, value in stats_to_dict(state.stats).items():
            st.progress(int(value) / 100.0, text=_bar_label(name, int(value)))

    st.markdown("<hr class='soft'/>", unsafe_allow_html=True)

    # --- Upgrade choice ---
    if game.level_up_pending:
        nxt = get_level(state.growth_index + 1)
        st.markdown(f"### 🎉 Ready to grow into {nxt.icon} {nxt.name}! Choose an upgrade")
        cols = st.columns(len(UPGRADE_KINDS))
        for col, kind in zip(cols, UPGRADE_KINDS):
            with col:
                st.markdown(f"**{UPGRADE_LABELS[kind]}** ({getattr(state.upgrades, kind)})")
                st.caption(UPGRADE_DESCRIPTIONS[kind])
                if st.button(f"Pick {UPGRADE_LABELS[kind]}", key=f"upgrade_{state.turns}_{kind}", use_container_width=True):
                    _dispatch(game.choose_upgrade(kind))
                    st.rerun()
        st.markdown("<hr class='soft'/>", unsafe_allow_html=True)

    # --- Actions ---
    st.markdown(f"### Turn {state.turns + 1}: choose an action")
    cols = st.columns(len(ACTION_BUTTONS) + 1)
    for col, (action, label) in zip(cols, ACTION_BUTTONS):
        if col.button(label, key=f"act_{action}", use_container_width=True):
            _dispatch(game.take_turn(action))
            st.rerun()

    if level.special:
        ready = can_activate(level.special, state.special_cooldown)
        label = f"✨ {level.special.replace('_', ' ').title()}"
        if not ready:
            label += f" ({state.special_cooldown})"
        if cols[-1].button(label, key="act_special", disabled=not ready, use_container_width=True):
            _dispatch(game.take_turn(SPECIAL))
            st.rerun()


def page_history() -> None:
    ss = st.session_state
    game: GameSession = ss.game
    st.title("History")
    st.caption("Turn log of the current run.")

    if not game.turn_logs:
        st.info("No turns yet.")
        return

    for item in reversed(game.turn_logs):
        st.markdown("<div class='card'>", unsafe_allow_html=True)
        st.markdown(f"#### Turn {item.get('turn')} — {item.get('action')} (+{item.get('score_delta', 0)})")
        st.markdown(f"<div class='small'>{item.get('before')} → {item.get('after')}</div>", unsafe_allow_html=True)
        for n in item.get("notifications") or []:
            st.markdown(f"- `{n.get('kind')}`")
        st.markdown("</div>", unsafe_allow_html=True)
        st.write("")


def page_debug() -> None:
    ss = st.session_state
    game: GameSession = ss.game
    st.title("Debug")

    st.subheader("EngineConfig")
    st.json(asdict(game.config))

    st.subheader("SessionState")
    st.json(state_to_dict(game.state))

    st.subheader("Persisted")
    st.json({"highScore": game.high_score, "tipsUsed": game.tips_used})


def export_controls() -> None:
    ss = st.session_state
    st.sidebar.markdown("---")
    st.sidebar.markdown("### Run Export")

    game = ss.get("game")
    payload: Dict[str, Any] = {
        "meta": {
            "app": APP_TITLE,
            "version": APP_VERSION,
            "exported_at": datetime.utcnow().isoformat() + "Z",
        },
        "run": game.export_run() if game else None,
    }

    st.sidebar.download_button(
        "Download run log",
        data=dumps_run_export(payload).encode("utf-8"),
        file_name=f"grow_or_die_run_{ss.get('run_id', 'run')}.json",
        mime="application/json",
        disabled=game is None,
    )

    up = st.sidebar.file_uploader("Load run file", type=["json"], accept_multiple_files=False, disabled=game is None)
    if up is not None and game is not None and ss.get("loaded_upload") != up.file_id:
        ss.loaded_upload = up.file_id
        try:
            data = json.loads(up.read().decode("utf-8"))
            _dispatch(game.restore_run(data.get("run") or data))
            st.sidebar.success("Run loaded.")
            st.rerun()
        except (ValueError, KeyError, TypeError) as e:
            st.sidebar.error(f"Import failed: {e}")


# =========================
# Sidebar
# =========================


def sidebar() -> str:
    ss = st.session_state

    st.sidebar.markdown(f"**{APP_TITLE}**  ")
    st.sidebar.markdown(f"v{APP_VERSION}")

    st.sidebar.markdown("---")

    ss.base_seed = st.sidebar.number_input("Seed", value=int(ss.base_seed), step=1, disabled=ss.started)

    cols = st.sidebar.columns(2)
    with cols[0]:
        if st.button("Start", disabled=ss.started, use_container_width=True):
            _start_run()
            st.rerun()
    with cols[1]:
        if st.button("Restart", disabled=not ss.started, use_container_width=True):
            ss.confirm_restart = True

    if ss.get("confirm_restart"):
        st.sidebar.warning("Restart? Your progress will be lost!")
        c1, c2 = st.sidebar.columns(2)
        if c1.button("Yes", use_container_width=True):
            ss.game.reset()
            ss.banners = []
            ss.last_run_end = None
            ss.confirm_restart = False
            st.rerun()
        if c2.button("No", use_container_width=True):
            ss.confirm_restart = False
            st.rerun()

    game = ss.get("game")
    if game is not None:
        if st.sidebar.button("💡 Tip", disabled=game.tips_used, use_container_width=True):
            _dispatch(game.show_tip())
            st.rerun()
        st.sidebar.caption("Tips already used" if game.tips_used else "Get a helpful tip (once)")

    export_controls()

    st.sidebar.markdown("---")
    page = st.sidebar.radio("Page", ["Play", "History", "Debug"], index=0)
    return page


# =========================
# Main
# =========================


def main() -> None:
    _ensure_state()
    page = sidebar()

    ss = st.session_state

    if not ss.started:
        page_setup()
        return

    if ss.game is None:
        st.error("Session is missing. Restart the app.")
        return

    if page == "Play":
        try:
            page_run()
        except Exception as e:
            st.error(f"Something went wrong while rendering the turn: {e}")
            st.info("The Debug page shows the raw session state.")
    elif page == "History":
        page_history()
    else:
        page_debug()


if __name__ == "__main__":
    main()
