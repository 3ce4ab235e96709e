# streamlit_app.py
from __future__ import annotations

import logging

import streamlit as st

from handlers.party_handlers import PartyController
from utils import settings
from views.display import commit
from views.party_views import APP_TITLE, render

logging.basicConfig(
    level=settings.PARTY_LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("party_planner")

SESSION_KEY = "party_controller"


def get_controller() -> PartyController:
    """One controller (and AppState) per browser session."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = PartyController()
    return st.session_state[SESSION_KEY]


# ───────────────────────── Page ─────────────────────────
st.set_page_config(page_title=APP_TITLE, page_icon="🎉", layout="centered")

controller = get_controller()
if not controller.state.loaded:
    logger.info(f"Loading parties, rsvps and guests from {settings.API}")
    with st.spinner("Loading parties..."):
        controller.load_all()

commit(render(controller.state), controller)
