# screens/logout.py
from __future__ import annotations

import streamlit as st

from core.auth import sign_out
from core.navigation import SIGNIN, rerun_to

# session keys that survive a logout
KEYS_TO_KEEP = ["engine", "db_initialized", "settings", "site"]


def clear_session(session) -> None:
    for key in list(session.keys()):
        if key not in KEYS_TO_KEEP:
            del session[key]


def render(engine):
    st.markdown(
        """
        <style>
            [data-testid="stSidebar"] {
                display: none;
            }
        </style>
        """,
        unsafe_allow_html=True,
    )

    st.title("🚪 Logout")

    sign_out(engine)
    clear_session(st.session_state)

    st.success("You have been logged out successfully.")

    if st.button("Go to Sign In", type="primary"):
        rerun_to(SIGNIN, replace=True)
