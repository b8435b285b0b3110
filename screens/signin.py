# screens/signin.py
from __future__ import annotations

import streamlit as st

from core.async_utils import run_sync
from core.auth import sign_in
from core.forms import flash
from core.navigation import ADMIN_ROOT, LANDING, rerun_to
from store.app_state import AppState


def render(state: AppState, engine):
    st.markdown(
        """
        <style>
            section[data-testid="stSidebar"] {
                display: none;
            }
        </style>
        """,
        unsafe_allow_html=True,
    )

    st.title("🔐 Sign In")
    st.caption("Admin access only")

    with st.form("signin_form"):
        email = st.text_input("Email Address", placeholder="admin@example.com")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign In", type="primary")

    if submitted:
        with st.spinner("Signing in…"):
            result = run_sync(sign_in(state.api, engine, email, password))
        if result.ok:
            flash(result.message, ok=True)
            rerun_to(ADMIN_ROOT, replace=True)
        for field_name, problem in result.errors.items():
            st.error(f"{field_name.capitalize()}: {problem}")
        if not result.errors:
            st.error(result.message)

    if st.button("← Back to home", key="signin_home"):
        rerun_to(LANDING)
