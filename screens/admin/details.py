# screens/admin/details.py
from __future__ import annotations

import streamlit as st

from core.auth import stored_user
from core.navigation import LANDING, rerun_to


def render(engine):
    st.subheader("🛡️ Admin Details")

    user = stored_user(engine)
    if not user:
        st.error("User not found in storage. Please sign in again.")
        return

    st.markdown("### Account")
    st.json({
        "name": user.get("name") or user.get("fullName") or "—",
        "email": user.get("emailAddress") or user.get("email") or "—",
        "role": user.get("role") or "—",
    })

    if st.button("🏠 View landing page", key="admin_to_landing"):
        rerun_to(LANDING)
