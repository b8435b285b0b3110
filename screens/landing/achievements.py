# screens/landing/achievements.py
from __future__ import annotations

import streamlit as st

from core.site_content import Achievement, SiteContent
from store.app_state import AppState


def format_value(a: Achievement) -> str:
    return f"{a.value:,}{a.suffix}"


def render(state: AppState, site: SiteContent):
    if not site.achievements:
        return
    st.markdown("## 🏆 Our Achievements")
    for col, a in zip(st.columns(len(site.achievements)), site.achievements):
        with col:
            st.metric(f"{a.icon} {a.label}", format_value(a))
            if a.description:
                st.caption(a.description)
