# screens/landing/hero.py
from __future__ import annotations

import streamlit as st

from core.site_content import SiteContent
from store.app_state import AppState


def render(state: AppState, site: SiteContent):
    hero = site.hero
    left, right = st.columns([0.55, 0.45])
    with left:
        if hero.badge:
            st.caption(f"✨ {hero.badge}")
        st.markdown(f"# {hero.title} **:blue[{hero.highlight}]**")
        if hero.subtitle:
            st.write(hero.subtitle)
        if hero.stats:
            for col, stat in zip(st.columns(len(hero.stats)), hero.stats):
                col.metric(stat.label, stat.value)
    with right:
        if hero.image:
            st.image(hero.image, use_container_width=True)
