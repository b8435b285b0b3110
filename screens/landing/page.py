# screens/landing/page.py
"""Public landing page: a fixed, ordered list of sections."""
from __future__ import annotations
from typing import Callable, List, Tuple

import streamlit as st

from core.navigation import ADMIN_ROOT, SIGNIN, rerun_to
from core.site_content import SiteContent
from core.ui import render_footer_global
from screens.landing import achievements, featured, gallery, hero
from store.app_state import AppState

Section = Callable[[AppState, SiteContent], None]

SECTIONS: List[Tuple[str, Section]] = [
    ("hero", hero.render),
    ("featured_courses", featured.render_courses),
    ("featured_branches", featured.render_branches),
    ("achievements", achievements.render),
    ("gallery", gallery.render),
    ("footer", lambda state, site: render_footer_global(site)),
]


def _navbar(site: SiteContent, signed_in: bool):
    left, right = st.columns([0.8, 0.2])
    with left:
        st.markdown(f"### 🎓 {site.name}")
    with right:
        if signed_in:
            if st.button("Dashboard", key="nav_admin", use_container_width=True):
                rerun_to(ADMIN_ROOT)
        elif st.button("Sign In", key="nav_signin", use_container_width=True):
            rerun_to(SIGNIN)


def render(state: AppState, site: SiteContent, signed_in: bool = False):
    _navbar(site, signed_in)
    for name, section in SECTIONS:
        if name != "hero" and name != "footer":
            st.markdown("---")
        section(state, site)
