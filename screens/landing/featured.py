# screens/landing/featured.py
"""Featured courses / branches on the landing page. Both read only the stores' featured subsets."""
from __future__ import annotations
from typing import Any, Callable

import streamlit as st

from core.async_utils import run_sync
from core.media import media_url
from store.app_state import AppState
from store.entity_store import EntityStore
from store.models import Branch, Course

CARDS_PER_ROW = 3


def _ensure_featured(store: EntityStore) -> None:
    key = f"_landing_featured_{store.collection_label}"
    if store.featured or st.session_state.get(key):
        return
    st.session_state[key] = True
    run_sync(store.get_featured())


def _section(store: EntityStore, title: str, card: Callable[[Any], None]):
    _ensure_featured(store)
    st.markdown(f"## {title}")

    # the error belongs to the featured fetch only while nothing is loaded
    if store.error and not store.featured:
        st.error(store.error)
        if st.button("Try Again", key=f"retry_featured_{store.collection_label}"):
            run_sync(store.get_featured())
            st.rerun()
        return

    if not store.featured:
        st.info(f"No featured {store.collection_label} at the moment.")
        if st.button("Refresh", key=f"refresh_featured_{store.collection_label}"):
            run_sync(store.get_featured())
            st.rerun()
        return

    items = store.featured
    for start in range(0, len(items), CARDS_PER_ROW):
        cols = st.columns(CARDS_PER_ROW)
        for col, item in zip(cols, items[start:start + CARDS_PER_ROW]):
            with col, st.container(border=True):
                card(item)


def render_courses(state: AppState, site=None):
    def card(c: Course):
        img = media_url(state.media_root, c.cover_image)
        if img:
            st.image(img, use_container_width=True)
        st.markdown(f"### {c.course_name}")
        meta = " · ".join(p for p in [
            c.course_mode.value.capitalize() if c.course_mode else "",
            c.duration,
            f"Starts {c.batch_start:%d %b %Y}" if c.batch_start else "",
        ] if p)
        if meta:
            st.caption(meta)
        desc = c.course_description
        st.write(desc if len(desc) <= 160 else desc[:160] + "…")

    _section(state.courses, "🎓 Featured Courses", card)


def render_branches(state: AppState, site=None):
    def card(b: Branch):
        img = media_url(state.media_root, b.branch_image)
        if img:
            st.image(img, use_container_width=True)
        st.markdown(f"### {b.branch_name}")
        if b.office_type:
            st.caption(b.office_type)
        addr = b.address
        st.write(addr if len(addr) <= 80 else addr[:80] + "...")
        st.markdown(f"📞 {b.mobile}  \n✉️ {b.email}")

    _section(state.branches, "🏢 Our Branches", card)
