# screens/featured/page.py
from __future__ import annotations
from typing import Any, Callable, Dict

import streamlit as st

from core.async_utils import run_sync
from screens.featured.controller import FeaturedController, FeaturedSelection
from store.app_state import AppState

CONTROLLER_KEY = "featured_controller"


def _controller(state: AppState) -> FeaturedController:
    ctl = st.session_state.get(CONTROLLER_KEY)
    if ctl is None:
        ctl = FeaturedController(state.courses, state.branches)
        st.session_state[CONTROLLER_KEY] = ctl
    return ctl


def _picker(
    key: str,
    title: str,
    selection: FeaturedSelection,
    names: Dict[str, str],
    add: Callable[[str], bool],
    remove: Callable[[str], None],
    save: Callable[[], Any],
    can_submit: bool,
):
    st.markdown(f"#### {title}")
    st.caption(f"{len(selection.ids)} / {selection.limit} selected")

    for entity_id in list(selection.ids):
        c1, c2 = st.columns([0.8, 0.2])
        with c1:
            st.write(f"⭐ {names.get(entity_id, entity_id)}")
        with c2:
            if st.button("Remove", key=f"{key}_rm_{entity_id}"):
                remove(entity_id)
                st.rerun()

    candidates = [i for i in names if i not in selection]
    if candidates:
        c1, c2 = st.columns([0.8, 0.2])
        with c1:
            picked = st.selectbox("Add", candidates, format_func=lambda i: names[i], key=f"{key}_pick")
        with c2:
            st.write("")
            if st.button("Add", key=f"{key}_add"):
                add(picked)
                st.rerun()

    if not can_submit:
        st.caption(f"Select exactly {selection.limit} to save.")
    if st.button(f"💾 Save {title}", key=f"{key}_save", type="primary", disabled=not can_submit):
        run_sync(save())
        st.rerun()


def render(state: AppState):
    ctl = _controller(state)
    st.subheader("⭐ Featured on the landing page")

    if not ctl.loaded and ctl.load_error is None:
        with st.spinner("Loading courses and branches…"):
            run_sync(ctl.load())
    if ctl.load_error:
        st.error(ctl.load_error)
        if st.button("Retry", key="featured_retry"):
            run_sync(ctl.load())
            st.rerun()
        return

    msg = ctl.message
    if msg:
        (st.success if msg.ok else st.error)(msg.text)

    course_names = {c.id: c.course_name for c in state.courses.items if c.id}
    branch_names = {b.id: b.branch_name for b in state.branches.items if b.id}

    left, right = st.columns(2)
    with left:
        _picker("fc", "Featured Courses", ctl.course_selection, course_names,
                ctl.add_course, ctl.remove_course, ctl.submit_courses, ctl.can_submit_courses)
    with right:
        _picker("fb", "Featured Branches", ctl.branch_selection, branch_names,
                ctl.add_branch, ctl.remove_branch, ctl.submit_branches, ctl.can_submit_branches)
