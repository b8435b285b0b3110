# screens/admin/layout.py
from __future__ import annotations

import streamlit as st

from core.auth import stored_user
from core.navigation import LOGOUT, Navigator, rerun_to
from screens.admin import details
from screens.admin.shell import TAB_LABELS, AdminShell, AdminTab
from screens.branches import form as branch_form
from screens.branches import list_view as branch_list
from screens.courses import form as course_form
from screens.courses import list_view as course_list
from screens.featured import page as featured_page
from screens.forms.widgets import discard_controllers
from store.app_state import AppState

SHELL_KEY = "admin_shell"


def _shell(nav: Navigator) -> AdminShell:
    shell = st.session_state.get(SHELL_KEY)
    if shell is None:
        shell = AdminShell(nav, nav.path)
        st.session_state[SHELL_KEY] = shell
    shell.on_route(nav.path)
    return shell


def _header(engine):
    user = stored_user(engine)
    left, right = st.columns([0.8, 0.2])
    with left:
        st.title("Admin Dashboard")
        name = (user.get("name") or user.get("emailAddress") or user.get("email") or "").strip() or "Admin"
        st.caption(f"Signed in as **{name}**")
    with right:
        if st.button("Logout", key="logout_top"):
            rerun_to(LOGOUT)


def _tab_bar(shell: AdminShell):
    cols = st.columns(len(AdminTab))
    for col, tab in zip(cols, AdminTab):
        with col:
            current = shell.visible_tab() == tab
            if st.button(TAB_LABELS[tab], key=f"tab_{tab.value}", type="primary" if current else "secondary",
                         use_container_width=True):
                shell.select_tab(tab)
                st.rerun()


def render(state: AppState, engine):
    nav = Navigator()
    shell = _shell(nav)

    _header(engine)
    _tab_bar(shell)
    st.markdown("---")

    target = shell.form_target()
    if target is not None:
        if target.entity == "branch":
            branch_form.render(state, target.entity_id)
        else:
            course_form.render(state, target.entity_id)
        return

    discard_controllers()
    if shell.sub_route_active:
        st.warning("Page not found.")
        return

    tab = shell.visible_tab()
    if tab == AdminTab.ADMIN_DETAILS:
        details.render(engine)
    elif tab == AdminTab.COURSES:
        course_list.render(state)
    elif tab == AdminTab.BRANCHES:
        branch_list.render(state)
    elif tab == AdminTab.FEATURES:
        featured_page.render(state)
