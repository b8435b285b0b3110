# screens/branches/form.py
from __future__ import annotations
from typing import Optional

import streamlit as st

from core.navigation import Navigator
from screens.branches.controller import BranchFormController
from screens.forms import widgets
from store.app_state import AppState


def render(state: AppState, branch_id: Optional[str] = None):
    key = widgets.controller_key("branch", branch_id)
    widgets.discard_controllers(keep=key)
    ctl: BranchFormController = widgets.session_controller(
        key, lambda: BranchFormController(state.branches, Navigator(), state.media_root, branch_id)
    )

    st.subheader("✏️ Edit Branch" if ctl.is_edit else "➕ Add New Branch")
    if not widgets.load_gate(ctl, "branch"):
        return

    rev = ctl.revision
    d = ctl.draft
    left, right = st.columns([0.6, 0.4])
    with left:
        ctl.set_field("branch_name", st.text_input("Branch Name", value=d.branch_name, key=f"br_name_{rev}"))
        ctl.set_field("office_type", st.text_input(
            "Office Type", value=d.office_type, placeholder="E.g., Regional, Main, Satellite", key=f"br_office_{rev}",
        ))
        ctl.set_field("address", st.text_area("Full Address", value=d.address, key=f"br_address_{rev}"))
        c1, c2 = st.columns(2)
        with c1:
            ctl.set_field("mobile", st.text_input("Mobile Number", value=d.mobile, key=f"br_mobile_{rev}"))
        with c2:
            ctl.set_field("email", st.text_input("Email Address", value=d.email, key=f"br_email_{rev}"))

    with right:
        picked = widgets.picked_file("Branch Image", key=f"br_image_{rev}")
        if picked:
            ctl.choose_image(*picked)
        widgets.show_attachment(ctl.draft.image)
        if ctl.is_edit:
            st.caption("Leave empty to keep the current image.")

    st.markdown("---")
    b1, b2, _ = st.columns([0.2, 0.2, 0.6])
    with b1:
        label = "Update Branch" if ctl.is_edit else "Create Branch"
        if st.button(label, type="primary", disabled=ctl.submitting, key=f"br_submit_{rev}"):
            widgets.submit(ctl, key)
    with b2:
        if st.button("Cancel", key=f"br_cancel_{rev}"):
            st.session_state.pop(key, None)
            widgets.leave(ctl)
