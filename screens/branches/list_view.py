# screens/branches/list_view.py
from __future__ import annotations

from core.media import media_url
from core.navigation import BRANCH_CREATE, branch_edit_path
from screens.admin.listing import render_entity_list
from store.app_state import AppState
from store.models import Branch


def render(state: AppState):
    def to_row(b: Branch) -> dict:
        return {
            "Branch": b.branch_name,
            "Office type": b.office_type,
            "Address": b.address,
            "Mobile": b.mobile,
            "Email": b.email,
            "Image": media_url(state.media_root, b.branch_image) or "",
        }

    render_entity_list(
        state.branches,
        title="🏢 Branches",
        to_row=to_row,
        label=lambda b: f"{b.branch_name} ({b.office_type})" if b.office_type else b.branch_name,
        create_path=BRANCH_CREATE,
        edit_path=branch_edit_path,
    )
