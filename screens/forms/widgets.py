# screens/forms/widgets.py
"""Streamlit glue shared by the branch and course forms."""
from __future__ import annotations
from typing import Callable, Optional

import streamlit as st

from core.async_utils import run_sync
from core.forms import flash, toast_error
from core.navigation import rerun_to
from screens.forms.attachments import Attachment, PendingUpload
from screens.forms.base import EntityFormController

CONTROLLER_PREFIX = "form::"
IMAGE_TYPES = ["png", "jpg", "jpeg", "webp", "gif"]


def controller_key(entity: str, entity_id: Optional[str]) -> str:
    return f"{CONTROLLER_PREFIX}{entity}::{entity_id or 'new'}"


def session_controller(key: str, factory: Callable[[], EntityFormController]) -> EntityFormController:
    """One controller per routed form, created and mounted on first render."""
    ctl = st.session_state.get(key)
    if ctl is None:
        ctl = factory()
        st.session_state[key] = ctl
        run_sync(ctl.mount())
    return ctl


def discard_controllers(keep: Optional[str] = None) -> None:
    """Unmount every form controller except ``keep`` (leaving a form clears the store's current entity)."""
    for key in [k for k in st.session_state.keys() if str(k).startswith(CONTROLLER_PREFIX)]:
        if key == keep:
            continue
        st.session_state[key].unmount()
        del st.session_state[key]


def show_attachment(slot: Attachment, width: int = 240, caption: Optional[str] = None):
    if isinstance(slot, PendingUpload):
        st.image(slot.content, width=width, caption=caption or slot.filename)
    elif slot.preview:
        st.image(slot.preview, width=width, caption=caption)
    else:
        st.caption("No image selected")


def picked_file(label: str, key: str):
    """Returns (filename, bytes, content_type) for a freshly picked image, else None."""
    up = st.file_uploader(label, type=IMAGE_TYPES, key=key)
    if up is None:
        return None
    return up.name, up.getvalue(), up.type


def load_gate(ctl: EntityFormController, noun: str) -> bool:
    """Renders the loading/error placeholder for an edit form; True when the form can render."""
    ctl.sync_from_store()
    if ctl.loaded:
        return True
    if ctl.loading:
        st.info(f"Loading {noun}…")
        return False
    st.error(ctl.load_error or f"{noun.capitalize()} not found")
    c1, c2 = st.columns(2)
    with c1:
        if st.button("Retry", key=f"retry_{noun}"):
            run_sync(ctl.store.get_by_id(ctl.entity_id))
            st.rerun()
    with c2:
        if st.button("Back to dashboard", key=f"back_{noun}"):
            leave(ctl)
    return False


def submit(ctl: EntityFormController, key: str) -> None:
    outcome = run_sync(ctl.submit())
    if outcome.ok:
        flash(outcome.message, ok=True)
        st.session_state.pop(key, None)
        st.rerun()
    else:
        toast_error(outcome.message)
        st.error(outcome.message)


def leave(ctl: EntityFormController) -> None:
    ctl.unmount()
    rerun_to(ctl.list_route)
