# screens/admin/listing.py
"""Table + row actions shared by the Courses and Branches tabs."""
from __future__ import annotations
from typing import Any, Callable, Dict, List

import pandas as pd
import streamlit as st

from core.async_utils import run_sync
from core.forms import toast_error, toast_success
from core.navigation import rerun_to
from store.entity_store import EntityStore

Row = Callable[[Any], Dict[str, Any]]


def _loaded_key(store: EntityStore) -> str:
    return f"_listed_{store.collection_label}"


def ensure_listed(store: EntityStore) -> None:
    """Fetch the collection once per session when the store holds nothing yet."""
    if store.items or st.session_state.get(_loaded_key(store)):
        return
    st.session_state[_loaded_key(store)] = True
    run_sync(store.list_all())


def render_entity_list(
    store: EntityStore,
    *,
    title: str,
    to_row: Row,
    label: Callable[[Any], str],
    create_path: str,
    edit_path: Callable[[str], str],
):
    ensure_listed(store)
    noun = store.entity_label

    head, add_col, refresh_col = st.columns([0.6, 0.2, 0.2])
    with head:
        st.subheader(title)
    with add_col:
        if st.button(f"➕ Add {noun.capitalize()}", key=f"add_{noun}", type="primary"):
            rerun_to(create_path)
    with refresh_col:
        if st.button("🔄 Refresh", key=f"refresh_{noun}"):
            run_sync(store.list_all())
            st.rerun()

    if store.error:
        st.error(store.error)

    items: List[Any] = store.items
    if not items:
        st.info(f"No {store.collection_label} yet.")
        return

    df = pd.DataFrame([to_row(e) for e in items])
    st.dataframe(df, use_container_width=True, hide_index=True)

    options = {store.entity_id(e): label(e) for e in items}
    picked = st.selectbox(
        f"Select a {noun}", list(options.keys()), format_func=lambda i: options.get(i, i), key=f"pick_{noun}",
    )
    c1, c2, c3 = st.columns([0.2, 0.3, 0.5])
    with c1:
        if st.button("✏️ Edit", key=f"edit_{noun}", disabled=picked is None):
            rerun_to(edit_path(picked))
    with c2:
        confirm = st.checkbox("Confirm delete", key=f"confirm_del_{noun}")
    with c3:
        if st.button("🗑️ Delete", key=f"del_{noun}", disabled=picked is None or not confirm):
            result = run_sync(store.delete(picked))
            if result.ok:
                toast_success(f"{noun.capitalize()} deleted successfully")
            else:
                toast_error(result.error or f"Failed to delete {noun}")
            st.rerun()
