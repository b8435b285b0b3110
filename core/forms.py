# core/forms.py
from __future__ import annotations
import streamlit as st

def toast_success(msg: str): st.toast(msg, icon="✅")
def toast_error(msg: str): st.toast(msg, icon="❌")

FLASH_KEY = "_flash_toasts"

def flash(msg: str, ok: bool = True):
    """Queue a toast that survives the next st.rerun()."""
    st.session_state.setdefault(FLASH_KEY, []).append((msg, ok))

def show_flashes():
    for msg, ok in st.session_state.pop(FLASH_KEY, []):
        (toast_success if ok else toast_error)(msg)
