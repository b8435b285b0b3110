# app.py
from __future__ import annotations
import logging

import streamlit as st

from core.api_client import ApiClient
from core.auth import is_authenticated, token_provider
from core.db import get_engine, init_db
from core.forms import show_flashes
from core.logging_config import configure_logging
from core.navigation import ROUTE_KEY, Navigator, guarded_path, is_admin_path, match_route
from core.settings import load_settings
from core.site_content import load_site_content
from core.ui import render_footer_global
from screens import logout, signin
from screens.admin import layout as admin_layout
from screens.landing import page as landing_page
from store.app_state import AppState

logger = logging.getLogger(__name__)

QUERY_PARAM = "path"


def _ensure_settings():
    if "settings" not in st.session_state:
        st.session_state["settings"] = load_settings()
    return st.session_state["settings"]


def _ensure_engine(settings):
    if "engine" not in st.session_state:
        st.session_state["engine"] = get_engine(settings.storage.url)
    return st.session_state["engine"]


def _ensure_site():
    if "site" not in st.session_state:
        st.session_state["site"] = load_site_content()
    return st.session_state["site"]


def _ensure_state(settings, engine) -> AppState:
    """One API client and one pair of stores per browser session."""
    if "app_state" not in st.session_state:
        api = ApiClient(
            settings.api.base_url,
            timeout=settings.api.timeout_seconds,
            token_provider=token_provider(engine),
        )
        st.session_state["app_state"] = AppState.create(api, settings.api.media_root)
    return st.session_state["app_state"]


def _sync_route(nav: Navigator) -> str:
    # a fresh session (or a shared link) starts from the ?path= query param
    if ROUTE_KEY not in st.session_state:
        nav.go(st.query_params.get(QUERY_PARAM) or "/", replace=True)
    path = nav.path
    if st.query_params.get(QUERY_PARAM) != path:
        st.query_params[QUERY_PARAM] = path
    return path


def main():
    settings = _ensure_settings()
    configure_logging(settings.logging)
    engine = _ensure_engine(settings)

    if "db_initialized" not in st.session_state:
        init_db(engine)
        st.session_state["db_initialized"] = True

    st.set_page_config(page_title=settings.app.name, page_icon="🎓", layout="wide")

    site = _ensure_site()
    state = _ensure_state(settings, engine)
    nav = Navigator()
    path = _sync_route(nav)

    signed_in = is_authenticated(engine)
    allowed = guarded_path(path, signed_in)
    if allowed != path:
        logger.info("Unauthenticated request for %s; redirecting to sign-in", path)
        nav.go(allowed, replace=True)
        st.rerun()

    show_flashes()
    try:
        _render_route(path, state, site, engine, signed_in)
    except Exception as e:
        logger.exception("Page %s failed", path)
        st.error("Something went wrong while rendering this page.")
        with st.expander("Diagnostics"):
            st.exception(e)


def _render_route(path, state, site, engine, signed_in):
    route = match_route(path)
    name = route.name if route else None
    if name == "landing":
        landing_page.render(state, site, signed_in=signed_in)
        return
    if name == "signin":
        signin.render(state, engine)
    elif name == "logout":
        logout.render(engine)
    elif is_admin_path(path):
        admin_layout.render(state, engine)
    else:
        st.title("404")
        st.warning(f"No page at {path}")
    render_footer_global(site)


if __name__ == "__main__":
    main()
