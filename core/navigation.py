# core/navigation.py
from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Dict, List, MutableMapping, Optional

import streamlit as st

LANDING = "/"
SIGNIN = "/signin"
LOGOUT = "/logout"
ADMIN_ROOT = "/admin"
BRANCH_CREATE = "/admin/branches/create"
COURSE_CREATE = "/admin/courses/create"

ROUTE_KEY = "route"
HISTORY_KEY = "route_history"


def branch_edit_path(branch_id: str) -> str:
    return f"/admin/branches/edit/{branch_id}"


def course_edit_path(course_id: str) -> str:
    return f"/admin/courses/edit/{course_id}"


@dataclass(frozen=True)
class RouteMatch:
    name: str
    params: Dict[str, str] = field(default_factory=dict)


_PATTERNS = [
    ("landing", re.compile(r"^/$")),
    ("signin", re.compile(r"^/signin$")),
    ("logout", re.compile(r"^/logout$")),
    ("admin", re.compile(r"^/admin$")),
    ("branch_create", re.compile(r"^/admin/branches/create$")),
    ("branch_edit", re.compile(r"^/admin/branches/edit/(?P<id>[^/]+)$")),
    ("course_create", re.compile(r"^/admin/courses/create$")),
    ("course_edit", re.compile(r"^/admin/courses/edit/(?P<id>[^/]+)$")),
]


def normalize_path(path: Optional[str]) -> str:
    p = (path or "").strip() or LANDING
    if not p.startswith("/"):
        p = "/" + p
    if len(p) > 1:
        p = p.rstrip("/")
    return p


def match_route(path: Optional[str]) -> Optional[RouteMatch]:
    p = normalize_path(path)
    for name, pattern in _PATTERNS:
        m = pattern.match(p)
        if m:
            return RouteMatch(name, m.groupdict())
    return None


def is_admin_path(path: Optional[str]) -> bool:
    p = normalize_path(path)
    return p == ADMIN_ROOT or p.startswith(ADMIN_ROOT + "/")


class Navigator:
    """
    Keeps the current path in a session mapping (``st.session_state`` when
    running under Streamlit). ``replace`` overwrites the last history entry
    instead of pushing a new one.
    """

    def __init__(self, session: Optional[MutableMapping] = None):
        self._session = session

    @property
    def session(self) -> MutableMapping:
        return self._session if self._session is not None else st.session_state

    @property
    def path(self) -> str:
        return normalize_path(self.session.get(ROUTE_KEY))

    @property
    def history(self) -> List[str]:
        return list(self.session.get(HISTORY_KEY) or [])

    def go(self, path: str, replace: bool = False) -> None:
        target = normalize_path(path)
        history = self.history
        if replace and history:
            history[-1] = target
        else:
            history.append(target)
        self.session[HISTORY_KEY] = history
        self.session[ROUTE_KEY] = target

    def __call__(self, path: str, replace: bool = False) -> None:
        self.go(path, replace=replace)


def rerun_to(path: str, replace: bool = False):
    """Navigate inside a Streamlit run and restart the script on the new route."""
    Navigator().go(path, replace=replace)
    st.rerun()


def guarded_path(path: Optional[str], signed_in: bool) -> str:
    """Admin routes need a stored token; everyone else goes to the sign-in page."""
    p = normalize_path(path)
    if is_admin_path(p) and not signed_in:
        return SIGNIN
    return p
