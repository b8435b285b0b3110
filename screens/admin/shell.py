# screens/admin/shell.py
"""
Tab/route coordinator for the admin area.

On ``/admin`` the active tab's content is shown. On any deeper admin path
(a create/edit form) tab content is suppressed and the routed form renders
instead. Picking a tab from a form first replaces the route with ``/admin``
so the form and tab content never render together.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from core.navigation import ADMIN_ROOT, RouteMatch, match_route, normalize_path


class AdminTab(str, Enum):
    ADMIN_DETAILS = "admin-details"
    COURSES = "courses"
    BRANCHES = "branches"
    FEATURES = "features"


TAB_LABELS = {
    AdminTab.ADMIN_DETAILS: "🛡️ Admin Details",
    AdminTab.COURSES: "🎓 Courses",
    AdminTab.BRANCHES: "🏢 Branches",
    AdminTab.FEATURES: "⭐ Features",
}

_FORM_ROUTES = {
    "branch_create": ("branch", False),
    "branch_edit": ("branch", True),
    "course_create": ("course", False),
    "course_edit": ("course", True),
}


@dataclass(frozen=True)
class FormTarget:
    entity: str            # "branch" | "course"
    entity_id: Optional[str]

    @property
    def is_edit(self) -> bool:
        return self.entity_id is not None


class AdminShell:
    def __init__(self, navigate: Callable[..., None], path: str = ADMIN_ROOT):
        self.navigate = navigate
        self.path = normalize_path(path)
        self.active_tab = AdminTab.ADMIN_DETAILS

    def on_route(self, path: str) -> None:
        self.path = normalize_path(path)

    @property
    def sub_route_active(self) -> bool:
        return self.path != ADMIN_ROOT

    def select_tab(self, tab: AdminTab) -> None:
        tab = AdminTab(tab)
        if self.sub_route_active:
            self.navigate(ADMIN_ROOT, replace=True)
            self.path = ADMIN_ROOT
        self.active_tab = tab

    def visible_tab(self) -> Optional[AdminTab]:
        return None if self.sub_route_active else self.active_tab

    def form_target(self) -> Optional[FormTarget]:
        if not self.sub_route_active:
            return None
        match: Optional[RouteMatch] = match_route(self.path)
        if match is None or match.name not in _FORM_ROUTES:
            return None
        entity, is_edit = _FORM_ROUTES[match.name]
        return FormTarget(entity, match.params.get("id") if is_edit else None)
