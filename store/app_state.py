# store/app_state.py
"""
Per-session application state: one store per entity type, shared by every
view that shows that entity type. Views receive the container explicitly.
"""
from __future__ import annotations
from dataclasses import dataclass

from core.api_client import ApiClient
from store.branch_store import BranchStore
from store.course_store import CourseStore


@dataclass
class AppState:
    api: ApiClient
    media_root: str
    branches: BranchStore
    courses: CourseStore

    @classmethod
    def create(cls, api: ApiClient, media_root: str) -> "AppState":
        return cls(api=api, media_root=media_root, branches=BranchStore(api), courses=CourseStore(api))
