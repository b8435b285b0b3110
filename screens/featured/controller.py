# screens/featured/controller.py
"""
Picks the three courses and three branches shown on the landing page.

Selections are local until submitted. After a successful submit the
featured subset is fetched again and the selection re-seeded from what the
server actually stored.
"""
from __future__ import annotations
import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from store.entity_store import EntityStore

logger = logging.getLogger(__name__)

FEATURED_LIMIT = 3
VALIDATION_MESSAGE_SECONDS = 3.0
SUBMIT_MESSAGE_SECONDS = 5.0

Clock = Callable[[], float]


@dataclass
class Flash:
    text: str
    ok: bool
    expires_at: float


class FeaturedSelection:
    def __init__(self, noun: str, limit: int = FEATURED_LIMIT):
        self.noun = noun
        self.limit = limit
        self.ids: List[str] = []

    def seed(self, ids) -> None:
        self.ids = [str(i) for i in ids if i is not None]

    def add(self, entity_id: str) -> Optional[str]:
        """Returns a message when the add is refused at the cap; duplicates are ignored."""
        if not entity_id or entity_id in self.ids:
            return None
        if len(self.ids) >= self.limit:
            return f"Maximum of {self.limit} featured {self.noun} allowed"
        self.ids.append(entity_id)
        return None

    def remove(self, entity_id: str) -> None:
        self.ids = [i for i in self.ids if i != entity_id]

    @property
    def complete(self) -> bool:
        return len(self.ids) == self.limit

    def __contains__(self, entity_id: str) -> bool:
        return entity_id in self.ids


class FeaturedController:
    def __init__(self, courses: EntityStore, branches: EntityStore, clock: Clock = time.monotonic):
        self.courses = courses
        self.branches = branches
        self.clock = clock
        self.course_selection = FeaturedSelection("courses")
        self.branch_selection = FeaturedSelection("branches")
        self.loaded = False
        self.load_error: Optional[str] = None
        self._flash: Optional[Flash] = None

    # ------------------------------------------------------------------
    # messages
    # ------------------------------------------------------------------
    def _say(self, text: str, ok: bool, seconds: float) -> None:
        self._flash = Flash(text, ok, self.clock() + seconds)

    @property
    def message(self) -> Optional[Flash]:
        if self._flash and self.clock() >= self._flash.expires_at:
            self._flash = None
        return self._flash

    # ------------------------------------------------------------------
    # loading
    # ------------------------------------------------------------------
    async def load(self) -> bool:
        results = await asyncio.gather(
            self.courses.list_all(),
            self.courses.get_featured(),
            self.branches.list_all(),
            self.branches.get_featured(),
        )
        failed = next((r for r in results if not r.ok), None)
        if failed:
            self.load_error = failed.error or "Failed to fetch data"
            return False
        self.load_error = None
        self.course_selection.seed(self.courses.entity_id(c) for c in self.courses.featured)
        self.branch_selection.seed(self.branches.entity_id(b) for b in self.branches.featured)
        self.loaded = True
        return True

    # ------------------------------------------------------------------
    # selection edits
    # ------------------------------------------------------------------
    def _add(self, selection: FeaturedSelection, entity_id: str) -> bool:
        refused = selection.add(entity_id)
        if refused:
            self._say(refused, ok=False, seconds=VALIDATION_MESSAGE_SECONDS)
            return False
        self._flash = None
        return entity_id in selection

    def add_course(self, course_id: str) -> bool:
        return self._add(self.course_selection, course_id)

    def add_branch(self, branch_id: str) -> bool:
        return self._add(self.branch_selection, branch_id)

    def remove_course(self, course_id: str) -> None:
        self.course_selection.remove(course_id)

    def remove_branch(self, branch_id: str) -> None:
        self.branch_selection.remove(branch_id)

    # ------------------------------------------------------------------
    # submit
    # ------------------------------------------------------------------
    @property
    def can_submit_courses(self) -> bool:
        return self.course_selection.complete

    @property
    def can_submit_branches(self) -> bool:
        return self.branch_selection.complete

    async def _submit(self, store: EntityStore, selection: FeaturedSelection) -> bool:
        if not selection.complete:
            self._say(f"Please select exactly {selection.limit} {selection.noun}", ok=False, seconds=VALIDATION_MESSAGE_SECONDS)
            return False

        result = await store.set_featured(list(selection.ids))
        if not result.ok:
            self._say(result.error or f"Failed to set featured {selection.noun}", ok=False, seconds=SUBMIT_MESSAGE_SECONDS)
            return False

        refreshed = await store.get_featured()
        if not refreshed.ok:
            self._say(refreshed.error or f"Failed to fetch featured {selection.noun}", ok=False, seconds=SUBMIT_MESSAGE_SECONDS)
            return False

        selection.seed(store.entity_id(e) for e in store.featured)
        logger.info("Featured %s set to %s", selection.noun, selection.ids)
        self._say(f"Featured {selection.noun} updated successfully!", ok=True, seconds=SUBMIT_MESSAGE_SECONDS)
        return True

    async def submit_courses(self) -> bool:
        return await self._submit(self.courses, self.course_selection)

    async def submit_branches(self) -> bool:
        return await self._submit(self.branches, self.branch_selection)
