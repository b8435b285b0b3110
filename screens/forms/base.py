# screens/forms/base.py
"""
Shared create/edit flow for entity forms.

A controller owns a *draft* (the editable local copy of one entity) and
talks to exactly one store. Field edits only touch the draft; the store is
involved when the form mounts in edit mode and when it submits.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, TypeVar

from core.navigation import ADMIN_ROOT
from store.entity_store import EntityStore

logger = logging.getLogger(__name__)

D = TypeVar("D")  # draft
Navigate = Callable[[str], None]


@dataclass
class SubmitOutcome:
    ok: bool
    message: str
    dispatched: bool = False


class EntityFormController(Generic[D]):
    entity_label = "entity"
    list_route = ADMIN_ROOT

    def __init__(self, store: EntityStore, navigate: Navigate, media_root: str, entity_id: Optional[str] = None):
        self.store = store
        self.navigate = navigate
        self.media_root = media_root
        self.entity_id = entity_id
        self.submitting = False
        # bumped whenever the draft is replaced wholesale, so widgets can re-seed
        self.revision = 0
        self._loaded_id: Optional[str] = None
        self.draft: D = self.empty_draft()

    @property
    def is_edit(self) -> bool:
        return self.entity_id is not None

    # ------------------------------------------------------------------
    # subclass hooks
    # ------------------------------------------------------------------
    def empty_draft(self) -> D:
        raise NotImplementedError

    def draft_from(self, entity: Any) -> D:
        raise NotImplementedError

    def validate(self) -> List[str]:
        raise NotImplementedError

    def build_input(self) -> Any:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # lifecycle
    # ------------------------------------------------------------------
    def _replace_draft(self, draft: D) -> None:
        self.draft = draft
        self.revision += 1

    async def mount(self) -> None:
        """In edit mode, make sure the store holds this entity, then copy it into the draft."""
        if not self.is_edit:
            return
        current = self.store.current
        if current is None or self.store.entity_id(current) != self.entity_id:
            await self.store.get_by_id(self.entity_id)
        self.sync_from_store()

    def sync_from_store(self) -> bool:
        current = self.store.current
        if not self.is_edit or current is None:
            return False
        if self.store.entity_id(current) != self.entity_id or self._loaded_id == self.entity_id:
            return False
        self._replace_draft(self.draft_from(current))
        self._loaded_id = self.entity_id
        return True

    def unmount(self) -> None:
        self.store.clear_current()

    def reset(self) -> None:
        self._replace_draft(self.empty_draft())

    @property
    def loaded(self) -> bool:
        return not self.is_edit or self._loaded_id is not None

    @property
    def loading(self) -> bool:
        return self.is_edit and self._loaded_id is None and self.store.loading

    @property
    def load_error(self) -> Optional[str]:
        if self.is_edit and self._loaded_id is None:
            return self.store.error
        return None

    # ------------------------------------------------------------------
    # submit
    # ------------------------------------------------------------------
    async def submit(self) -> SubmitOutcome:
        if self.submitting:
            return SubmitOutcome(ok=False, message=f"Still saving this {self.entity_label}…")

        problems = self.validate()
        if problems:
            return SubmitOutcome(ok=False, message=problems[0])

        self.submitting = True
        try:
            data = self.build_input()
            if self.is_edit:
                result = await self.store.update(self.entity_id, data)
            else:
                result = await self.store.create(data)

            if not result.ok:
                verb = "updating" if self.is_edit else "creating"
                return SubmitOutcome(ok=False, message=result.error or f"Error {verb} {self.entity_label}", dispatched=True)

            if not self.is_edit:
                self.reset()
            self.store.clear_current()
            self.navigate(self.list_route)
            verb = "updated" if self.is_edit else "created"
            logger.info("%s %s", self.entity_label.capitalize(), verb)
            return SubmitOutcome(ok=True, message=f"{self.entity_label.capitalize()} {verb} successfully!", dispatched=True)
        finally:
            self.submitting = False
