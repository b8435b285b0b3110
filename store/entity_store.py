# store/entity_store.py
"""
Generic per-entity store: the collection, the featured subset, the entity
currently being edited, and one shared loading/error/status triple.

Every async operation goes pending -> fulfilled/rejected:

* pending:   loading=True,  status=LOADING, error=None
* fulfilled: loading=False, status=SUCCEEDED, state updated from the response
* rejected:  loading=False, status=FAILED, error=<message>, state untouched

Operations return an :class:`ActionResult` and never raise. The triple is
shared by all operations of the store, so whichever request settles last
decides what it shows.
"""

from __future__ import annotations
import logging
from typing import Any, Awaitable, Callable, Dict, Generic, Iterable, List, Optional, Sequence, Tuple, TypeVar

from core.api_client import ApiClient, ApiError, FileField
from store.models import ActionResult, StoreStatus

logger = logging.getLogger(__name__)

E = TypeVar("E")  # entity
I = TypeVar("I")  # create/update input


class EntityStore(Generic[E, I]):
    entity_label = "entity"
    collection_label = "entities"

    list_path = ""
    item_path = ""          # with an {id} placeholder
    create_path = ""
    featured_path = ""
    set_featured_path = ""
    featured_ids_key = "ids"
    featured_keys: Tuple[str, ...] = ("featured", "data")

    def __init__(self, api: ApiClient):
        self.api = api
        self.items: List[E] = []
        self.featured: List[E] = []
        self.current: Optional[E] = None
        self.loading = False
        self.error: Optional[str] = None
        self.status = StoreStatus.IDLE

    # ------------------------------------------------------------------
    # subclass hooks
    # ------------------------------------------------------------------
    def parse(self, data: Dict[str, Any]) -> E:
        raise NotImplementedError

    def multipart(self, data: I) -> Tuple[Dict[str, str], List[FileField]]:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # reducers
    # ------------------------------------------------------------------
    def _pending(self) -> None:
        self.loading = True
        self.status = StoreStatus.LOADING
        self.error = None

    def _fulfilled(self) -> None:
        self.loading = False
        self.status = StoreStatus.SUCCEEDED

    def _rejected(self, message: str) -> None:
        self.loading = False
        self.status = StoreStatus.FAILED
        self.error = message

    def clear_error(self) -> None:
        self.error = None

    def clear_current(self) -> None:
        self.current = None

    # ------------------------------------------------------------------
    # parsing
    # ------------------------------------------------------------------
    @staticmethod
    def entity_id(entity: Any) -> Optional[str]:
        return getattr(entity, "id", None)

    def _parse_one(self, raw: Any) -> E:
        if isinstance(raw, dict) and isinstance(raw.get(self.entity_label), dict):
            raw = raw[self.entity_label]
        if not isinstance(raw, dict):
            raise ValueError(f"expected a {self.entity_label} object, got {type(raw).__name__}")
        return self.parse(raw)

    def _parse_many(self, raw: Any, keys: Iterable[str] = ()) -> List[E]:
        if isinstance(raw, dict):
            for key in keys:
                if isinstance(raw.get(key), list):
                    raw = raw[key]
                    break
        if not isinstance(raw, list):
            raise ValueError(f"expected a list of {self.collection_label}, got {type(raw).__name__}")
        return [self.parse(item) for item in raw]

    def _path(self, entity_id: str) -> str:
        return self.item_path.format(id=entity_id)

    # ------------------------------------------------------------------
    # action runner
    # ------------------------------------------------------------------
    async def _run(
        self,
        action: str,
        request: Callable[[], Awaitable[Any]],
        parse: Callable[[Any], Any],
        apply: Callable[[Any], None],
        fallback: str,
    ) -> ActionResult:
        self._pending()
        try:
            value = parse(await request())
        except ApiError as e:
            message = e.user_message(fallback)
            logger.warning("%s/%s failed: %s", self.collection_label, action, e)
            self._rejected(message)
            return ActionResult.failure(message)
        except (TypeError, ValueError, AttributeError) as e:
            logger.warning("%s/%s returned an unexpected payload: %s", self.collection_label, action, e)
            self._rejected(fallback)
            return ActionResult.failure(fallback)
        apply(value)
        self._fulfilled()
        return ActionResult.success(value)

    # ------------------------------------------------------------------
    # operations
    # ------------------------------------------------------------------
    async def list_all(self) -> ActionResult:
        def apply(items: List[E]) -> None:
            self.items = items
        return await self._run(
            "list", lambda: self.api.get(self.list_path),
            lambda raw: self._parse_many(raw, (self.collection_label, "data")),
            apply, f"Failed to fetch {self.collection_label}",
        )

    async def get_by_id(self, entity_id: str) -> ActionResult:
        def apply(entity: E) -> None:
            self.current = entity
        return await self._run(
            "get", lambda: self.api.get(self._path(entity_id)),
            self._parse_one, apply, f"Failed to fetch {self.entity_label}",
        )

    async def create(self, data: I) -> ActionResult:
        fields, files = self.multipart(data)

        def apply(entity: E) -> None:
            self.items.append(entity)
        return await self._run(
            "create", lambda: self.api.post(self.create_path, data=fields, files=files),
            self._parse_one, apply, f"Failed to create {self.entity_label}",
        )

    async def update(self, entity_id: str, data: I) -> ActionResult:
        fields, files = self.multipart(data)

        def apply(entity: E) -> None:
            eid = self.entity_id(entity)
            for idx, existing in enumerate(self.items):
                if self.entity_id(existing) == eid:
                    self.items[idx] = entity
                    break
            self.current = entity
        return await self._run(
            "update", lambda: self.api.put(self._path(entity_id), data=fields, files=files),
            self._parse_one, apply, f"Failed to update {self.entity_label}",
        )

    async def delete(self, entity_id: str) -> ActionResult:
        def apply(deleted_id: str) -> None:
            self.items = [e for e in self.items if self.entity_id(e) != deleted_id]
            if self.current is not None and self.entity_id(self.current) == deleted_id:
                self.current = None
        return await self._run(
            "delete", lambda: self.api.delete(self._path(entity_id)),
            lambda _raw: str(entity_id), apply, f"Failed to delete {self.entity_label}",
        )

    async def get_featured(self) -> ActionResult:
        def apply(items: List[E]) -> None:
            self.featured = items
        return await self._run(
            "get_featured", lambda: self.api.get(self.featured_path),
            lambda raw: self._parse_many(raw, self.featured_keys),
            apply, f"Failed to fetch featured {self.collection_label}",
        )

    async def set_featured(self, ids: Sequence[str]) -> ActionResult:
        body = {self.featured_ids_key: [str(i) for i in ids]}

        def apply(items: List[E]) -> None:
            self.featured = items
        return await self._run(
            "set_featured", lambda: self.api.post(self.set_featured_path, json=body),
            lambda raw: self._parse_many(raw, self.featured_keys),
            apply, f"Failed to set featured {self.collection_label}",
        )

    # ------------------------------------------------------------------
    # lookups
    # ------------------------------------------------------------------
    def find(self, entity_id: str) -> Optional[E]:
        for entity in self.items:
            if self.entity_id(entity) == entity_id:
                return entity
        return None
