# store/branch_store.py
from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple

from core.api_client import FileField
from store.entity_store import EntityStore
from store.models import Branch, BranchInput


class BranchStore(EntityStore[Branch, BranchInput]):
    entity_label = "branch"
    collection_label = "branches"

    list_path = "/api/branches"
    item_path = "/api/branch/{id}"
    create_path = "/api/branch"
    featured_path = "/api/branch/featured"
    set_featured_path = "/api/branch/set-featured"
    featured_ids_key = "branchIds"
    featured_keys = ("featuredBranches", "featured", "data")

    def parse(self, data: Dict[str, Any]) -> Branch:
        return Branch.from_api(data)

    def multipart(self, data: BranchInput) -> Tuple[Dict[str, str], List[FileField]]:
        files = [data.branch_image.as_part("branchImage")] if data.branch_image else []
        return data.to_fields(), files

    @property
    def branches(self) -> List[Branch]:
        return self.items

    @property
    def featured_branches(self) -> List[Branch]:
        return self.featured

    @property
    def current_branch(self) -> Optional[Branch]:
        return self.current
