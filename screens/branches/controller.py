# screens/branches/controller.py
from __future__ import annotations
import dataclasses
from dataclasses import dataclass, field
from typing import List, Optional

from core.auth import EMAIL_RE
from screens.forms.attachments import EMPTY, Attachment, PendingUpload, from_file, from_stored_path, pending_upload
from screens.forms.base import EntityFormController
from store.models import Branch, BranchInput

TEXT_FIELDS = ("branch_name", "office_type", "address", "mobile", "email")
FIELD_LABELS = {
    "branch_name": "Branch name",
    "office_type": "Office type",
    "address": "Address",
    "mobile": "Mobile number",
    "email": "Email address",
}


@dataclass
class BranchDraft:
    branch_name: str = ""
    office_type: str = ""
    address: str = ""
    mobile: str = ""
    email: str = ""
    image: Attachment = field(default=EMPTY)


class BranchFormController(EntityFormController[BranchDraft]):
    entity_label = "branch"

    def empty_draft(self) -> BranchDraft:
        return BranchDraft()

    def draft_from(self, entity: Branch) -> BranchDraft:
        return BranchDraft(
            branch_name=entity.branch_name,
            office_type=entity.office_type,
            address=entity.address,
            mobile=entity.mobile,
            email=entity.email,
            image=from_stored_path(entity.branch_image, self.media_root),
        )

    def set_field(self, name: str, value: str) -> None:
        if name not in TEXT_FIELDS:
            raise KeyError(name)
        self.draft = dataclasses.replace(self.draft, **{name: value})

    def choose_image(self, filename: str, content: bytes, content_type: Optional[str] = None) -> PendingUpload:
        upload = from_file(filename, content, content_type)
        self.draft = dataclasses.replace(self.draft, image=upload)
        return upload

    @property
    def preview(self) -> Optional[str]:
        return self.draft.image.preview

    def validate(self) -> List[str]:
        problems = []
        for name in TEXT_FIELDS:
            if not str(getattr(self.draft, name)).strip():
                problems.append(f"{FIELD_LABELS[name]} is required")
        email = self.draft.email.strip()
        if email and not EMAIL_RE.match(email):
            problems.append("Email address is invalid")
        if not self.is_edit and not isinstance(self.draft.image, PendingUpload):
            problems.append("Branch image is required")
        return problems

    def build_input(self) -> BranchInput:
        d = self.draft
        return BranchInput(
            branch_name=d.branch_name.strip(),
            office_type=d.office_type.strip(),
            address=d.address.strip(),
            mobile=d.mobile.strip(),
            email=d.email.strip(),
            branch_image=pending_upload(d.image),
        )
