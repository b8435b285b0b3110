# screens/forms/attachments.py
"""
One image slot on a form. A slot is empty, points at a file the server
already stores, or holds a file picked locally that has not been uploaded
yet. Only the last kind is ever sent on submit.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

from core.media import data_url, media_url, normalize_media_path
from store.models import Upload


@dataclass(frozen=True)
class EmptySlot:
    @property
    def preview(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class RemoteImage:
    path: str
    preview: Optional[str]


@dataclass(frozen=True)
class PendingUpload:
    filename: str
    content: bytes
    content_type: str
    preview: str

    def as_upload(self) -> Upload:
        return Upload(self.filename, self.content, self.content_type)


Attachment = Union[EmptySlot, RemoteImage, PendingUpload]

EMPTY = EmptySlot()


def from_stored_path(path: Optional[str], media_root: str) -> Attachment:
    p = normalize_media_path(path)
    if not p:
        return EMPTY
    return RemoteImage(path=p, preview=media_url(media_root, p))


def from_file(filename: str, content: bytes, content_type: Optional[str] = None) -> PendingUpload:
    ctype = content_type or "application/octet-stream"
    return PendingUpload(filename=filename, content=content, content_type=ctype, preview=data_url(content, ctype))


def pending_upload(slot: Attachment) -> Optional[Upload]:
    return slot.as_upload() if isinstance(slot, PendingUpload) else None


def stored_path(slot: Attachment) -> Optional[str]:
    return slot.path if isinstance(slot, RemoteImage) else None
