# screens/forms/__init__.py
from __future__ import annotations

from .attachments import Attachment, EmptySlot, PendingUpload, RemoteImage, pending_upload, from_file, from_stored_path
from .records import RecordList
from .base import EntityFormController, SubmitOutcome
