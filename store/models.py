# store/models.py
"""
Entity models for branches and courses, plus the small value types the
stores exchange with their callers.

Wire format is the API's camelCase JSON; ``from_api`` parses it and
normalises stored file paths, ``to_fields`` produces the text parts of a
multipart submission.
"""

from __future__ import annotations
import json
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar

from core.media import normalize_media_path


# ============================================================================
# ENUMS
# ============================================================================

class StoreStatus(str, Enum):
    """Coarse status shared by every operation of one store."""
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class CourseMode(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"
    HYBRID = "hybrid"

    @classmethod
    def parse(cls, value: Any) -> Optional["CourseMode"]:
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


# ============================================================================
# HELPERS
# ============================================================================

def _entity_id(data: Dict[str, Any]) -> Optional[str]:
    raw = data.get("_id", data.get("id"))
    return str(raw) if raw is not None else None


def _text(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def parse_date(value: Any) -> Optional[date]:
    # ISO strings keep their written calendar date; an offset is not converted to UTC.
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        return None
    s = str(value).strip()
    try:
        return date.fromisoformat(s[:10])
    except ValueError:
        return None


# ============================================================================
# UPLOADS
# ============================================================================

@dataclass(frozen=True)
class Upload:
    """A file chosen on the client, sent as one multipart part."""
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    def as_part(self, field_name: str):
        return (field_name, (self.filename, self.content, self.content_type))


# ============================================================================
# BRANCH
# ============================================================================

@dataclass
class Branch:
    id: Optional[str]
    branch_name: str = ""
    office_type: str = ""
    address: str = ""
    mobile: str = ""
    email: str = ""
    branch_image: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Branch":
        return cls(
            id=_entity_id(data),
            branch_name=_text(data, "branchName"),
            office_type=_text(data, "officeType"),
            address=_text(data, "address"),
            mobile=_text(data, "mobile"),
            email=_text(data, "email"),
            branch_image=normalize_media_path(data.get("branchImage")),
        )


@dataclass
class BranchInput:
    """Everything a create/update submits; ``branch_image`` only when a new file was picked."""
    branch_name: str
    office_type: str
    address: str
    mobile: str
    email: str
    branch_image: Optional[Upload] = None

    def to_fields(self) -> Dict[str, str]:
        return {
            "branchName": self.branch_name,
            "officeType": self.office_type,
            "address": self.address,
            "mobile": self.mobile,
            "email": self.email,
        }


# ============================================================================
# COURSE
# ============================================================================

@dataclass
class FacultyMember:
    name: str = ""
    designation: str = ""
    feature: str = ""
    educator: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "FacultyMember":
        return cls(
            name=_text(data, "name"),
            designation=_text(data, "designation"),
            feature=_text(data, "feature"),
            educator=_text(data, "educator"),
        )

    def to_api(self) -> Dict[str, str]:
        return {"name": self.name, "designation": self.designation, "feature": self.feature, "educator": self.educator}


@dataclass
class StudentReview:
    name: str = ""
    review: str = ""
    image: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "StudentReview":
        return cls(name=_text(data, "name"), review=_text(data, "review"), image=normalize_media_path(data.get("image")))

    def to_api(self) -> Dict[str, str]:
        out = {"name": self.name, "review": self.review}
        if self.image:
            out["image"] = self.image
        return out


@dataclass
class Course:
    id: Optional[str]
    course_name: str = ""
    course_mode: Optional[CourseMode] = None
    course_description: str = ""
    batch_start: Optional[date] = None
    duration: str = ""
    curriculum: str = ""
    program_structure: str = ""
    what_i_learn: str = ""
    is_featured: bool = False
    faculty_details: List[FacultyMember] = field(default_factory=list)
    student_reviews: List[StudentReview] = field(default_factory=list)
    course_images: List[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Course":
        images = [normalize_media_path(p) for p in (data.get("courseImages") or [])]
        return cls(
            id=_entity_id(data),
            course_name=_text(data, "courseName"),
            course_mode=CourseMode.parse(data.get("courseMode")),
            course_description=_text(data, "courseDescription"),
            batch_start=parse_date(data.get("batchStart")),
            duration=_text(data, "duration"),
            curriculum=_text(data, "curriculum"),
            program_structure=_text(data, "programStructure"),
            what_i_learn=_text(data, "whatILearn"),
            is_featured=bool(data.get("isFeatured", False)),
            faculty_details=[FacultyMember.from_api(f) for f in (data.get("facultyDetails") or [])],
            student_reviews=[StudentReview.from_api(r) for r in (data.get("studentReviews") or [])],
            course_images=[p for p in images if p],
        )

    @property
    def cover_image(self) -> Optional[str]:
        return self.course_images[0] if self.course_images else None


@dataclass
class CourseInput:
    course_name: str
    course_mode: CourseMode
    course_description: str
    batch_start: date
    duration: str
    curriculum: str
    program_structure: str
    faculty_details: List[FacultyMember]
    student_reviews: List[StudentReview]
    what_i_learn: str = ""
    is_featured: bool = False
    # course image first, then review images in review order
    files: List[Upload] = field(default_factory=list)

    def to_fields(self) -> Dict[str, str]:
        return {
            "courseName": self.course_name,
            "courseMode": self.course_mode.value,
            "courseDescription": self.course_description,
            "batchStart": self.batch_start.isoformat(),
            "duration": self.duration,
            "curriculum": self.curriculum,
            "programStructure": self.program_structure,
            "isFeatured": "true" if self.is_featured else "false",
            "whatILearn": self.what_i_learn,
            "facultyDetails": json.dumps([f.to_api() for f in self.faculty_details]),
            "studentReviews": json.dumps([r.to_api() for r in self.student_reviews]),
        }


# ============================================================================
# ACTION RESULT
# ============================================================================

T = TypeVar("T")


@dataclass
class ActionResult(Generic[T]):
    """Outcome of one store operation. Stores return these instead of raising."""
    ok: bool
    payload: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, payload: Optional[T] = None) -> "ActionResult[T]":
        return cls(ok=True, payload=payload)

    @classmethod
    def failure(cls, error: str) -> "ActionResult[T]":
        return cls(ok=False, error=error)
