# screens/courses/controller.py
from __future__ import annotations
import dataclasses
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from screens.forms.attachments import (
    EMPTY, Attachment, PendingUpload, from_file, from_stored_path, pending_upload, stored_path,
)
from screens.forms.base import EntityFormController
from screens.forms.records import RecordList
from store.models import Course, CourseInput, CourseMode, FacultyMember, StudentReview, parse_date

DETAIL_FIELDS = (
    "course_name", "course_mode", "course_description", "batch_start",
    "duration", "curriculum", "program_structure", "what_i_learn",
)
REQUIRED_FIELDS = {
    "course_name": "Course name",
    "course_description": "Course description",
    "duration": "Duration",
    "curriculum": "Curriculum",
    "program_structure": "Program structure",
}
FACULTY_FIELDS = ("name", "designation", "feature", "educator")
REVIEW_FIELDS = ("name", "review")


@dataclass
class ReviewDraft:
    name: str = ""
    review: str = ""
    image: Attachment = field(default=EMPTY)


@dataclass
class CourseDraft:
    course_name: str = ""
    course_mode: Optional[CourseMode] = None
    course_description: str = ""
    batch_start: Optional[date] = None
    duration: str = ""
    curriculum: str = ""
    program_structure: str = ""
    what_i_learn: str = ""
    image: Attachment = field(default=EMPTY)
    faculty: RecordList[FacultyMember] = field(default_factory=lambda: RecordList(FacultyMember))
    reviews: RecordList[ReviewDraft] = field(default_factory=lambda: RecordList(ReviewDraft))


class CourseFormController(EntityFormController[CourseDraft]):
    entity_label = "course"

    def empty_draft(self) -> CourseDraft:
        return CourseDraft()

    def draft_from(self, entity: Course) -> CourseDraft:
        reviews = [
            ReviewDraft(name=r.name, review=r.review, image=from_stored_path(r.image, self.media_root))
            for r in entity.student_reviews
        ]
        return CourseDraft(
            course_name=entity.course_name,
            course_mode=entity.course_mode,
            course_description=entity.course_description,
            batch_start=entity.batch_start,
            duration=entity.duration,
            curriculum=entity.curriculum,
            program_structure=entity.program_structure,
            what_i_learn=entity.what_i_learn,
            image=from_stored_path(entity.cover_image, self.media_root),
            faculty=RecordList(FacultyMember, [dataclasses.replace(f) for f in entity.faculty_details]),
            reviews=RecordList(ReviewDraft, reviews),
        )

    # ------------------------------------------------------------------
    # course details
    # ------------------------------------------------------------------
    def set_field(self, name: str, value) -> None:
        if name not in DETAIL_FIELDS:
            raise KeyError(name)
        if name == "course_mode":
            value = value if isinstance(value, CourseMode) or value is None else CourseMode.parse(value)
        elif name == "batch_start":
            value = parse_date(value)
        setattr(self.draft, name, value)

    def choose_image(self, filename: str, content: bytes, content_type: Optional[str] = None) -> PendingUpload:
        upload = from_file(filename, content, content_type)
        self.draft.image = upload
        return upload

    def _restructured(self, changed: bool) -> bool:
        # row widgets are keyed by position, so re-key them when rows shift
        if changed:
            self.revision += 1
        return changed

    # ------------------------------------------------------------------
    # faculty
    # ------------------------------------------------------------------
    def add_faculty(self) -> None:
        self.draft.faculty.add()
        self.revision += 1

    def remove_faculty(self, index: int) -> bool:
        return self._restructured(self.draft.faculty.remove(index))

    def update_faculty(self, index: int, name: str, value: str) -> None:
        if name not in FACULTY_FIELDS:
            raise KeyError(name)
        self.draft.faculty.update(index, name, value)

    # ------------------------------------------------------------------
    # student reviews
    # ------------------------------------------------------------------
    def add_review(self) -> None:
        self.draft.reviews.add()
        self.revision += 1

    def remove_review(self, index: int) -> bool:
        return self._restructured(self.draft.reviews.remove(index))

    def update_review(self, index: int, name: str, value: str) -> None:
        if name not in REVIEW_FIELDS:
            raise KeyError(name)
        self.draft.reviews.update(index, name, value)

    def choose_review_image(self, index: int, filename: str, content: bytes, content_type: Optional[str] = None) -> PendingUpload:
        upload = from_file(filename, content, content_type)
        self.draft.reviews.update(index, "image", upload)
        return upload

    # ------------------------------------------------------------------
    # submit
    # ------------------------------------------------------------------
    def validate(self) -> List[str]:
        d = self.draft
        problems = [f"{label} is required" for name, label in REQUIRED_FIELDS.items() if not str(getattr(d, name)).strip()]
        if d.course_mode is None:
            problems.append("Select a course mode")
        if d.batch_start is None:
            problems.append("Batch start date is required")
        return problems

    def build_input(self) -> CourseInput:
        d = self.draft
        files = []
        cover = pending_upload(d.image)
        if cover:
            files.append(cover)
        reviews = []
        for r in d.reviews:
            upload = pending_upload(r.image)
            if upload:
                files.append(upload)
            reviews.append(StudentReview(name=r.name, review=r.review, image=stored_path(r.image)))
        return CourseInput(
            course_name=d.course_name.strip(),
            course_mode=d.course_mode,
            course_description=d.course_description.strip(),
            batch_start=d.batch_start,
            duration=d.duration.strip(),
            curriculum=d.curriculum.strip(),
            program_structure=d.program_structure.strip(),
            faculty_details=d.faculty.to_list(),
            student_reviews=reviews,
            what_i_learn=d.what_i_learn,
            files=files,
        )
