# store/course_store.py
from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple

from core.api_client import FileField
from store.entity_store import EntityStore
from store.models import Course, CourseInput


class CourseStore(EntityStore[Course, CourseInput]):
    entity_label = "course"
    collection_label = "courses"

    list_path = "/api/courses"
    item_path = "/api/courses/{id}"
    create_path = "/api/courses"
    featured_path = "/api/featured"
    set_featured_path = "/api/set-featured"
    featured_ids_key = "courseIds"
    featured_keys = ("featuredCourses", "featured", "data")

    def parse(self, data: Dict[str, Any]) -> Course:
        return Course.from_api(data)

    def multipart(self, data: CourseInput) -> Tuple[Dict[str, str], List[FileField]]:
        # the API takes every upload under one repeated "images" field
        return data.to_fields(), [f.as_part("images") for f in data.files]

    @property
    def courses(self) -> List[Course]:
        return self.items

    @property
    def featured_courses(self) -> List[Course]:
        return self.featured

    @property
    def current_course(self) -> Optional[Course]:
        return self.current
