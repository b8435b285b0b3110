# screens/courses/list_view.py
from __future__ import annotations

from core.navigation import COURSE_CREATE, course_edit_path
from screens.admin.listing import render_entity_list
from store.app_state import AppState
from store.models import Course


def _row(c: Course) -> dict:
    return {
        "Course": c.course_name,
        "Mode": c.course_mode.value.capitalize() if c.course_mode else "",
        "Batch start": c.batch_start.isoformat() if c.batch_start else "",
        "Duration": c.duration,
        "Faculty": len(c.faculty_details),
        "Reviews": len(c.student_reviews),
        "Featured": "⭐" if c.is_featured else "",
    }


def render(state: AppState):
    render_entity_list(
        state.courses,
        title="🎓 Courses",
        to_row=_row,
        label=lambda c: c.course_name or str(c.id),
        create_path=COURSE_CREATE,
        edit_path=course_edit_path,
    )
