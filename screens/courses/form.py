# screens/courses/form.py
from __future__ import annotations
from typing import Optional

import streamlit as st

from core.navigation import Navigator
from screens.courses.controller import CourseFormController
from screens.forms import widgets
from store.app_state import AppState
from store.models import CourseMode

MODE_OPTIONS = [None, CourseMode.ONLINE, CourseMode.OFFLINE, CourseMode.HYBRID]


def _mode_label(mode: Optional[CourseMode]) -> str:
    return "Select a mode" if mode is None else mode.value.capitalize()


def _details(ctl: CourseFormController, rev: int):
    d = ctl.draft
    ctl.set_field("course_name", st.text_input("Course Name", value=d.course_name, key=f"co_name_{rev}"))
    c1, c2, c3 = st.columns(3)
    with c1:
        ctl.set_field("course_mode", st.selectbox(
            "Course Mode", MODE_OPTIONS, index=MODE_OPTIONS.index(d.course_mode),
            format_func=_mode_label, key=f"co_mode_{rev}",
        ))
    with c2:
        ctl.set_field("batch_start", st.date_input("Batch Start", value=d.batch_start, key=f"co_batch_{rev}"))
    with c3:
        ctl.set_field("duration", st.text_input(
            "Duration", value=d.duration, placeholder="E.g., 8 weeks", key=f"co_duration_{rev}",
        ))
    ctl.set_field("course_description", st.text_area("Course Description", value=d.course_description, key=f"co_desc_{rev}"))
    ctl.set_field("curriculum", st.text_area("Curriculum", value=d.curriculum, key=f"co_curr_{rev}"))
    ctl.set_field("program_structure", st.text_area("Program Structure", value=d.program_structure, key=f"co_struct_{rev}"))
    ctl.set_field("what_i_learn", st.text_area("What You'll Learn", value=d.what_i_learn, key=f"co_learn_{rev}"))

    picked = widgets.picked_file("Course Image", key=f"co_image_{rev}")
    if picked:
        ctl.choose_image(*picked)
    widgets.show_attachment(ctl.draft.image)


def _faculty(ctl: CourseFormController, rev: int):
    st.markdown("#### 👩‍🏫 Faculty Details")
    for i, f in enumerate(ctl.draft.faculty):
        with st.container(border=True):
            c1, c2 = st.columns(2)
            with c1:
                ctl.update_faculty(i, "name", st.text_input("Name", value=f.name, key=f"fac_name_{rev}_{i}"))
                ctl.update_faculty(i, "feature", st.text_input("Feature", value=f.feature, key=f"fac_feature_{rev}_{i}"))
            with c2:
                ctl.update_faculty(i, "designation", st.text_input("Designation", value=f.designation, key=f"fac_desig_{rev}_{i}"))
                ctl.update_faculty(i, "educator", st.text_input("Educator", value=f.educator, key=f"fac_edu_{rev}_{i}"))
            if len(ctl.draft.faculty) > 1 and st.button("Remove faculty", key=f"fac_rm_{rev}_{i}"):
                ctl.remove_faculty(i)
                st.rerun()
    if st.button("➕ Add faculty", key=f"fac_add_{rev}"):
        ctl.add_faculty()
        st.rerun()


def _reviews(ctl: CourseFormController, rev: int):
    st.markdown("#### 💬 Student Reviews")
    for i, r in enumerate(ctl.draft.reviews):
        with st.container(border=True):
            left, right = st.columns([0.65, 0.35])
            with left:
                ctl.update_review(i, "name", st.text_input("Student Name", value=r.name, key=f"rev_name_{rev}_{i}"))
                ctl.update_review(i, "review", st.text_area("Review", value=r.review, key=f"rev_text_{rev}_{i}"))
            with right:
                picked = widgets.picked_file("Photo", key=f"rev_img_{rev}_{i}")
                if picked:
                    ctl.choose_review_image(i, *picked)
                widgets.show_attachment(ctl.draft.reviews[i].image, width=120)
            if len(ctl.draft.reviews) > 1 and st.button("Remove review", key=f"rev_rm_{rev}_{i}"):
                ctl.remove_review(i)
                st.rerun()
    if st.button("➕ Add review", key=f"rev_add_{rev}"):
        ctl.add_review()
        st.rerun()


def render(state: AppState, course_id: Optional[str] = None):
    key = widgets.controller_key("course", course_id)
    widgets.discard_controllers(keep=key)
    ctl: CourseFormController = widgets.session_controller(
        key, lambda: CourseFormController(state.courses, Navigator(), state.media_root, course_id)
    )

    st.subheader("✏️ Edit Course" if ctl.is_edit else "➕ Add New Course")
    if not widgets.load_gate(ctl, "course"):
        return

    rev = ctl.revision
    _details(ctl, rev)
    _faculty(ctl, rev)
    _reviews(ctl, rev)

    st.markdown("---")
    b1, b2, _ = st.columns([0.2, 0.2, 0.6])
    with b1:
        label = "Update Course" if ctl.is_edit else "Create Course"
        if st.button(label, type="primary", disabled=ctl.submitting, key=f"co_submit_{rev}"):
            widgets.submit(ctl, key)
    with b2:
        if st.button("Cancel", key=f"co_cancel_{rev}"):
            st.session_state.pop(key, None)
            widgets.leave(ctl)
