"""Request handlers for courses."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from tutorweb.service.dbaccess import course as course_db
from tutorweb.service.models import CreateCourse, UpdateCourse
from tutorweb.service.state import AppState


def post_new_course(state: AppState, payload: Mapping[str, Any] | None) -> str:
    """Store the course described by the request body."""
    course_db.insert_course(state.db, CreateCourse.from_dict(payload))
    return "Post new course successfully."


def get_courses_for_teacher(state: AppState, teacher_id: int) -> list[dict[str, Any]]:
    """All courses of a teacher in their JSON form."""
    return [course.to_dict() for course in course_db.list_courses_for_teacher(state.db, teacher_id)]


def get_course_detail(state: AppState, teacher_id: int, course_id: int) -> dict[str, Any]:
    """One course of a teacher in its JSON form."""
    return course_db.get_course(state.db, teacher_id, course_id).to_dict()


def update_course_detail(
    state: AppState, payload: Mapping[str, Any] | None, teacher_id: int, course_id: int
) -> str:
    """Change a course with the fields given in the request body."""
    return course_db.update_course(state.db, teacher_id, course_id, UpdateCourse.from_dict(payload))


def delete_course(state: AppState, teacher_id: int, course_id: int) -> str:
    """Delete a course of a teacher."""
    return course_db.delete_course(state.db, teacher_id, course_id)