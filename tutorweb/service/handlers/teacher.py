"""Request handlers for teachers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from tutorweb.service.dbaccess import teacher as teacher_db
from tutorweb.service.models import CreateTeacher, UpdateTeacher
from tutorweb.service.state import AppState


def post_new_teacher(state: AppState, payload: Mapping[str, Any] | None) -> str:
    """Store the teacher described by the request body."""
    teacher_db.insert_teacher(state.db, CreateTeacher.from_dict(payload))
    return "Post new teacher successfully."


def get_all_teachers(state: AppState) -> list[dict[str, Any]]:
    """All teachers in their JSON form."""
    return [teacher.to_dict() for teacher in teacher_db.list_teachers(state.db)]


def get_teacher_detail(state: AppState, teacher_id: int) -> dict[str, Any]:
    """One teacher in its JSON form."""
    return teacher_db.get_teacher(state.db, teacher_id).to_dict()


def update_teacher_detail(state: AppState, payload: Mapping[str, Any] | None, teacher_id: int) -> str:
    """Change a teacher with the fields given in the request body."""
    return teacher_db.update_teacher(state.db, teacher_id, UpdateTeacher.from_dict(payload))


def delete_teacher(state: AppState, teacher_id: int) -> str:
    """Delete a teacher."""
    return teacher_db.delete_teacher(state.db, teacher_id)