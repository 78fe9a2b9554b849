from datetime import datetime
from http import HTTPStatus

import pytest

from tutorweb.service.dbaccess.course import (
    delete_course,
    get_course,
    insert_course,
    list_courses_for_teacher,
    update_course,
)
from tutorweb.service.errors import DBError, NotFoundError
from tutorweb.service.models import CreateCourse, UpdateCourse
from tutorweb.service.state import create_pool, create_tables

FIRST_TIME = datetime(2025, 7, 12, 10, 15, 0)
SECOND_TIME = datetime(2025, 7, 19, 10, 15, 0)


@pytest.fixture
def engine():
    eng = create_pool("sqlite://")
    create_tables(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def bare_engine():
    eng = create_pool("sqlite://")
    yield eng
    eng.dispose()


def _sample(teacher_id=1, name="Test course"):
    return CreateCourse(
        teacher_id=teacher_id,
        name=name,
        time=FIRST_TIME,
        description="This is a course",
        language="English",
        level="Beginner",
    )


def _add(engine, new_course):
    insert_course(engine, new_course)
    return list_courses_for_teacher(engine, new_course.teacher_id)[-1]


def test_insert_then_list(engine):
    stored = _add(engine, _sample())
    assert stored.teacher_id == 1
    assert stored.name == "Test course"
    assert stored.time == FIRST_TIME
    assert stored.language == "English"
    assert stored.format is None
    assert stored.price is None


def test_list_is_per_teacher(engine):
    _add(engine, _sample(teacher_id=1, name="A"))
    _add(engine, _sample(teacher_id=1, name="B"))
    _add(engine, _sample(teacher_id=2, name="C"))
    assert [c.name for c in list_courses_for_teacher(engine, 1)] == ["A", "B"]
    assert [c.name for c in list_courses_for_teacher(engine, 2)] == ["C"]


def test_list_for_teacher_without_courses_is_empty(engine):
    assert list_courses_for_teacher(engine, 7) == []


def test_get_course(engine):
    stored = _add(engine, _sample())
    assert get_course(engine, 1, stored.id) == stored


def test_get_missing_course_is_not_found(engine):
    _add(engine, _sample())
    with pytest.raises(NotFoundError) as info:
        get_course(engine, 1, 100)
    assert info.value.message == "Course didn't founded"
    assert info.value.status_code() == HTTPStatus.NOT_FOUND


def test_get_course_of_other_teacher_is_not_found(engine):
    stored = _add(engine, _sample(teacher_id=1))
    with pytest.raises(NotFoundError):
        get_course(engine, 2, stored.id)


def test_update_changes_given_fields_and_keeps_others(engine):
    stored = _add(engine, _sample(teacher_id=3))
    update_course(
        engine,
        3,
        stored.id,
        UpdateCourse(
            name="Course name changed",
            time=SECOND_TIME,
            description="This is another test course",
            language="Chinese",
            level="Intermediate",
        ),
    )
    changed = get_course(engine, 3, stored.id)
    assert changed.name == "Course name changed"
    assert changed.time == SECOND_TIME
    assert changed.description == "This is another test course"
    assert changed.language == "Chinese"
    assert changed.level == "Intermediate"


def test_update_fills_empty_fields_with_defaults(engine):
    stored = _add(engine, CreateCourse(teacher_id=1, name="Bare"))
    update_course(engine, 1, stored.id, UpdateCourse())
    changed = get_course(engine, 1, stored.id)
    assert changed.name == "Bare"
    assert changed.time == datetime(1970, 1, 1)
    assert changed.price == 0
    assert changed.description == ""
    assert changed.structure == ""


def test_update_keeps_stored_values(engine):
    stored = _add(engine, _sample())
    update_course(engine, 1, stored.id, UpdateCourse(price=120))
    changed = get_course(engine, 1, stored.id)
    assert changed.price == 120
    assert changed.time == stored.time
    assert changed.level == stored.level


def test_update_reports_one_record(engine):
    stored = _add(engine, _sample())
    message = update_course(engine, 1, stored.id, UpdateCourse(name="Renamed"))
    assert message.startswith("Update")
    assert message.endswith("record")


def test_update_missing_course_is_not_found(engine):
    with pytest.raises(NotFoundError) as info:
        update_course(engine, 1, 101, UpdateCourse(name="Nothing"))
    assert info.value.message == "Course Id not found"


def test_delete_removes_course(engine):
    stored = _add(engine, _sample())
    other = _add(engine, _sample(name="Other"))
    delete_course(engine, 1, stored.id)
    assert list_courses_for_teacher(engine, 1) == [other]


def test_delete_missing_course_keeps_others(engine):
    stored = _add(engine, _sample())
    message = delete_course(engine, 1, stored.id + 100)
    assert message.startswith("Deleted")
    assert list_courses_for_teacher(engine, 1) == [stored]


def test_insert_without_tables_is_db_error(bare_engine):
    with pytest.raises(DBError) as info:
        insert_course(bare_engine, _sample())
    assert info.value.response_message() == "Database error"


def test_list_without_tables_is_db_error(bare_engine):
    with pytest.raises(DBError):
        list_courses_for_teacher(bare_engine, 1)