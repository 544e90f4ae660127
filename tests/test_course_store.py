from datetime import date

import pytest

from plato.core.errors import CourseNotFoundError, GenerationPreconditionError
from plato.schemas.course import AddCourseResult, Course
from plato.services.course_store import CourseStore


def make_course(name="History", code="HIS101", course_id=None):
    return Course(
        id=course_id,
        name=name,
        course_code=code,
        start_date=date(2025, 1, 13),
        end_date=date(2025, 5, 2),
    )


def test_add_course_assigns_ids():
    store = CourseStore()
    first = store.add_course(make_course())
    second = store.add_course(make_course(name="Art", code="ART101"))

    assert isinstance(first, AddCourseResult)
    assert first.success is True
    assert first.course.id == 1
    assert second.course.id == 2
    assert len(store) == 2


def test_add_course_keeps_free_id_and_skips_taken_one():
    store = CourseStore()
    kept = store.add_course(make_course(course_id=15))
    assert kept.course.id == 15

    clash = store.add_course(make_course(name="Art", code="ART101", course_id=15))
    assert clash.course.id == 16
    assert store.get_course(15).name == "History"


def test_add_none_raises():
    store = CourseStore()
    with pytest.raises(GenerationPreconditionError):
        store.add_course(None)
    assert len(store) == 0


def test_store_holds_copies():
    store = CourseStore()
    original = make_course()
    result = store.add_course(original)

    original.name = "Changed before read"
    result.course.name = "Changed result"
    fetched = store.get_course(result.course.id)
    fetched.name = "Changed fetched"

    assert store.get_course(result.course.id).name == "History"
    assert original.id is None


def test_get_courses_filters_by_id():
    store = CourseStore([make_course(), make_course(name="Art", code="ART101")])
    assert [c.name for c in store.get_courses()] == ["History", "Art"]
    assert [c.name for c in store.get_courses([2, 99])] == ["Art"]
    assert store.get_course(99) is None


def test_replace_course():
    store = CourseStore([make_course()])
    course = store.get_course(1)
    course.term = "Fall 2025"
    store.replace_course(course)
    assert store.get_course(1).term == "Fall 2025"

    with pytest.raises(CourseNotFoundError) as exc_info:
        store.replace_course(make_course(course_id=42))
    assert str(exc_info.value) == "Course 42 not found"

    with pytest.raises(GenerationPreconditionError):
        store.replace_course(None)


def test_delete_course():
    store = CourseStore([make_course()])
    assert store.delete_course(1) is True
    assert store.delete_course(1) is False
    assert len(store) == 0
