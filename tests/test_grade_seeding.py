from datetime import date

import pytest

from plato.core.errors import GenerationPreconditionError
from plato.schemas.course import ItemStatus, ItemType
from plato.schemas.generator import CourseConfig
from plato.services.course_generator import generate_course
from plato.services.grade_seeding import GRADE_RANGES, seed_historical_progress, seeded_rng


@pytest.fixture
def course():
    return generate_course(CourseConfig(
        name="Data Structures",
        course_code="CS250",
        department="Computer Science",
        start_date=date(2025, 1, 13),
        end_date=date(2025, 5, 2),
    ))


def test_completed_modules_are_graded(course):
    seeded = seed_historical_progress(course, 3, seeded_rng(7))

    for module in seeded.modules[:3]:
        assert module.is_completed
        for item in module.items:
            assert item.status == ItemStatus.graded
            if item.type in GRADE_RANGES:
                low, high = GRADE_RANGES[item.type]
                assert low <= item.grade <= high
            else:
                assert item.grade is None
            if item.type in (ItemType.assignment, ItemType.quiz):
                assert item.attempts == 1
                assert item.submissions == 1


def test_next_module_is_in_progress(course):
    seeded = seed_historical_progress(course, 3, seeded_rng(7))
    current = seeded.modules[3]
    assert not current.is_completed
    statuses = {item.title: item.status for item in current.items}
    readings = [item for item in current.items if item.type == ItemType.reading]
    discussion = next(item for item in current.items if item.type == ItemType.discussion)

    assert statuses[readings[0].title] == ItemStatus.graded
    assert statuses[readings[1].title] == ItemStatus.in_progress
    assert discussion.status == ItemStatus.submitted
    assert all(item.grade is None for item in current.items)

    for module in seeded.modules[4:]:
        assert all(item.status == ItemStatus.not_started for item in module.items)


def test_current_grade_is_mean_of_grades(course):
    seeded = seed_historical_progress(course, 3, seeded_rng(7))
    grades = [i.grade for m in seeded.modules for i in m.items if i.grade is not None]
    assert len(grades) == 9
    assert seeded.current_grade == round(sum(grades) / len(grades))


def test_same_seed_same_course(course):
    first = seed_historical_progress(course, 2, seeded_rng(42))
    second = seed_historical_progress(course, 2, seeded_rng(42))
    assert first.model_dump_json() == second.model_dump_json()


def test_original_course_untouched(course):
    before = course.model_dump_json()
    seed_historical_progress(course, 5, seeded_rng(1))
    assert course.model_dump_json() == before


def test_completed_count_is_clamped(course):
    seeded = seed_historical_progress(course, 50, seeded_rng(1))
    assert all(module.is_completed for module in seeded.modules)
    assert seeded.total_points == course.total_points


def test_zero_completed_has_no_grade(course):
    seeded = seed_historical_progress(course, 0, seeded_rng(1))
    assert seeded.current_grade is None
    assert seeded.modules[0].items[1].status == ItemStatus.graded


def test_negative_completed_raises(course):
    with pytest.raises(GenerationPreconditionError):
        seed_historical_progress(course, -1, seeded_rng(1))
