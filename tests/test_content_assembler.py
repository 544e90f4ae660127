from datetime import date, timedelta

import pytest

from plato.core.errors import GenerationPreconditionError
from plato.schemas.course import Course, ItemType, PointPolicy
from plato.schemas.generator import CourseConfig, DepartmentConfig, Topic, WeeklyPattern
from plato.services.content_assembler import (
    assemble_course,
    assignment_points,
    build_module,
    calculate_total_points,
    quiz_points,
)
from plato.services.course_generator import generate_course
from plato.services.department_config import resolve_config


def calculus_config(**overrides):
    values = dict(
        name="Calculus I",
        course_code="MAT265",
        instructor="Dr. James Wilson",
        term="Spring 2025",
        department="Mathematics",
        credits=4,
        start_date=date(2025, 1, 13),
        end_date=date(2025, 5, 2),
    )
    values.update(overrides)
    return CourseConfig(**values)


def all_items(course):
    return [item for module in course.modules for item in module.items]


def test_calculus_semester():
    course = generate_course(calculus_config())

    assert len(course.modules) == 8
    assert course.modules[0].name == "Module 1: Limits and Continuity"
    assert course.modules[7].name == "Module 8: Sequences and Series"
    assert course.total_points == 1580
    # Mathematics carries a single reading per module
    assert [item.type for item in course.modules[0].items] == [
        ItemType.page,
        ItemType.reading,
        ItemType.discussion,
        ItemType.assignment,
        ItemType.quiz,
    ]


def test_total_points_match_items():
    for config in (calculus_config(), calculus_config(department="Computer Science", name="Data Structures")):
        course = generate_course(config)
        assert course.total_points == sum(item.points_possible for item in all_items(course))
        assert course.total_points == calculate_total_points(course.modules)


def test_item_ids_are_unique_and_gapless():
    course = generate_course(calculus_config(department="Computer Science", name="Data Structures"))
    assert [module.id for module in course.modules] == list(range(1, len(course.modules) + 1))
    ids = [item.id for item in all_items(course)]
    assert len(ids) == len(set(ids))
    for module in course.modules:
        assert [item.id for item in module.items] == [
            module.id * 100 + position for position in range(1, len(module.items) + 1)
        ]


def test_due_dates_are_ordered():
    course = generate_course(calculus_config())
    module_dues = [module.due_date for module in course.modules]
    assert module_dues == sorted(module_dues)
    assert len(set(module_dues)) == len(module_dues)
    for module in course.modules:
        dues = [item.due_date for item in module.items]
        assert dues == sorted(dues)
        assert dues[-1] <= module.due_date


def test_generation_is_deterministic():
    first = generate_course(calculus_config())
    second = generate_course(calculus_config())
    assert first.model_dump_json() == second.model_dump_json()


def test_nothing_is_graded_on_generation():
    course = generate_course(calculus_config())
    assert course.current_grade is None
    for module in course.modules:
        assert module.is_completed is False
        for item in module.items:
            assert item.status == "not_started"
            assert item.grade is None


def test_short_semester_gets_minimum_modules():
    start = date(2025, 6, 2)
    course = generate_course(calculus_config(start_date=start, end_date=start + timedelta(weeks=8)))
    assert len(course.modules) == 4


def test_linear_points():
    assert assignment_points(1, PointPolicy.linear, 8) == 105
    assert assignment_points(8, PointPolicy.linear, 8) == 140
    assert quiz_points(PointPolicy.linear, 8) == 50


def test_budget_points():
    course = generate_course(calculus_config(total_points=1000), point_policy="budget")
    assignment = next(i for i in course.modules[0].items if i.type == ItemType.assignment)
    quiz = next(i for i in course.modules[0].items if i.type == ItemType.quiz)
    assert assignment.points_possible == 50
    assert quiz.points_possible == 37
    assert course.total_points == 8 * (50 + 37 + 25)


def test_unknown_point_policy_raises():
    with pytest.raises(GenerationPreconditionError):
        generate_course(calculus_config(), point_policy="bell-curve")


def test_quiz_question_points_add_up():
    course = generate_course(calculus_config())
    for item in all_items(course):
        if item.type == ItemType.quiz:
            questions = item.quiz_details.questions
            assert sum(q.points for q in questions) == item.points_possible
            choice = questions[0]
            assert choice.options[choice.correct_answer] == course.modules[item.id // 100 - 1].description


def test_weekly_pattern_drops_empty_slots():
    config = DepartmentConfig(
        reading_types=("textbook",),
        assignment_types=("Essay",),
        discussion_topics=("Open Forum",),
        assessment_style="analytical",
        weekly_pattern=WeeklyPattern(readings=0, quizzes=0),
    )
    module = build_module(0, Topic(title="Sketching", overview="Line and form"), config, date(2025, 1, 13))
    assert [item.type for item in module.items] == [ItemType.page, ItemType.discussion, ItemType.assignment]
    assert [item.id for item in module.items] == [101, 102, 103]
    assert module.items[1].title == "Open Forum: Sketching"
    assert module.items[2].title == "Sketching Essay"


def test_assemble_course_leaves_base_untouched():
    base = Course(name="Calculus I", course_code="MAT265", department="Mathematics",
                  start_date=date(2025, 1, 13), end_date=date(2025, 5, 2))
    topics = [Topic(title="Limits", overview="Limits and continuity")] * 4
    course = assemble_course(base, resolve_config("Mathematics"), topics)
    assert base.modules == []
    assert base.total_points == 0
    assert len(course.modules) == 4


def test_assemble_course_preconditions():
    base = Course(name="Calculus I", course_code="MAT265")
    topics = [Topic(title="Limits", overview="Limits and continuity")]
    with pytest.raises(GenerationPreconditionError):
        assemble_course(base, resolve_config("Mathematics"), topics)
    with pytest.raises(GenerationPreconditionError):
        assemble_course(base, resolve_config("Mathematics"), [], start_date=date(2025, 1, 13))
    with pytest.raises(GenerationPreconditionError):
        build_module(0, topics[0], resolve_config("Mathematics"), date(2025, 1, 13), module_count=0)
