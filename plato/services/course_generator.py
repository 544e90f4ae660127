"""
Course Generator - Entry points that tie config, schedule and assembly together.
"""

from datetime import date, timedelta
from typing import Optional, Union

from plato.core.config import Settings
from plato.schemas.course import Course, PointPolicy
from plato.schemas.generator import CourseConfig, ParsedCoursePrompt
from plato.services.content_assembler import assemble_course
from plato.services.department_config import resolve_config
from plato.services.prompt_parser import parse_course_prompt
from plato.services.schedule import MAX_MODULES, MIN_MODULES, derive_module_count
from plato.services.topics import department_for_course, resolve_topics


def base_course_from_config(config: CourseConfig) -> Course:
    """Course shell carrying the identity fields, with no modules yet."""
    return Course(
        name=config.name,
        course_code=config.course_code,
        description=config.description,
        instructor=config.instructor,
        instructor_email=config.instructor_email,
        term=config.term,
        department=config.department,
        credits=config.credits,
        start_date=config.start_date,
        end_date=config.end_date,
    )


def generate_course(
    config: CourseConfig,
    *,
    point_policy: Union[PointPolicy, str] = PointPolicy.linear,
    min_modules: int = MIN_MODULES,
    max_modules: int = MAX_MODULES,
    module_count: Optional[int] = None,
) -> Course:
    """Generate a full semester of content for ``config``.

    The module count comes from the date range unless ``module_count`` is given.
    """
    if module_count is None:
        module_count = derive_module_count(config.start_date, config.end_date, min_modules, max_modules)

    department_config = resolve_config(config.department)
    topics = resolve_topics(config.department, config.name, module_count)
    return assemble_course(
        base_course_from_config(config),
        department_config,
        topics,
        point_policy=point_policy,
        points_budget=config.total_points,
    )


def enhance_course(
    course: Course,
    *,
    start_date: date,
    end_date: date,
    term: Optional[str] = None,
    point_policy: Union[PointPolicy, str] = PointPolicy.linear,
    min_modules: int = MIN_MODULES,
    max_modules: int = MAX_MODULES,
) -> Course:
    """Replace a course's modules with a generated semester, keeping its identity."""
    module_count = derive_module_count(start_date, end_date, min_modules, max_modules)
    enhanced = assemble_course(
        course,
        resolve_config(course.department),
        resolve_topics(course.department, course.name, module_count),
        start_date=start_date,
        end_date=end_date,
        point_policy=point_policy,
        points_budget=course.points_budget,
    )
    if term:
        enhanced = enhanced.model_copy(update={"term": term})
    return enhanced


def course_config_from_prompt(parsed: ParsedCoursePrompt, settings: Settings) -> CourseConfig:
    """Fill every field the prompt did not supply with a default."""
    start = parsed.start_date or settings.prompt_default_start
    end = parsed.end_date
    if end is None:
        weeks = parsed.module_count * 2 if parsed.module_count else settings.prompt_default_weeks
        end = start + timedelta(weeks=weeks)

    if parsed.units:
        total_points = parsed.units * settings.points_per_unit
    else:
        total_points = settings.default_total_points

    name = parsed.name or "New Course"
    return CourseConfig(
        name=name,
        course_code=parsed.course_code or "NEW101",
        description=parsed.description or "Course description",
        instructor=parsed.instructor or "Instructor Name",
        term=parsed.term or settings.prompt_default_term,
        department=parsed.department or department_for_course(name) or "",
        credits=parsed.units or 3,
        start_date=start,
        end_date=end,
        total_points=total_points,
    )


def generate_course_from_prompt(
    text: str,
    settings: Settings,
    point_policy: Optional[Union[PointPolicy, str]] = None,
) -> Course:
    parsed = parse_course_prompt(text, default_year=settings.prompt_default_start.year)
    config = course_config_from_prompt(parsed, settings)

    module_count = None
    if parsed.module_count:
        module_count = max(settings.min_modules, min(settings.max_modules, parsed.module_count))

    return generate_course(
        config,
        point_policy=point_policy or settings.point_policy,
        min_modules=settings.min_modules,
        max_modules=settings.max_modules,
        module_count=module_count,
    )
