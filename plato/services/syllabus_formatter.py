"""
Syllabus Formatter - Render a generated course as a readable markdown syllabus.
"""

from collections import OrderedDict
from typing import Dict

from plato.schemas.course import Course, ItemType

# Display order and headings for the grading breakdown
GRADING_LABELS = OrderedDict([
    (ItemType.assignment, "Assignments"),
    (ItemType.quiz, "Quizzes"),
    (ItemType.discussion, "Discussions"),
    (ItemType.reading, "Readings"),
    (ItemType.page, "Pages"),
])


def points_by_type(course: Course) -> Dict[ItemType, int]:
    """Sum of points_possible per item type, for types that carry points."""
    totals: Dict[ItemType, int] = {}
    for module in course.modules:
        for item in module.items:
            if item.points_possible:
                totals[item.type] = totals.get(item.type, 0) + item.points_possible
    return totals


def course_to_syllabus_text(course: Course) -> str:
    """
    Convert a course into a markdown syllabus.

    Args:
        course: Course with generated modules

    Returns:
        Markdown text with the course header, grading breakdown and module schedule
    """
    sections = [f"# {course.course_code}: {course.name}"]

    sections.append(f"**Term:** {course.term}")
    instructor = course.instructor
    if course.instructor_email:
        instructor = f"{instructor} ({course.instructor_email})"
    sections.append(f"**Instructor:** {instructor}")
    sections.append(f"**Credits:** {course.credits}")
    if course.department:
        sections.append(f"**Department:** {course.department}")
    if course.start_date and course.end_date:
        sections.append(f"**Dates:** {course.start_date.isoformat()} to {course.end_date.isoformat()}")

    if course.description:
        sections.append(f"\n## Description\n{course.description}")

    totals = points_by_type(course)
    if totals:
        sections.append("\n## Grading")
        total = sum(totals.values())
        for item_type, label in GRADING_LABELS.items():
            points = totals.get(item_type)
            if not points:
                continue
            share = points / total * 100
            sections.append(f"- {label}: {points} points ({share:.1f}%)")
        sections.append(f"**Total:** {total} points")

    if course.modules:
        sections.append("\n## Schedule")
        for module in course.modules:
            due = f" (due {module.due_date.isoformat()})" if module.due_date else ""
            sections.append(f"\n### {module.name}{due}")
            if module.description:
                sections.append(module.description)
            for item in module.items:
                line = f"- {item.title} [{item.type.value}]"
                if item.due_date:
                    line += f", due {item.due_date.isoformat()}"
                if item.points_possible:
                    line += f", {item.points_possible} pts"
                sections.append(line)

    return "\n".join(sections)
