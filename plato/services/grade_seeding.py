"""
Grade Seeding - Make a fresh course look partway through the semester.

Only used for demos. Generation itself never touches statuses or grades;
this runs afterwards on a finished course and takes its randomness from the
caller, so a fixed seed gives the same seeded course every time.
"""

import random
from typing import List, Optional

from plato.core.errors import GenerationPreconditionError
from plato.schemas.course import Course, ItemStatus, ItemType, Module, ModuleItem

# Inclusive grade ranges (percent) per item type
GRADE_RANGES = {
    ItemType.assignment: (82, 96),
    ItemType.quiz: (80, 94),
    ItemType.discussion: (85, 100),
}


def seeded_rng(seed: Optional[int] = None) -> random.Random:
    return random.Random(seed)


def _graded_item(item: ModuleItem, rng: random.Random) -> ModuleItem:
    update = {"status": ItemStatus.graded}
    grade_range = GRADE_RANGES.get(item.type)
    if grade_range:
        update["grade"] = rng.randint(*grade_range)
    if item.type in (ItemType.assignment, ItemType.quiz):
        update["attempts"] = 1
        update["submissions"] = 1
    return item.model_copy(update=update)


def _in_progress_items(items: List[ModuleItem]) -> List[ModuleItem]:
    """First reading graded, discussion submitted, second reading started."""
    updated = []
    readings_seen = 0
    for item in items:
        status = item.status
        if item.type == ItemType.reading:
            readings_seen += 1
            status = ItemStatus.graded if readings_seen == 1 else ItemStatus.in_progress
        elif item.type == ItemType.discussion:
            status = ItemStatus.submitted
        updated.append(item.model_copy(update={"status": status}))
    return updated


def _current_grade(modules: List[Module]) -> Optional[int]:
    grades = [item.grade for module in modules for item in module.items if item.grade is not None]
    if not grades:
        return None
    return round(sum(grades) / len(grades))


def seed_historical_progress(course: Course, completed_modules: int, rng: random.Random) -> Course:
    """
    Return a copy of ``course`` with its first modules marked as done.

    Args:
        course: Generated course; not modified
        completed_modules: How many leading modules are finished and graded
            (clamped to the module count)
        rng: Source of randomness for the grades

    Returns:
        New Course with statuses, grades and current_grade filled in
    """
    if completed_modules < 0:
        raise GenerationPreconditionError(
            f"completed_modules must not be negative, got {completed_modules}"
        )

    completed = min(completed_modules, len(course.modules))
    modules = []
    for index, module in enumerate(course.modules):
        if index < completed:
            items = [_graded_item(item, rng) for item in module.items]
            modules.append(module.model_copy(update={"items": items, "is_completed": True}))
        elif index == completed:
            modules.append(module.model_copy(update={"items": _in_progress_items(module.items)}))
        else:
            modules.append(module.model_copy(deep=True))

    return course.model_copy(
        deep=True,
        update={"modules": modules, "current_grade": _current_grade(modules)},
    )
