"""
Schedule math: how many modules a semester gets and when each item is due.

All functions are pure date arithmetic. Module windows are whole weeks and
item due dates are fixed day offsets from the module start.
"""

import math
from datetime import date, timedelta
from typing import List, NamedTuple

from plato.core.errors import GenerationPreconditionError

MIN_MODULES = 4
MAX_MODULES = 8


class ItemOffsets(NamedTuple):
    """Due dates for each item slot of one module."""
    intro: date
    reading1: date
    discussion: date
    reading2: date
    assignment: date
    quiz: date


# Days after the module start, in slot order
ITEM_OFFSET_DAYS = {
    "intro": 0,
    "reading1": 2,
    "discussion": 4,
    "reading2": 7,
    "assignment": 10,
    "quiz": 13,
}


def total_weeks(start_date: date, end_date: date) -> int:
    """Teaching weeks between two dates; a partial trailing week counts.

    Zero or negative when end_date is not after start_date.
    """
    return math.ceil((end_date - start_date).days / 7)


def derive_module_count(
    start_date: date,
    end_date: date,
    minimum: int = MIN_MODULES,
    maximum: int = MAX_MODULES,
) -> int:
    """One module per two weeks, clamped to [minimum, maximum]."""
    return max(minimum, min(maximum, total_weeks(start_date, end_date) // 2))


def weeks_per_module(start_date: date, end_date: date, module_count: int) -> int:
    """Length of each module window in whole weeks (truncated, at least 1)."""
    if module_count <= 0:
        raise GenerationPreconditionError(f"module_count must be positive, got {module_count}")
    return max(1, total_weeks(start_date, end_date) // module_count)


def derive_module_dates(start_date: date, module_count: int, weeks_in_module: int) -> List[date]:
    """Start date of every module, offset from the semester start."""
    if module_count <= 0:
        raise GenerationPreconditionError(f"module_count must be positive, got {module_count}")
    return [start_date + timedelta(weeks=i * weeks_in_module) for i in range(module_count)]


def derive_item_offsets(module_start: date) -> ItemOffsets:
    return ItemOffsets(**{
        slot: module_start + timedelta(days=days) for slot, days in ITEM_OFFSET_DAYS.items()
    })


def module_due_date(module_start: date, weeks_in_module: int) -> date:
    """End of the module window."""
    return module_start + timedelta(weeks=weeks_in_module)
