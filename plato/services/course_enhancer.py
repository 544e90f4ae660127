"""
Course Enhancer - Regenerate a full semester of content for every stored course.
"""

import logging
from datetime import date
from typing import Optional, Union

from plato.core.errors import PlatoError
from plato.core.logger import log_step
from plato.schemas.course import PointPolicy
from plato.schemas.generator import EnhancementSummary
from plato.services.course_generator import enhance_course
from plato.services.course_store import CourseStore
from plato.services.schedule import MAX_MODULES, MIN_MODULES

logger = logging.getLogger(__name__)


def enhance_all_courses(
    store: CourseStore,
    *,
    start_date: date,
    end_date: date,
    term: Optional[str] = None,
    point_policy: Union[PointPolicy, str] = PointPolicy.linear,
    min_modules: int = MIN_MODULES,
    max_modules: int = MAX_MODULES,
) -> EnhancementSummary:
    """Replace the modules of every course in ``store`` with generated content.

    A course that cannot be enhanced is logged and skipped; the rest of the
    batch still runs. The ids of skipped courses are reported in the summary.
    """
    courses = store.get_courses()
    log_step(f"Found {len(courses)} courses to enhance")

    enhanced = 0
    failed = []
    for course in courses:
        try:
            updated = enhance_course(
                course,
                start_date=start_date,
                end_date=end_date,
                term=term,
                point_policy=point_policy,
                min_modules=min_modules,
                max_modules=max_modules,
            )
            store.replace_course(updated)
        except PlatoError:
            logger.exception("Failed to enhance course %s (%s)", course.id, course.course_code)
            failed.append(course.id)
            continue

        enhanced += 1
        log_step(f"Enhanced {course.course_code} with {len(updated.modules)} modules")

    log_step(f"Course enhancement finished: {enhanced} enhanced, {len(failed)} failed")
    return EnhancementSummary(success=not failed, enhanced=enhanced, failed=failed)
