"""In-memory store for generated courses (the mock LMS database)."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from plato.core.errors import CourseNotFoundError, GenerationPreconditionError
from plato.schemas.course import AddCourseResult, Course

logger = logging.getLogger(__name__)


class CourseStore:
    """Hold courses by id.

    One store is created per application and handed to whoever needs it;
    there is no shared module-level course list. Courses are stored as deep
    copies so callers can't change stored state by mutating what they passed
    in or got back.
    """

    def __init__(self, courses: Optional[Iterable[Course]] = None):
        self._courses: Dict[int, Course] = {}
        self._next_id = 1
        for course in courses or []:
            self.add_course(course)

    def _allocate_id(self) -> int:
        course_id = self._next_id
        self._next_id += 1
        return course_id

    def add_course(self, course: Optional[Course]) -> AddCourseResult:
        if course is None:
            raise GenerationPreconditionError("Cannot add a missing course to the store")

        if course.id is None or course.id in self._courses:
            course = course.model_copy(update={"id": self._allocate_id()}, deep=True)
        else:
            course = course.model_copy(deep=True)
            self._next_id = max(self._next_id, course.id + 1)

        self._courses[course.id] = course
        logger.info("Stored course %s (%s) as id %s", course.course_code, course.name, course.id)
        return AddCourseResult(success=True, course=course.model_copy(deep=True))

    def get_courses(self, course_ids: Optional[Iterable[int]] = None) -> List[Course]:
        if course_ids is None:
            selected = list(self._courses.values())
        else:
            wanted = set(course_ids)
            selected = [c for c in self._courses.values() if c.id in wanted]
        return [c.model_copy(deep=True) for c in selected]

    def get_course(self, course_id: int) -> Optional[Course]:
        course = self._courses.get(course_id)
        if not course:
            return None
        return course.model_copy(deep=True)

    def replace_course(self, course: Optional[Course]) -> Course:
        """Swap the stored course with the same id for ``course``."""
        if course is None:
            raise GenerationPreconditionError("Cannot store a missing course")
        if course.id not in self._courses:
            raise CourseNotFoundError(course.id)
        self._courses[course.id] = course.model_copy(deep=True)
        return course.model_copy(deep=True)

    def delete_course(self, course_id: int) -> bool:
        if self._courses.pop(course_id, None) is None:
            return False
        logger.info("Deleted course %s", course_id)
        return True

    def __len__(self) -> int:
        return len(self._courses)
