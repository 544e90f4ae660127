"""Exceptions raised by the course generator and the course store."""


class PlatoError(Exception):
    """Base class for Plato domain errors."""


class GenerationPreconditionError(PlatoError, ValueError):
    """A caller passed arguments the generator cannot build a course from.

    Lookups that miss (unknown department, course or topic) never raise;
    they fall back to defaults. This is reserved for misuse such as a
    non-positive module count or a ``None`` course handed to the store.
    """


class CourseNotFoundError(PlatoError, KeyError):
    """No course with the requested id exists in the store."""

    def __init__(self, course_id: int):
        super().__init__(course_id)
        self.course_id = course_id

    def __str__(self) -> str:
        return f"Course {self.course_id} not found"
