"""
Generator Schema - Inputs and lookup tables for course generation.
"""

from datetime import date
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from plato.schemas.base import FrozenSchema


class WeeklyPattern(FrozenSchema):
    """How many items of each kind a module carries"""
    pages: int = 1
    readings: int = 1
    discussions: int = 1
    assignments: int = 1
    quizzes: int = 1


class DepartmentConfig(FrozenSchema):
    """Vocabulary used to fill a department's modules"""
    reading_types: Tuple[str, ...]
    assignment_types: Tuple[str, ...]
    discussion_topics: Tuple[str, ...]
    assessment_style: str
    weekly_pattern: WeeklyPattern = WeeklyPattern()


class Topic(FrozenSchema):
    title: str
    overview: str


class CourseConfig(BaseModel):
    """Declarative description of a course to generate"""
    name: str = Field(..., description="Course name (e.g., 'Calculus I')")
    course_code: str = Field(..., description="Course code (e.g., 'MATH 265')")
    description: str = ""
    instructor: str = ""
    instructor_email: Optional[str] = None
    term: str = ""
    department: str = ""
    credits: int = 3
    start_date: date
    end_date: date
    total_points: Optional[int] = Field(None, description="Points budget for the 'budget' policy")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Calculus I",
                "course_code": "MATH 265",
                "description": "Limits, derivatives, integrals and their applications.",
                "instructor": "Dr. Rivera",
                "term": "Spring 2025",
                "department": "Mathematics",
                "credits": 4,
                "start_date": "2025-01-13",
                "end_date": "2025-05-02",
            }
        }


class ParsedCoursePrompt(BaseModel):
    """Fields pulled out of free text; anything not found stays None"""
    name: Optional[str] = None
    course_code: Optional[str] = None
    instructor: Optional[str] = None
    description: Optional[str] = None
    term: Optional[str] = None
    department: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    units: Optional[int] = None
    module_count: Optional[int] = None


class PromptRequest(BaseModel):
    prompt: str


class SeedProgressRequest(BaseModel):
    completed_modules: int = Field(3, ge=0)
    seed: int = 0


class EnhancementSummary(BaseModel):
    success: bool
    enhanced: int
    failed: List[int] = Field(default_factory=list)
