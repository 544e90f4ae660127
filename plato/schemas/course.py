"""
Course Schema - Generated course content tree.

A Course holds an ordered list of Modules; each Module holds an ordered list
of ModuleItems (page, reading, discussion, assignment, quiz). The whole tree
serialises straight to JSON for the front end.
"""

from datetime import date
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from plato.schemas.base import BaseSchema


class ItemType(str, Enum):
    page = "page"
    reading = "reading"
    discussion = "discussion"
    assignment = "assignment"
    quiz = "quiz"


class ItemStatus(str, Enum):
    not_started = "not_started"
    in_progress = "in_progress"
    submitted = "submitted"
    graded = "graded"


class PointPolicy(str, Enum):
    """How assignment and quiz points are sized.

    linear: assignments grow by module number (100 + 5n), quizzes are 50.
    budget: assignments and quizzes take a fixed share of a total points budget.
    """
    linear = "linear"
    budget = "budget"


class ReadingDetails(BaseModel):
    """Where a reading comes from and how long it takes"""
    source: str = Field(..., description="Source of the reading (e.g., 'Course Textbook')")
    pages: Optional[str] = Field(None, description="Page range (e.g., '65-85')")
    estimated_time: int = Field(..., description="Estimated reading time in minutes")
    type: str = Field(..., description="Reading type (textbook, article, research_paper, ...)")


class QuizQuestion(BaseModel):
    id: int
    question: str
    type: str = Field(..., description="multiple_choice | true_false | short_answer")
    options: Optional[List[str]] = None
    correct_answer: Union[int, str]
    explanation: str
    points: int


class QuizDetails(BaseModel):
    time_limit: int = Field(..., description="Time limit in minutes")
    allowed_attempts: int
    questions: List[QuizQuestion] = Field(default_factory=list)
    instructions: Optional[str] = None
    passing_score: Optional[int] = None


class ModuleItem(BaseSchema):
    """A single piece of content inside a module"""
    id: int = Field(..., description="module_number * 100 + position; unique within a course")
    title: str
    type: ItemType
    content: str = ""
    due_date: Optional[date] = None
    status: ItemStatus = ItemStatus.not_started
    points_possible: int = 0
    grade: Optional[int] = None
    submissions: int = 0
    attempts: int = 0
    max_attempts: Optional[int] = None
    reading_details: Optional[ReadingDetails] = None
    quiz_details: Optional[QuizDetails] = None


class Module(BaseSchema):
    """A two-week content unit"""
    id: int = Field(..., description="1-based module number")
    name: str
    description: str = ""
    due_date: Optional[date] = None
    is_completed: bool = False
    items: List[ModuleItem] = Field(default_factory=list)


class Course(BaseSchema):
    """
    A full course with its generated modules.

    total_points always equals the sum of points_possible over every item;
    whatever replaces the modules also recomputes it.
    """
    id: Optional[int] = Field(None, description="Assigned by the course store")
    name: str
    course_code: str
    description: str = ""
    instructor: str = ""
    instructor_email: Optional[str] = None
    term: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    department: str = ""
    credits: int = 3
    total_points: int = 0
    points_budget: Optional[int] = Field(None, description="Budget the modules were sized from; None means the default")
    current_grade: Optional[int] = None
    modules: List[Module] = Field(default_factory=list)


class AddCourseResult(BaseModel):
    success: bool
    course: Course
