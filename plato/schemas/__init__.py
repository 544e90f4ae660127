# Re-export schemas so callers can import from plato.schemas directly
from plato.schemas.course import (
    AddCourseResult,
    Course,
    ItemStatus,
    ItemType,
    Module,
    ModuleItem,
    PointPolicy,
    QuizDetails,
    QuizQuestion,
    ReadingDetails,
)
from plato.schemas.generator import (
    CourseConfig,
    DepartmentConfig,
    EnhancementSummary,
    ParsedCoursePrompt,
    PromptRequest,
    SeedProgressRequest,
    Topic,
    WeeklyPattern,
)

__all__ = [
    "AddCourseResult",
    "Course",
    "ItemStatus",
    "ItemType",
    "Module",
    "ModuleItem",
    "PointPolicy",
    "QuizDetails",
    "QuizQuestion",
    "ReadingDetails",
    # Generator inputs and lookup tables
    "CourseConfig",
    "DepartmentConfig",
    "EnhancementSummary",
    "ParsedCoursePrompt",
    "PromptRequest",
    "SeedProgressRequest",
    "Topic",
    "WeeklyPattern",
]
