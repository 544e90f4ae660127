"""Static per-department vocabulary used by the content assembler."""

from types import MappingProxyType
from typing import Mapping

from plato.schemas.generator import DepartmentConfig, WeeklyPattern

DEFAULT_DEPARTMENT = "Computer Science"

DEPARTMENT_CONFIGS: Mapping[str, DepartmentConfig] = MappingProxyType({
    "Computer Science": DepartmentConfig(
        reading_types=("documentation", "research_paper", "textbook", "article"),
        assignment_types=(
            "Programming Project",
            "Code Review",
            "System Design",
            "Algorithm Implementation",
            "Web Development",
            "Database Design",
        ),
        discussion_topics=(
            "Best Practices",
            "Technology Trends",
            "Code Architecture",
            "Open Source Discussion",
            "Problem Solving",
        ),
        assessment_style="practical",
        weekly_pattern=WeeklyPattern(readings=2),
    ),
    "Mathematics": DepartmentConfig(
        reading_types=("textbook", "research_paper", "article"),
        assignment_types=(
            "Problem Set",
            "Proof Assignment",
            "Mathematical Modeling",
            "Computational Exercise",
            "Research Paper",
        ),
        discussion_topics=(
            "Mathematical Concepts",
            "Real-world Applications",
            "Problem Solving Strategies",
            "Mathematical History",
        ),
        assessment_style="theoretical",
        weekly_pattern=WeeklyPattern(readings=1),
    ),
    "English": DepartmentConfig(
        reading_types=("textbook", "article", "research_paper"),
        assignment_types=(
            "Literary Analysis",
            "Creative Writing",
            "Research Paper",
            "Critical Essay",
            "Comparative Analysis",
        ),
        discussion_topics=(
            "Literary Interpretation",
            "Writing Techniques",
            "Cultural Context",
            "Author Study",
            "Genre Analysis",
        ),
        assessment_style="analytical",
        weekly_pattern=WeeklyPattern(readings=2),
    ),
    "Spanish": DepartmentConfig(
        reading_types=("textbook", "article", "website"),
        assignment_types=(
            "Oral Presentation",
            "Written Composition",
            "Grammar Exercise",
            "Cultural Project",
            "Translation Exercise",
        ),
        discussion_topics=(
            "Cultural Exchange",
            "Language Practice",
            "Current Events",
            "Literature Discussion",
            "Travel Experiences",
        ),
        assessment_style="communicative",
        weekly_pattern=WeeklyPattern(readings=1),
    ),
    "French": DepartmentConfig(
        reading_types=("textbook", "article", "website"),
        assignment_types=(
            "Oral Assessment",
            "Written Assignment",
            "Cultural Analysis",
            "Language Exchange",
            "Pronunciation Practice",
        ),
        discussion_topics=(
            "French Culture",
            "Language Learning",
            "Francophone Countries",
            "Literature",
            "Current Affairs",
        ),
        assessment_style="communicative",
        weekly_pattern=WeeklyPattern(readings=1),
    ),
    "Music": DepartmentConfig(
        reading_types=("textbook", "article"),
        assignment_types=("Practice Recording", "Performance Piece", "Theory Exercise", "Style Study"),
        discussion_topics=(
            "Musical Style Analysis",
            "Performance Technique",
            "Practice Methods",
            "Musical Expression",
            "Genre Characteristics",
            "Professional Development",
            "Music Theory Application",
            "Career Insights",
        ),
        assessment_style="performance",
        weekly_pattern=WeeklyPattern(readings=2),
    ),
})


def resolve_config(department: str) -> DepartmentConfig:
    """Return the vocabulary for a department.

    Unknown (or empty) departments get the Computer Science entry itself, so
    the fallback is always the identical object.
    """
    return DEPARTMENT_CONFIGS.get(department or "", DEPARTMENT_CONFIGS[DEFAULT_DEPARTMENT])
