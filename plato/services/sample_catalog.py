"""Demo catalogue the app can start with; courses have no modules until enhanced."""

from datetime import date
from typing import List

from plato.schemas.course import Course

_CATALOGUE = (
    {
        "name": "Advanced Web Development",
        "course_code": "CS380",
        "description": (
            "Master modern web development with React, Next.js, Node.js, and cloud deployment. "
            "Build full-stack applications using TypeScript, database integration, authentication, "
            "and real-time features."
        ),
        "instructor": "Dr. Sarah Martinez",
        "instructor_email": "faculty@plato.edu",
        "department": "Computer Science",
        "credits": 4,
    },
    {
        "name": "Data Structures",
        "course_code": "CS250",
        "description": "Fundamental data structures, their operations, and the analysis of the algorithms built on them.",
        "instructor": "Dr. Sarah Martinez",
        "instructor_email": "faculty@plato.edu",
        "department": "Computer Science",
        "credits": 3,
    },
    {
        "name": "Calculus I",
        "course_code": "MAT265",
        "description": (
            "Limits, derivatives, and applications of differential calculus. "
            "Introduction to integral calculus."
        ),
        "instructor": "Dr. James Wilson",
        "instructor_email": "j.wilson@plato.edu",
        "department": "Mathematics",
        "credits": 4,
    },
    {
        "name": "Introduction to Literature",
        "course_code": "ENG101",
        "description": "Reading and writing about poetry, fiction, and drama, with an introduction to literary criticism.",
        "instructor": "Dr. Emily Chen",
        "instructor_email": "e.chen@plato.edu",
        "department": "English",
        "credits": 3,
    },
    {
        "name": "Popular Music Class Piano",
        "course_code": "MSC 131",
        "description": (
            "An introduction to piano playing through popular music styles including rock, pop, blues, "
            "and jazz. Students will develop fundamental piano technique while learning to play "
            "contemporary music using lead sheets and chord charts."
        ),
        "instructor": "Beth Lederman",
        "instructor_email": "blederma@asu.edu",
        "department": "Music",
        "credits": 2,
    },
)


def sample_courses(
    term: str = "Spring 2025",
    start_date: date = date(2025, 1, 13),
    end_date: date = date(2025, 5, 2),
) -> List[Course]:
    return [
        Course(term=term, start_date=start_date, end_date=end_date, **entry)
        for entry in _CATALOGUE
    ]
