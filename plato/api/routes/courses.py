import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import PlainTextResponse

from plato.core.config import Settings
from plato.core.errors import CourseNotFoundError, GenerationPreconditionError
from plato.core.logger import log_step
from plato.schemas.course import AddCourseResult, Course, PointPolicy
from plato.schemas.generator import (
    CourseConfig,
    EnhancementSummary,
    PromptRequest,
    SeedProgressRequest,
)
from plato.services.course_enhancer import enhance_all_courses
from plato.services.course_generator import generate_course, generate_course_from_prompt
from plato.services.course_store import CourseStore
from plato.services.grade_seeding import seed_historical_progress, seeded_rng
from plato.services.syllabus_formatter import course_to_syllabus_text

logger = logging.getLogger(__name__)
router = APIRouter()


def get_course_store(request: Request) -> CourseStore:
    return request.app.state.course_store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def _require_course(store: CourseStore, course_id: int) -> Course:
    course = store.get_course(course_id)
    if not course:
        raise HTTPException(status_code=404, detail="Course not found")
    return course


@router.get("/", response_model=List[Course])
def list_courses(store: CourseStore = Depends(get_course_store)):
    """List every stored course."""
    return store.get_courses()


@router.post("/generate", response_model=AddCourseResult, status_code=status.HTTP_201_CREATED)
def generate(
    config: CourseConfig,
    point_policy: Optional[PointPolicy] = None,
    store: CourseStore = Depends(get_course_store),
    settings: Settings = Depends(get_app_settings),
):
    """Generate a full semester of content for a course and store it."""
    try:
        course = generate_course(
            config,
            point_policy=point_policy or settings.point_policy,
            min_modules=settings.min_modules,
            max_modules=settings.max_modules,
        )
    except GenerationPreconditionError as e:
        raise HTTPException(status_code=422, detail=str(e))

    log_step(f"Generated {course.course_code} with {len(course.modules)} modules")
    return store.add_course(course)


@router.post("/from-prompt", response_model=AddCourseResult, status_code=status.HTTP_201_CREATED)
def generate_from_prompt(
    request: PromptRequest,
    point_policy: Optional[PointPolicy] = None,
    store: CourseStore = Depends(get_course_store),
    settings: Settings = Depends(get_app_settings),
):
    """
    Generate a course from free text.

    Accepts "Key: value" prompts or a pasted catalogue listing; anything the
    text doesn't mention falls back to defaults.
    """
    if not request.prompt.strip():
        raise HTTPException(status_code=400, detail="Prompt cannot be empty")

    try:
        course = generate_course_from_prompt(request.prompt, settings, point_policy=point_policy)
    except GenerationPreconditionError as e:
        raise HTTPException(status_code=422, detail=str(e))

    log_step(f"Generated {course.course_code} from prompt")
    return store.add_course(course)


@router.post("/enhance", response_model=EnhancementSummary)
def enhance_all(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    term: Optional[str] = None,
    point_policy: Optional[PointPolicy] = None,
    store: CourseStore = Depends(get_course_store),
    settings: Settings = Depends(get_app_settings),
):
    """Regenerate the content of every stored course for one semester."""
    return enhance_all_courses(
        store,
        start_date=start_date or settings.default_semester_start,
        end_date=end_date or settings.default_semester_end,
        term=term or settings.default_term,
        point_policy=point_policy or settings.point_policy,
        min_modules=settings.min_modules,
        max_modules=settings.max_modules,
    )


@router.get("/{course_id}", response_model=Course)
def get_course(course_id: int, store: CourseStore = Depends(get_course_store)):
    """Get a course by ID."""
    return _require_course(store, course_id)


@router.post("/{course_id}/seed-progress", response_model=Course)
def seed_progress(
    course_id: int,
    request: SeedProgressRequest,
    store: CourseStore = Depends(get_course_store),
):
    """Mark the first modules as completed and graded (demo data)."""
    course = _require_course(store, course_id)
    seeded = seed_historical_progress(course, request.completed_modules, seeded_rng(request.seed))
    try:
        return store.replace_course(seeded)
    except CourseNotFoundError:
        # Deleted between the read and the write
        raise HTTPException(status_code=404, detail="Course not found")


@router.get("/{course_id}/syllabus", response_class=PlainTextResponse)
def get_syllabus(course_id: int, store: CourseStore = Depends(get_course_store)):
    """Markdown syllabus for a course."""
    return course_to_syllabus_text(_require_course(store, course_id))


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_course(course_id: int, store: CourseStore = Depends(get_course_store)):
    if not store.delete_course(course_id):
        raise HTTPException(status_code=404, detail="Course not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
