"""
Content Assembler - Build modules and courses from topics and schedule dates.

Every module has the same slot layout, in due-date order:

    intro page -> reading 1 -> discussion -> reading 2 -> assignment -> quiz

The department's weekly pattern decides which slots are filled. Item bodies
are plain string templates over the topic title and overview, so the same
inputs always give the same course.
"""

from datetime import date
from typing import Iterable, List, Optional, Sequence, Union

from plato.core.errors import GenerationPreconditionError
from plato.schemas.course import (
    Course,
    ItemType,
    Module,
    ModuleItem,
    PointPolicy,
    QuizDetails,
    QuizQuestion,
    ReadingDetails,
)
from plato.schemas.generator import DepartmentConfig, Topic, WeeklyPattern
from plato.services.schedule import (
    derive_item_offsets,
    derive_module_dates,
    module_due_date,
    weeks_per_module,
)

DISCUSSION_POINTS = 25
LINEAR_ASSIGNMENT_BASE = 100
LINEAR_ASSIGNMENT_STEP = 5
LINEAR_QUIZ_POINTS = 50
BUDGET_ASSIGNMENT_SHARE = 0.4
BUDGET_QUIZ_SHARE = 0.3
DEFAULT_POINTS_BUDGET = 1000

ASSIGNMENT_MAX_ATTEMPTS = 3
QUIZ_MAX_ATTEMPTS = 2
QUIZ_TIME_LIMIT = 30
QUIZ_PASSING_SCORE = 70

READING_SOURCES = {
    "textbook": "Course Textbook",
    "article": "Supplementary Materials",
    "research_paper": "Research Literature",
    "documentation": "Official Documentation",
    "website": "Course Website",
}

QUIZ_DISTRACTORS = (
    "A survey of topics reserved for a later course",
    "Course logistics and administrative policies",
    "Historical background unrelated to the course",
)


def coerce_point_policy(point_policy: Union[PointPolicy, str]) -> PointPolicy:
    try:
        return PointPolicy(point_policy)
    except ValueError:
        raise GenerationPreconditionError(f"Unknown point policy: {point_policy!r}") from None


def assignment_points(
    module_number: int,
    point_policy: PointPolicy,
    module_count: int,
    points_budget: int = DEFAULT_POINTS_BUDGET,
) -> int:
    if point_policy == PointPolicy.budget:
        return int(points_budget / module_count * BUDGET_ASSIGNMENT_SHARE)
    return LINEAR_ASSIGNMENT_BASE + module_number * LINEAR_ASSIGNMENT_STEP


def quiz_points(
    point_policy: PointPolicy,
    module_count: int,
    points_budget: int = DEFAULT_POINTS_BUDGET,
) -> int:
    if point_policy == PointPolicy.budget:
        return int(points_budget / module_count * BUDGET_QUIZ_SHARE)
    return LINEAR_QUIZ_POINTS


def filled_slots(pattern: WeeklyPattern) -> List[str]:
    """Slots a module carries, in due-date order."""
    slots = []
    if pattern.pages > 0:
        slots.append("intro")
    if pattern.readings >= 1:
        slots.append("reading1")
    if pattern.discussions > 0:
        slots.append("discussion")
    if pattern.readings >= 2:
        slots.append("reading2")
    if pattern.assignments > 0:
        slots.append("assignment")
    if pattern.quizzes > 0:
        slots.append("quiz")
    return slots


# ============ Item Templates ============

def _intro_page(item_id: int, topic: Topic, due: date) -> ModuleItem:
    lowered = topic.title.lower()
    content = f"""<div class="module-introduction">
  <h2>Welcome to {topic.title}</h2>
  <p>{topic.overview}</p>

  <h3>Learning Objectives</h3>
  <ul>
    <li>Understand the fundamental concepts of {lowered}</li>
    <li>Apply theoretical knowledge to practical scenarios</li>
    <li>Develop critical thinking skills related to {lowered}</li>
    <li>Engage with peers in meaningful discussions</li>
  </ul>

  <h3>This Module's Activities</h3>
  <p>This module includes readings, discussions, assignments, and assessments designed to build your understanding progressively. Please complete activities in the suggested order.</p>
</div>"""
    return ModuleItem(
        id=item_id,
        title=f"Introduction to {topic.title}",
        type=ItemType.page,
        content=content,
        due_date=due,
        points_possible=0,
    )


def _reading(
    item_id: int,
    topic: Topic,
    config: DepartmentConfig,
    module_number: int,
    reading_index: int,
    due: date,
) -> ModuleItem:
    reading_type = config.reading_types[(module_number + reading_index) % len(config.reading_types)]
    first_page = 45 + module_number * 20 + reading_index * 20
    lowered = topic.title.lower()

    if reading_index == 0:
        title = f"{topic.title} - Essential Reading"
        content = (
            f"Read foundational materials covering {lowered}. "
            "Focus on core concepts, key terminology, and worked examples."
        )
    else:
        title = f"{topic.title} - Advanced Reading"
        content = (
            f"Advanced materials for {lowered}. "
            "Connect these ideas to earlier readings and note open questions for discussion."
        )

    return ModuleItem(
        id=item_id,
        title=title,
        type=ItemType.reading,
        content=content,
        due_date=due,
        points_possible=0,
        reading_details=ReadingDetails(
            source=READING_SOURCES.get(reading_type, "Course Materials"),
            pages=f"{first_page}-{first_page + 20}",
            estimated_time=60 - reading_index * 15,
            type=reading_type,
        ),
    )


def _discussion(
    item_id: int,
    topic: Topic,
    config: DepartmentConfig,
    module_number: int,
    due: date,
) -> ModuleItem:
    focus = config.discussion_topics[(module_number - 1) % len(config.discussion_topics)]
    content = f"""Discuss {topic.title.lower()} focusing on {focus.lower()}. Share examples, ask questions, and engage with your classmates' perspectives.

Initial Post Requirements:
- Minimum 200 words
- Include at least one specific example
- Reference course materials
- Pose a thoughtful question for further discussion

Response Requirements:
- Respond to at least 2 classmates
- Build upon their ideas with substantive comments
- Maintain respectful and academic discourse"""
    return ModuleItem(
        id=item_id,
        title=f"{focus}: {topic.title}",
        type=ItemType.discussion,
        content=content,
        due_date=due,
        points_possible=DISCUSSION_POINTS,
    )


def _assignment(
    item_id: int,
    topic: Topic,
    config: DepartmentConfig,
    module_number: int,
    points: int,
    due: date,
) -> ModuleItem:
    assignment_type = config.assignment_types[module_number % len(config.assignment_types)]
    content = f"""Complete this {assignment_type.lower()} focusing on {topic.title.lower()}.

Requirements:
- Demonstrate understanding of key concepts
- Apply knowledge to practical scenarios
- Show detailed work and analysis
- Follow academic standards
- Submit by the due date"""
    return ModuleItem(
        id=item_id,
        title=f"{topic.title} {assignment_type}",
        type=ItemType.assignment,
        content=content,
        due_date=due,
        points_possible=points,
        max_attempts=ASSIGNMENT_MAX_ATTEMPTS,
    )


def quiz_questions(topic: Topic, module_number: int, points: int) -> List[QuizQuestion]:
    """Three templated questions whose points add up to the quiz total."""
    correct_index = module_number % (len(QUIZ_DISTRACTORS) + 1)
    options = list(QUIZ_DISTRACTORS)
    options.insert(correct_index, topic.overview)

    choice_points = points * 2 // 5
    true_false_points = points // 5
    short_answer_points = points - choice_points - true_false_points

    return [
        QuizQuestion(
            id=1,
            question=f"Which statement best describes the focus of {topic.title}?",
            type="multiple_choice",
            options=options,
            correct_answer=correct_index,
            points=choice_points,
            explanation=f"{topic.title} covers: {topic.overview}.",
        ),
        QuizQuestion(
            id=2,
            question=f"{topic.title} is covered in Module {module_number} of this course.",
            type="true_false",
            options=["True", "False"],
            correct_answer="True",
            points=true_false_points,
            explanation=f"Module {module_number} is dedicated to {topic.title.lower()}.",
        ),
        QuizQuestion(
            id=3,
            question=f"In your own words, explain one practical application of {topic.title.lower()}.",
            type="short_answer",
            correct_answer="Answers will vary",
            points=short_answer_points,
            explanation="A complete answer names a concept from the module and a concrete situation where it applies.",
        ),
    ]


def _quiz(item_id: int, topic: Topic, module_number: int, points: int, due: date) -> ModuleItem:
    return ModuleItem(
        id=item_id,
        title=f"{topic.title} Assessment",
        type=ItemType.quiz,
        content=(
            f"Comprehensive assessment covering key concepts from {topic.title.lower()}. "
            "This quiz will test your understanding of the material covered in this module."
        ),
        due_date=due,
        points_possible=points,
        max_attempts=QUIZ_MAX_ATTEMPTS,
        quiz_details=QuizDetails(
            time_limit=QUIZ_TIME_LIMIT,
            allowed_attempts=QUIZ_MAX_ATTEMPTS,
            questions=quiz_questions(topic, module_number, points),
            instructions=(
                f"This quiz covers the key concepts from {topic.title}. You have {QUIZ_TIME_LIMIT} minutes "
                f"and up to {QUIZ_MAX_ATTEMPTS} attempts."
            ),
            passing_score=QUIZ_PASSING_SCORE,
        ),
    )


# ============ Module / Course Assembly ============

def build_module(
    index: int,
    topic: Topic,
    config: DepartmentConfig,
    start_date: date,
    *,
    weeks_in_module: int = 2,
    module_count: int = 8,
    point_policy: Union[PointPolicy, str] = PointPolicy.linear,
    points_budget: Optional[int] = None,
) -> Module:
    """Build module ``index + 1`` starting on ``start_date``."""
    if module_count <= 0:
        raise GenerationPreconditionError(f"module_count must be positive, got {module_count}")
    policy = coerce_point_policy(point_policy)
    budget = points_budget if points_budget is not None else DEFAULT_POINTS_BUDGET

    module_number = index + 1
    due = derive_item_offsets(start_date)
    items: List[ModuleItem] = []

    for position, slot in enumerate(filled_slots(config.weekly_pattern), start=1):
        item_id = module_number * 100 + position
        if slot == "intro":
            items.append(_intro_page(item_id, topic, due.intro))
        elif slot == "reading1":
            items.append(_reading(item_id, topic, config, module_number, 0, due.reading1))
        elif slot == "discussion":
            items.append(_discussion(item_id, topic, config, module_number, due.discussion))
        elif slot == "reading2":
            items.append(_reading(item_id, topic, config, module_number, 1, due.reading2))
        elif slot == "assignment":
            points = assignment_points(module_number, policy, module_count, budget)
            items.append(_assignment(item_id, topic, config, module_number, points, due.assignment))
        elif slot == "quiz":
            points = quiz_points(policy, module_count, budget)
            items.append(_quiz(item_id, topic, module_number, points, due.quiz))

    return Module(
        id=module_number,
        name=f"Module {module_number}: {topic.title}",
        description=topic.overview,
        due_date=module_due_date(start_date, weeks_in_module),
        is_completed=False,
        items=items,
    )


def calculate_total_points(modules: Iterable[Module]) -> int:
    return sum(item.points_possible for module in modules for item in module.items)


def assemble_course(
    base_course: Course,
    config: DepartmentConfig,
    topics: Sequence[Topic],
    *,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    point_policy: Union[PointPolicy, str] = PointPolicy.linear,
    points_budget: Optional[int] = None,
) -> Course:
    """
    Return a copy of ``base_course`` with one generated module per topic.

    Args:
        base_course: Course whose identity fields (name, code, instructor...) are kept
        config: Department vocabulary and weekly pattern
        topics: One topic per module, in order
        start_date/end_date: Semester range; defaults to the base course's own dates
        point_policy: "linear" or "budget"
        points_budget: Total points to size items from under the budget policy

    Returns:
        New Course with modules and total_points filled in and current_grade
        cleared; base_course is not modified
    """
    module_count = len(topics)
    if module_count <= 0:
        raise GenerationPreconditionError("At least one topic is required to assemble a course")

    start = start_date or base_course.start_date
    if start is None:
        raise GenerationPreconditionError("A semester start date is required to assemble a course")
    end = end_date or base_course.end_date or start

    window = weeks_per_module(start, end, module_count)
    module_starts = derive_module_dates(start, module_count, window)

    modules = [
        build_module(
            index,
            topic,
            config,
            module_start,
            weeks_in_module=window,
            module_count=module_count,
            point_policy=point_policy,
            points_budget=points_budget,
        )
        for index, (topic, module_start) in enumerate(zip(topics, module_starts))
    ]

    return base_course.model_copy(
        deep=True,
        update={
            "modules": modules,
            "start_date": start,
            "end_date": end,
            "total_points": calculate_total_points(modules),
            "points_budget": points_budget,
            # Fresh modules carry no grades
            "current_grade": None,
        },
    )
