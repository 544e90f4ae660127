"""Per-course topic progressions, keyed by department then course name."""

from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple

from plato.core.errors import GenerationPreconditionError
from plato.schemas.generator import Topic


def _topics(*pairs: Tuple[str, str]) -> Tuple[Topic, ...]:
    return tuple(Topic(title=title, overview=overview) for title, overview in pairs)


GENERIC_TOPICS: Tuple[Topic, ...] = _topics(
    ("Fundamentals", "Introduction to fundamental concepts and principles"),
    ("Core Concepts", "Building upon fundamental knowledge with core concepts"),
    ("Advanced Topics", "Exploring advanced topics and applications"),
    ("Practical Applications", "Applying knowledge to real-world scenarios"),
    ("Analysis and Synthesis", "Analyzing and synthesizing complex information"),
    ("Contemporary Issues", "Examining current trends and developments"),
    ("Research and Innovation", "Engaging in research and innovative thinking"),
    ("Integration and Mastery", "Integrating knowledge and comprehensive assessment"),
)

COURSE_TOPICS: Mapping[str, Mapping[str, Tuple[Topic, ...]]] = MappingProxyType({
    "Computer Science": MappingProxyType({
        "Advanced Web Development": _topics(
            ("Modern React Fundamentals", "Deep dive into React hooks, context, and modern development patterns"),
            ("State Management Systems", "Redux, Zustand, and advanced state management techniques"),
            ("Backend Integration", "API design, authentication, and full-stack development"),
            ("Performance Optimization", "Code splitting, lazy loading, and performance monitoring"),
            ("Testing Strategies", "Unit testing, integration testing, and E2E testing"),
            ("Deployment & DevOps", "CI/CD pipelines, containerization, and cloud deployment"),
            ("Advanced Patterns", "Design patterns, architecture, and scalability"),
            ("Final Project", "Comprehensive full-stack application development"),
        ),
        "Data Structures": _topics(
            ("Arrays and Linked Lists", "Fundamental data structures and their operations"),
            ("Stacks and Queues", "LIFO and FIFO data structures with practical applications"),
            ("Trees and Binary Search Trees", "Hierarchical data structures and tree traversal algorithms"),
            ("Hash Tables and Maps", "Hash functions, collision resolution, and dictionary operations"),
            ("Graphs and Graph Algorithms", "Graph representation and fundamental graph algorithms"),
            ("Heaps and Priority Queues", "Binary heaps and priority-based data structures"),
            ("Advanced Trees", "AVL trees, B-trees, and self-balancing structures"),
            ("Algorithm Analysis", "Time complexity, space complexity, and optimization techniques"),
        ),
    }),
    "Mathematics": MappingProxyType({
        "Calculus I": _topics(
            ("Limits and Continuity", "Introduction to limits, limit laws, and continuity of functions"),
            ("Derivatives and Rules", "Definition of derivatives and fundamental differentiation rules"),
            ("Applications of Derivatives", "Related rates, optimization, and curve sketching"),
            ("The Integral", "Antiderivatives and the fundamental theorem of calculus"),
            ("Integration Techniques", "Substitution, integration by parts, and special techniques"),
            ("Applications of Integration", "Area, volume, and physical applications of integrals"),
            ("Differential Equations", "Basic differential equations and their applications"),
            ("Sequences and Series", "Infinite sequences, series, and convergence tests"),
        ),
    }),
    "English": MappingProxyType({
        "Introduction to Literature": _topics(
            ("Literary Elements", "Understanding plot, character, setting, and theme in literature"),
            ("Poetry Analysis", "Analyzing poetic devices, form, and meaning in poetry"),
            ("Short Fiction", "Examining narrative techniques in short stories"),
            ("Drama and Theater", "Understanding dramatic structure and theatrical elements"),
            ("Novel Study", "In-depth analysis of novel structure and development"),
            ("Literary Criticism", "Introduction to critical approaches and literary theory"),
            ("Contemporary Literature", "Modern and contemporary literary movements"),
            ("Research and Writing", "Advanced literary analysis and research skills"),
        ),
    }),
    "Music": MappingProxyType({
        "Popular Music Class Piano": _topics(
            ("Piano Fundamentals and Posture", "Basic piano technique, proper posture, hand position, and keyboard geography"),
            ("Popular Music Theory Essentials", "Basic music theory including scales, chords, and progressions in popular music"),
            ("Rhythm and Popular Styles", "Understanding rhythm patterns, time signatures, and style characteristics"),
            ("Lead Sheets and Chord Charts", "Reading and interpreting lead sheets, chord symbols, and popular music notation"),
            ("Popular Piano Styles", "Rock, pop, blues, and contemporary piano playing techniques"),
            ("Jazz Piano Fundamentals", "Introduction to jazz piano including basic voicings and improvisation"),
            ("Performance and Expression", "Developing musical expression, dynamics, and performance confidence"),
            ("Final Portfolio and Recital", "Preparation and performance of a varied repertoire showcasing learned skills"),
        ),
    }),
    "Learning Design": MappingProxyType({
        "Applied Project": _topics(
            ("Project Planning and Proposal", "Scoping the applied project and drafting a proposal"),
            ("Literature Review and Research Methods", "Surveying prior work and choosing research methods"),
            ("Methodology and Design", "Designing the intervention, instruments, and evaluation plan"),
            ("Implementation Phase 1", "Building and piloting the first iteration of the project"),
            ("Implementation Phase 2", "Refining the project based on pilot feedback"),
            ("Evaluation and Analysis", "Collecting data and analyzing project outcomes"),
            ("Final Presentation and Reflection", "Presenting results and reflecting on the project"),
        ),
    }),
})


def topic_list(department: str, course_name: str) -> Sequence[Topic]:
    """Return the course's own progression, or the generic one."""
    course_topics = COURSE_TOPICS.get(department or "", {})
    return course_topics.get(course_name or "", GENERIC_TOPICS)


def resolve_topics(department: str, course_name: str, module_count: int) -> List[Topic]:
    """Pick one topic per module.

    When the course needs more modules than its progression has topics, the
    last topic is repeated rather than running off the end of the list.
    """
    if module_count <= 0:
        raise GenerationPreconditionError(f"module_count must be positive, got {module_count}")

    available = topic_list(department, course_name)
    last = len(available) - 1
    return [available[min(i, last)] for i in range(module_count)]


def department_for_course(course_name: str) -> Optional[str]:
    """Department whose topic table lists ``course_name``, if any."""
    for department, courses in COURSE_TOPICS.items():
        if course_name in courses:
            return department
    return None
