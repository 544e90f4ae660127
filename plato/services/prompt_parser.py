"""
Prompt Parser - Best-effort extraction of course details from free text.

Handles two shapes of input:
- "Key: value" lines ("Name: Intro to X", "Code: XYZ100", ...)
- Catalogue listings copied from a class search page, where a label sits on
  its own line and the value follows on the next line.

Every field is optional. Anything that cannot be found or parsed is left as
None for the caller to default; nothing here raises on odd input.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Tuple

from plato.schemas.generator import ParsedCoursePrompt

KEY_ALIASES: Dict[str, str] = {
    "name": "name",
    "title": "name",
    "course name": "name",
    "course title": "name",
    "code": "course_code",
    "course code": "course_code",
    "instructor": "instructor",
    "instructors": "instructor",
    "instructor(s)": "instructor",
    "professor": "instructor",
    "description": "description",
    "course description": "description",
    "term": "term",
    "semester": "term",
    "department": "department",
    "dept": "department",
    "start": "start_date",
    "start date": "start_date",
    "end": "end_date",
    "end date": "end_date",
    "dates": "dates",
    "units": "units",
    "credits": "units",
    "credit hours": "units",
    "modules": "module_count",
}

# Column headers and section titles seen in catalogue listings
CATALOGUE_LABELS = frozenset({
    "number", "days", "location", "open seats", "general studies",
    "enrollment requirements", "consent", "course notes", "fees", "offered by",
    "repeatable for credit", "component", "last day to enroll", "drop deadline",
    "course withdrawal deadline", "copy class link", "reserved seat information",
    "course material", "course",
})

# Labels whose next line is worth keeping
BLOCK_FIELDS = frozenset({"instructor", "units", "description", "dates"})

COURSE_CODE_LINE = re.compile(r"^([A-Z]{2,4})\s?(\d{3,4}[A-Z]?)$")
SLASH_RANGE = re.compile(
    r"(\d{1,2})/(\d{1,2})(?:/(\d{2,4}))?\s*(?:-|–|to)\s*(\d{1,2})/(\d{1,2})(?:/(\d{2,4}))?"
)
ISO_RANGE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*(?:-|–|to)\s*(\d{4}-\d{2}-\d{2})")
LEADING_INT = re.compile(r"^\s*(\d+)")
DATE_FORMATS = ("%Y-%m-%d", "%m/%d/%Y", "%m/%d/%y", "%B %d, %Y", "%b %d, %Y")


def _normalize_label(text: str) -> str:
    return re.sub(r"\s+", " ", text.strip().lstrip("-*•").strip().lower())


def _is_label(line: str) -> bool:
    label = _normalize_label(line)
    return label in KEY_ALIASES or label in CATALOGUE_LABELS


def _non_empty_lines(text: str) -> List[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def _parse_int(value: str) -> Optional[int]:
    match = LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def _year(value: Optional[str], default_year: Optional[int]) -> Optional[int]:
    if value is None:
        return default_year
    year = int(value)
    return year + 2000 if year < 100 else year


def _parse_date(value: str, default_year: Optional[int] = None) -> Optional[date]:
    value = value.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    match = re.fullmatch(r"(\d{1,2})/(\d{1,2})", value)
    if match and default_year:
        try:
            return date(default_year, int(match.group(1)), int(match.group(2)))
        except ValueError:
            return None
    return None


def _parse_date_range(
    text: str,
    default_year: Optional[int] = None,
) -> Optional[Tuple[date, date]]:
    """Find a start/end pair; ranges with explicit years win over year-less ones."""
    iso = ISO_RANGE.search(text)
    if iso:
        start, end = _parse_date(iso.group(1)), _parse_date(iso.group(2))
        if start and end:
            return start, end

    matches = list(SLASH_RANGE.finditer(text))
    with_years = [m for m in matches if m.group(3) and m.group(6)]
    for match in with_years + [m for m in matches if m not in with_years]:
        sm, sd, sy, em, ed, ey = match.groups()
        start_year = _year(sy, default_year)
        end_year = _year(ey, start_year)
        if start_year is None or end_year is None:
            continue
        try:
            start = date(start_year, int(sm), int(sd))
            end = date(end_year, int(em), int(ed))
            if end < start and ey is None:
                # Year-less end crossing New Year
                end = date(end_year + 1, int(em), int(ed))
        except ValueError:
            continue
        return start, end
    return None


def _apply(fields: Dict[str, object], key: str, value: str, default_year: Optional[int]) -> None:
    """Store one raw value under its canonical field, converting as needed."""
    value = value.strip()
    if not value or fields.get(key) is not None:
        return

    if key in ("start_date", "end_date"):
        parsed = _parse_date(value, default_year)
        if parsed:
            fields[key] = parsed
    elif key == "dates":
        found = _parse_date_range(value, default_year)
        if found:
            fields.setdefault("start_date", found[0])
            fields.setdefault("end_date", found[1])
    elif key in ("units", "module_count"):
        number = _parse_int(value)
        if number:
            fields[key] = number
    else:
        fields[key] = value


def _key_value_pairs(lines: Iterable[str]) -> Iterable[Tuple[str, str]]:
    for line in lines:
        key, sep, value = line.partition(":")
        if not sep:
            continue
        canonical = KEY_ALIASES.get(_normalize_label(key))
        if canonical:
            yield canonical, value


def _labelled_blocks(lines: List[str]) -> Dict[str, str]:
    """Values that follow a label on its own line; the last occurrence wins."""
    found: Dict[str, str] = {}
    for i, line in enumerate(lines[:-1]):
        canonical = KEY_ALIASES.get(_normalize_label(line))
        if canonical not in BLOCK_FIELDS:
            continue
        following = lines[i + 1]
        if _is_label(following):
            continue
        found[canonical] = following
    return found


def _code_and_title(lines: List[str]) -> Tuple[Optional[str], Optional[str]]:
    """A line that is only a course code, and the title line right after it."""
    for i, line in enumerate(lines):
        match = COURSE_CODE_LINE.match(line)
        if not match:
            continue
        code = f"{match.group(1)} {match.group(2)}"
        title = None
        if i + 1 < len(lines):
            candidate = lines[i + 1]
            if not _is_label(candidate) and not candidate.isdigit() and not COURSE_CODE_LINE.match(candidate):
                title = candidate
        return code, title
    return None, None


def parse_course_prompt(text: str, default_year: Optional[int] = None) -> ParsedCoursePrompt:
    """
    Extract course details from free text.

    Args:
        text: Prompt or pasted catalogue listing
        default_year: Year to assume for dates written without one (e.g., "5/19 - 7/11")

    Returns:
        ParsedCoursePrompt with only the fields that could be found
    """
    if not text or not text.strip():
        return ParsedCoursePrompt()

    lines = _non_empty_lines(text)
    fields: Dict[str, object] = {}

    for key, value in _key_value_pairs(lines):
        _apply(fields, key, value, default_year)

    for key, value in _labelled_blocks(lines).items():
        _apply(fields, key, value, default_year)

    code, title = _code_and_title(lines)
    if code:
        _apply(fields, "course_code", code, default_year)
    if title:
        _apply(fields, "name", title, default_year)

    if "start_date" not in fields and "end_date" not in fields:
        found = _parse_date_range(text, default_year)
        if found:
            fields["start_date"], fields["end_date"] = found

    fields.pop("dates", None)
    return ParsedCoursePrompt(**fields)
