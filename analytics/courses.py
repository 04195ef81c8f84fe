from __future__ import annotations

from typing import Iterable, List, Optional

from models.course import Course


def _matches(value: Optional[str], needle: str) -> bool:
    return bool(value) and needle in value.casefold()


def search_courses(courses: Iterable[Course], query: str) -> List[Course]:
    """Courses whose name or city contains the query, ignoring case. A blank query matches all."""
    needle = query.strip().casefold()
    if not needle:
        return list(courses)
    return [c for c in courses if _matches(c.name, needle) or _matches(c.city, needle)]


def courses_by_province(courses: Iterable[Course], province: Optional[str]) -> List[Course]:
    """Courses in a province, ignoring case. No province returns every course."""
    if not province:
        return list(courses)
    wanted = province.strip().casefold()
    return [c for c in courses if c.province and c.province.casefold() == wanted]


def provinces(courses: Iterable[Course]) -> List[str]:
    """Distinct provinces in the catalog, sorted."""
    return sorted({c.province for c in courses if c.province}, key=str.casefold)
