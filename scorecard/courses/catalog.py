from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional, Protocol

from scorecard.config import get_settings

from .models import GolfCourse
from .store import list_courses

logger = logging.getLogger(__name__)


class CourseNotFoundError(LookupError):
    """Raised when a requested course does not exist in the catalog."""


class CourseCatalog(Protocol):
    def lookup_courses(
        self, query: str, limit: Optional[int] = None
    ) -> List[GolfCourse]: ...

    def get_course(self, course_id: str) -> GolfCourse: ...


def _matches(course: GolfCourse, term: str) -> bool:
    fields = (
        course.name,
        course.location.city,
        course.location.state,
        course.designer or "",
    )
    return any(term in value.lower() for value in fields)


class LocalCourseCatalog:
    """In-memory course catalog searched by simple substring matching."""

    def __init__(
        self,
        courses: Iterable[GolfCourse],
        *,
        min_query_chars: int | None = None,
        default_limit: int | None = None,
    ):
        settings = get_settings()
        self._courses = list(courses)
        self._min_query_chars = (
            settings.course_search_min_chars
            if min_query_chars is None
            else min_query_chars
        )
        self._default_limit = default_limit or settings.course_search_limit

    def __len__(self) -> int:
        return len(self._courses)

    def lookup_courses(
        self, query: str, limit: Optional[int] = None
    ) -> List[GolfCourse]:
        limit = limit or self._default_limit
        query = (query or "").strip()
        if len(query) < self._min_query_chars:
            return self._courses[:limit]

        term = query.lower()
        return [course for course in self._courses if _matches(course, term)][:limit]

    def get_course(self, course_id: str) -> GolfCourse:
        for course in self._courses:
            if course.id == course_id:
                return course
        raise CourseNotFoundError(course_id)

    def find_by_name(self, name: str) -> GolfCourse | None:
        term = name.strip().lower()
        if not term:
            return None
        for course in self._courses:
            if course.name.lower() == term:
                return course
        return next(
            (course for course in self._courses if term in course.name.lower()), None
        )


def load_courses(path: Path | str) -> list[GolfCourse]:
    with Path(path).expanduser().open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if isinstance(data, dict):
        data = data.get("courses", [])
    if not isinstance(data, list):
        raise ValueError(f"course file {path} must contain a list of courses")
    return [GolfCourse.model_validate(entry) for entry in data]


@lru_cache(maxsize=1)
def get_course_catalog() -> LocalCourseCatalog:
    path = get_settings().course_catalog_path
    if path:
        courses = load_courses(path)
        logger.info(
            "loaded course catalog from file",
            extra={"path": str(path), "courses": len(courses)},
        )
    else:
        courses = list_courses()
    return LocalCourseCatalog(courses)


__all__ = [
    "CourseCatalog",
    "CourseNotFoundError",
    "LocalCourseCatalog",
    "get_course_catalog",
    "load_courses",
]
