"""Reference course data and the resolver that merges it into a round."""

from .catalog import CourseNotFoundError, LocalCourseCatalog, get_course_catalog
from .models import CourseHole, CourseLocation, GolfCourse
from .resolver import ResolvedHoles, generate_synthetic_holes, resolve_course

__all__ = [
    "CourseHole",
    "CourseLocation",
    "CourseNotFoundError",
    "GolfCourse",
    "LocalCourseCatalog",
    "ResolvedHoles",
    "generate_synthetic_holes",
    "get_course_catalog",
    "resolve_course",
]
