"""Merge reference course data into a round's hole records.

The resolver never discards entered scores: when a course is selected, the
per-hole play data (score, putts, fairway result, notes) is carried over by
hole number while par, yardage and difficulty rank come from the course.
Before any course is known, :func:`generate_synthetic_holes` fills the card
with a standard par pattern and approximate yardages. Those records keep
``sourced=False`` so consumers can tell the yardages are not authoritative.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from scorecard.config import get_settings
from scorecard.rounds.models import (
    FairwayResult,
    HoleRecord,
    StartSegment,
    TeeColor,
    start_hole_for,
)
from scorecard.rounds.scoring import derive_gir

from .models import CourseHole, GolfCourse

logger = logging.getLogger(__name__)

STANDARD_PARS = (4, 4, 3, 5, 4, 4, 4, 3, 5, 4, 4, 3, 5, 4, 4, 4, 3, 5)
BASE_YARDAGE_BY_PAR = {3: 150, 4: 380, 5: 520}

_PRESERVED_FIELDS = ("score", "putts", "fairway_result", "notes", "green_in_regulation")


class ResolvedHoles(BaseModel):
    holes: list[HoleRecord]
    course_rating: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("course_rating", "courseRating"),
        serialization_alias="courseRating",
    )
    course_slope: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("course_slope", "courseSlope"),
        serialization_alias="courseSlope",
    )
    # course holes merged into the card
    matched: int = 0

    model_config = ConfigDict(populate_by_name=True)

    @property
    def sourced(self) -> bool:
        return bool(self.holes) and all(hole.sourced for hole in self.holes)


def tee_yardage(hole: CourseHole, tee: TeeColor | str) -> int:
    yards = hole.yardage.get(TeeColor(tee)) or hole.yardage.get(TeeColor.WHITE)
    return yards or get_settings().default_yardage


def _fairway_for_par(par: int, current: FairwayResult | None) -> FairwayResult | None:
    if par == 3:
        return FairwayResult.NOT_APPLICABLE
    if current is FairwayResult.NOT_APPLICABLE:
        return None
    return current


def _merge_hole(
    course_hole: CourseHole, tee: TeeColor, existing: HoleRecord | None
) -> HoleRecord:
    carried = {}
    if existing is not None:
        carried = {name: getattr(existing, name) for name in _PRESERVED_FIELDS}

    score, putts = carried.get("score"), carried.get("putts")
    gir = carried.get("green_in_regulation")
    if score is not None and putts is not None:
        gir = derive_gir(score, putts, course_hole.par)

    return HoleRecord(
        hole_number=course_hole.number,
        par=course_hole.par,
        yardage=tee_yardage(course_hole, tee),
        difficulty_rank=course_hole.handicap,
        score=score,
        putts=putts,
        fairway_result=_fairway_for_par(course_hole.par, carried.get("fairway_result")),
        green_in_regulation=gir,
        notes=carried.get("notes") or course_hole.description,
        sourced=True,
    )


def resolve_course(
    course: GolfCourse,
    tee_color: TeeColor | str,
    unit_count: int,
    start_segment: StartSegment | str,
    existing_holes: Sequence[HoleRecord],
) -> ResolvedHoles:
    """Merge ``course`` into every hole of the configured range.

    Holes the course does not define keep their existing record, so entered
    scores survive partial course data and cards longer than the course.
    """

    tee = TeeColor(tee_color)
    rating, slope = course.rating_for(tee)

    start = start_hole_for(unit_count, start_segment)
    end = start + unit_count - 1
    course_holes = {
        hole.number: hole for hole in course.holes if start <= hole.number <= end
    }

    if not course_holes:
        logger.warning(
            "course has no holes in requested range",
            extra={"course_id": course.id, "start_hole": start, "end_hole": end},
        )
        return ResolvedHoles(
            holes=list(existing_holes), course_rating=rating, course_slope=slope
        )

    by_number = {hole.hole_number: hole for hole in existing_holes}
    holes = []
    for hole_number in range(start, end + 1):
        existing = by_number.get(hole_number)
        course_hole = course_holes.get(hole_number)
        if course_hole is not None:
            holes.append(_merge_hole(course_hole, tee, existing))
        elif existing is not None:
            holes.append(existing.model_copy(update={"sourced": False}))
        else:
            holes.append(_synthetic_hole(hole_number))

    if len(course_holes) < unit_count:
        logger.info(
            "course covers part of the card",
            extra={
                "course_id": course.id,
                "matched": len(course_holes),
                "unit_count": unit_count,
            },
        )
    logger.info(
        "resolved course holes",
        extra={"course_id": course.id, "tee": tee.value, "holes": len(holes)},
    )
    return ResolvedHoles(
        holes=holes,
        course_rating=rating,
        course_slope=slope,
        matched=len(course_holes),
    )


def retee_holes(
    course: GolfCourse, tee_color: TeeColor | str, holes: Sequence[HoleRecord]
) -> ResolvedHoles:
    """Re-derive yardages for a new tee without touching anything else."""

    tee = TeeColor(tee_color)
    rating, slope = course.rating_for(tee)

    updated = []
    for hole in holes:
        course_hole = course.hole(hole.hole_number)
        if course_hole is None:
            updated.append(hole)
            continue
        updated.append(
            hole.model_copy(update={"yardage": tee_yardage(course_hole, tee)})
        )
    return ResolvedHoles(holes=updated, course_rating=rating, course_slope=slope)


def synthetic_par(hole_number: int) -> int:
    return STANDARD_PARS[(hole_number - 1) % len(STANDARD_PARS)]


def _synthetic_hole(hole_number: int, offset: int = 0) -> HoleRecord:
    par = synthetic_par(hole_number)
    return HoleRecord(
        hole_number=hole_number,
        par=par,
        yardage=BASE_YARDAGE_BY_PAR[par] + offset,
        fairway_result=FairwayResult.NOT_APPLICABLE if par == 3 else None,
    )


def generate_synthetic_holes(
    unit_count: int,
    start_segment: StartSegment | str = StartSegment.FRONT,
    *,
    rng: random.Random | None = None,
    jitter: int | None = None,
) -> list[HoleRecord]:
    if jitter is None:
        jitter = get_settings().synthetic_yardage_jitter
    rng = rng or random.Random()

    start = start_hole_for(unit_count, start_segment)
    holes = []
    for hole_number in range(start, start + unit_count):
        offset = rng.randint(-jitter, jitter - 1) if jitter > 0 else 0
        holes.append(_synthetic_hole(hole_number, offset))

    logger.debug(
        "generated synthetic holes",
        extra={"start_hole": start, "unit_count": unit_count},
    )
    return holes


__all__ = [
    "BASE_YARDAGE_BY_PAR",
    "ResolvedHoles",
    "STANDARD_PARS",
    "generate_synthetic_holes",
    "resolve_course",
    "retee_holes",
    "synthetic_par",
    "tee_yardage",
]
