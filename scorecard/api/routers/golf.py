from __future__ import annotations

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from scorecard.courses.catalog import (
    CourseNotFoundError,
    LocalCourseCatalog,
    get_course_catalog,
)
from scorecard.courses.models import GolfCourse
from scorecard.courses.resolver import generate_synthetic_holes, resolve_course
from scorecard.rounds.highlights import (
    GolfHighlights,
    PlayedRound,
    compute_golf_highlights,
)
from scorecard.rounds.models import (
    MAX_UNIT_COUNT,
    HoleRecord,
    HoleSequenceError,
    StartSegment,
    TeeColor,
    start_hole_for,
    validate_hole_sequence,
)
from scorecard.rounds.stats import RoundStats, compute_round_stats
from scorecard.security import require_api_key
from scorecard.services.stats_summary import StatsSummary, format_sport_stats

router = APIRouter(
    prefix="/api/golf", tags=["golf"], dependencies=[Depends(require_api_key)]
)

logger = logging.getLogger(__name__)


class CourseSearchResponse(BaseModel):
    courses: List[GolfCourse]
    total: int
    query: str


class HolesRequest(BaseModel):
    unit_count: int = Field(
        default=18,
        ge=1,
        le=MAX_UNIT_COUNT,
        validation_alias=AliasChoices("unit_count", "unitCount", "holes"),
    )
    start_segment: StartSegment = Field(
        default=StartSegment.FRONT,
        validation_alias=AliasChoices("start_segment", "startSegment", "startingHole"),
    )
    tee_color: TeeColor = Field(
        default=TeeColor.WHITE,
        validation_alias=AliasChoices("tee_color", "teeColor", "teeBox"),
    )
    course_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("course_id", "courseId")
    )
    existing_holes: List[HoleRecord] = Field(
        default_factory=list,
        validation_alias=AliasChoices("existing_holes", "existingHoles", "holesData"),
    )

    model_config = ConfigDict(populate_by_name=True)


class HolesResponse(BaseModel):
    holes: List[HoleRecord]
    sourced: bool
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

    model_config = ConfigDict(populate_by_name=True)


class StatsRequest(BaseModel):
    holes: List[HoleRecord] = Field(
        default_factory=list,
        validation_alias=AliasChoices("holes", "holesData"),
    )
    handicap: Optional[float] = None

    model_config = ConfigDict(populate_by_name=True)


class StatsResponse(BaseModel):
    stats: Optional[RoundStats] = None


class SummaryRequest(BaseModel):
    payload: Any = None
    sport: Optional[str] = None
    course_name: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("course_name", "courseName")
    )

    model_config = ConfigDict(populate_by_name=True)


class SummaryResponse(BaseModel):
    summary: Optional[StatsSummary] = None


class HighlightsRequest(BaseModel):
    rounds: List[PlayedRound] = Field(default_factory=list)


@router.get("/courses", response_model=CourseSearchResponse)
def search_courses(
    q: str = Query(default=""),
    limit: int = Query(default=8, ge=1, le=50),
    catalog: LocalCourseCatalog = Depends(get_course_catalog),
) -> CourseSearchResponse:
    courses = catalog.lookup_courses(q, limit)
    return CourseSearchResponse(courses=courses, total=len(courses), query=q)


@router.get("/courses/{course_id}", response_model=GolfCourse)
def get_course(
    course_id: str,
    catalog: LocalCourseCatalog = Depends(get_course_catalog),
) -> GolfCourse:
    try:
        return catalog.get_course(course_id)
    except CourseNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="course not found"
        ) from exc


@router.post("/scorecard/holes", response_model=HolesResponse)
def build_holes(
    payload: HolesRequest,
    catalog: LocalCourseCatalog = Depends(get_course_catalog),
) -> HolesResponse:
    if payload.existing_holes:
        try:
            validate_hole_sequence(
                payload.existing_holes,
                start_hole_for(payload.unit_count, payload.start_segment),
                payload.unit_count,
            )
        except HoleSequenceError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc

    existing = payload.existing_holes or generate_synthetic_holes(
        payload.unit_count, payload.start_segment
    )
    if payload.course_id is None:
        return HolesResponse(holes=existing, sourced=False)

    try:
        course = catalog.get_course(payload.course_id)
    except CourseNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="course not found"
        ) from exc

    resolved = resolve_course(
        course,
        payload.tee_color,
        payload.unit_count,
        payload.start_segment,
        existing,
    )
    return HolesResponse(
        holes=resolved.holes,
        sourced=resolved.sourced,
        course_rating=resolved.course_rating,
        course_slope=resolved.course_slope,
    )


@router.post("/scorecard/stats", response_model=StatsResponse)
def round_stats(payload: StatsRequest) -> StatsResponse:
    return StatsResponse(stats=compute_round_stats(payload.holes, payload.handicap))


@router.post("/summary", response_model=SummaryResponse)
def stats_summary(payload: SummaryRequest) -> SummaryResponse:
    summary = format_sport_stats(
        payload.payload, sport=payload.sport, course_name=payload.course_name
    )
    if summary is None:
        logger.debug("nothing to summarize", extra={"sport": payload.sport})
    return SummaryResponse(summary=summary)


@router.post("/highlights", response_model=GolfHighlights)
def golf_highlights(payload: HighlightsRequest) -> GolfHighlights:
    return compute_golf_highlights(payload.rounds)


__all__ = ["router"]
