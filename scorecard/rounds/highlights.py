from __future__ import annotations

from datetime import date as date_type
from typing import List, Optional, Sequence

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .models import RoundEnvironment

FULL_ROUND_HOLES = 18
RECENT_FORM_ROUNDS = 5
RECENT_ROUNDS_LIMIT = 10


class PlayedRound(BaseModel):
    """A finished round as stored against a profile."""

    id: Optional[str] = None
    date: date_type
    course: Optional[str] = None
    course_location: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("course_location", "courseLocation"),
        serialization_alias="courseLocation",
    )
    holes: int = FULL_ROUND_HOLES
    par: Optional[int] = None
    gross_score: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("gross_score", "grossScore"),
        serialization_alias="grossScore",
    )
    total_score: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("total_score", "totalScore"),
        serialization_alias="totalScore",
    )
    fir_percentage: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("fir_percentage", "firPercentage"),
        serialization_alias="firPercentage",
    )
    gir_percentage: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("gir_percentage", "girPercentage"),
        serialization_alias="girPercentage",
    )
    total_putts: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("total_putts", "totalPutts"),
        serialization_alias="totalPutts",
    )
    round_type: Optional[RoundEnvironment] = Field(
        default=None,
        validation_alias=AliasChoices("round_type", "roundType"),
        serialization_alias="roundType",
    )
    is_complete: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("is_complete", "isComplete"),
        serialization_alias="isComplete",
    )

    model_config = ConfigDict(populate_by_name=True)

    @property
    def score(self) -> Optional[int]:
        # gross score wins; older rows only carry total_score
        return self.gross_score or self.total_score


class Highlight(BaseModel):
    label: str
    value: Optional[str] = None


class RecentRound(BaseModel):
    id: Optional[str] = None
    date: date_type
    course: Optional[str] = None
    course_location: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("course_location", "courseLocation"),
        serialization_alias="courseLocation",
    )
    score: Optional[int] = None
    par: Optional[int] = None
    gir: Optional[float] = None
    holes: int
    round_type: Optional[RoundEnvironment] = Field(
        default=None,
        validation_alias=AliasChoices("round_type", "roundType"),
        serialization_alias="roundType",
    )
    is_complete: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("is_complete", "isComplete"),
        serialization_alias="isComplete",
    )

    model_config = ConfigDict(populate_by_name=True)


class GolfHighlights(BaseModel):
    highlights: List[Highlight]
    recent_rounds: List[RecentRound] = Field(
        validation_alias=AliasChoices("recent_rounds", "recentRounds"),
        serialization_alias="recentRounds",
    )
    total_rounds: int = Field(
        validation_alias=AliasChoices("total_rounds", "totalRounds"),
        serialization_alias="totalRounds",
    )
    completed_rounds: int = Field(
        validation_alias=AliasChoices("completed_rounds", "completedRounds"),
        serialization_alias="completedRounds",
    )

    model_config = ConfigDict(populate_by_name=True)


def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10**digits
    return int(value * factor + 0.5) / factor


def _mean(values: Sequence[float]) -> Optional[float]:
    if not values:
        return None
    return sum(values) / len(values)


def _format_decimal(value: Optional[float]) -> Optional[str]:
    if value is None:
        return None
    rounded = _round_half_up(value, 1)
    return str(int(rounded)) if rounded.is_integer() else str(rounded)


def _format_percent(value: Optional[float]) -> Optional[str]:
    if value is None:
        return None
    return f"{int(_round_half_up(value))}%"


def compute_golf_highlights(rounds: Sequence[PlayedRound]) -> GolfHighlights:
    ordered = sorted(rounds, key=lambda played: played.date, reverse=True)
    completed = [
        played
        for played in ordered
        if played.score and played.holes == FULL_ROUND_HOLES
    ]

    scores = [played.score for played in completed if played.score is not None]
    last_five = _mean(scores[:RECENT_FORM_ROUNDS])
    best = min(scores) if scores else None

    avg_fir = _mean(
        [p.fir_percentage for p in completed if p.fir_percentage is not None]
    )
    avg_gir = _mean(
        [p.gir_percentage for p in completed if p.gir_percentage is not None]
    )
    avg_putts = _mean([p.total_putts for p in completed if p.total_putts is not None])

    highlights = [
        Highlight(label="Last 5 Avg", value=_format_decimal(last_five)),
        Highlight(label="Best 18", value=str(best) if best is not None else None),
        Highlight(label="FIR%", value=_format_percent(avg_fir)),
        Highlight(label="GIR%", value=_format_percent(avg_gir)),
        Highlight(label="Putts/Round", value=_format_decimal(avg_putts)),
        Highlight(
            label="Rounds", value=str(len(completed)) if completed else None
        ),
    ]

    recent = [
        RecentRound(
            id=played.id,
            date=played.date,
            course=played.course,
            course_location=played.course_location,
            score=played.score,
            par=played.par,
            gir=played.gir_percentage,
            holes=played.holes,
            round_type=played.round_type,
            is_complete=played.is_complete,
        )
        for played in ordered[:RECENT_ROUNDS_LIMIT]
    ]

    return GolfHighlights(
        highlights=highlights,
        recent_rounds=recent,
        total_rounds=len(ordered),
        completed_rounds=len(completed),
    )


__all__ = [
    "GolfHighlights",
    "Highlight",
    "PlayedRound",
    "RecentRound",
    "compute_golf_highlights",
]
