from __future__ import annotations

from datetime import date as date_type
from enum import Enum
from typing import Iterable, List, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

VALID_PARS = frozenset({3, 4, 5})
MAX_UNIT_COUNT = 36


class TeeColor(str, Enum):
    BLACK = "black"
    BLUE = "blue"
    WHITE = "white"
    GOLD = "gold"
    RED = "red"


class FairwayResult(str, Enum):
    HIT = "hit"
    LEFT = "left"
    RIGHT = "right"
    NOT_APPLICABLE = "na"


class StartSegment(str, Enum):
    FRONT = "front"
    BACK = "back"


class RoundEnvironment(str, Enum):
    OUTDOOR = "outdoor"
    INDOOR = "indoor"


class HoleSequenceError(ValueError):
    """Raised when hole numbers do not form the expected contiguous run."""


class HoleRecord(BaseModel):
    hole_number: int = Field(
        ge=1,
        validation_alias=AliasChoices("hole_number", "holeNumber", "hole"),
        serialization_alias="holeNumber",
    )
    par: int
    yardage: Optional[int] = Field(default=None, ge=1)
    score: Optional[int] = Field(
        default=None,
        ge=1,
        validation_alias=AliasChoices("score", "strokes"),
    )
    putts: Optional[int] = Field(default=None, ge=0)
    fairway_result: Optional[FairwayResult] = Field(
        default=None,
        validation_alias=AliasChoices("fairway_result", "fairwayResult", "fairway"),
        serialization_alias="fairwayResult",
    )
    green_in_regulation: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices(
            "green_in_regulation", "greenInRegulation", "gir"
        ),
        serialization_alias="greenInRegulation",
    )
    difficulty_rank: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("difficulty_rank", "difficultyRank", "handicap"),
        serialization_alias="difficultyRank",
    )
    notes: Optional[str] = None
    sourced: bool = False

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("par")
    @classmethod
    def _check_par(cls, value: int) -> int:
        if value not in VALID_PARS:
            raise ValueError(f"par must be one of 3, 4 or 5, got {value}")
        return value

    @model_validator(mode="after")
    def _check_fairway(self) -> "HoleRecord":
        if (
            self.par == 3
            and self.fairway_result is not None
            and self.fairway_result is not FairwayResult.NOT_APPLICABLE
        ):
            raise ValueError("par-3 holes only accept the 'na' fairway result")
        return self

    @property
    def played(self) -> bool:
        return self.score is not None


class RoundConfiguration(BaseModel):
    date: date_type = Field(default_factory=date_type.today)
    course_name: str = Field(
        default="",
        validation_alias=AliasChoices("course_name", "courseName"),
        serialization_alias="courseName",
    )
    course_location: str | None = Field(
        default=None,
        validation_alias=AliasChoices("course_location", "courseLocation"),
        serialization_alias="courseLocation",
    )
    tee_color: TeeColor = Field(
        default=TeeColor.WHITE,
        validation_alias=AliasChoices("tee_color", "teeColor", "teeBox"),
        serialization_alias="teeColor",
    )
    unit_count: int = Field(
        default=18,
        ge=1,
        le=MAX_UNIT_COUNT,
        validation_alias=AliasChoices("unit_count", "unitCount", "holes"),
        serialization_alias="unitCount",
    )
    start_segment: StartSegment = Field(
        default=StartSegment.FRONT,
        validation_alias=AliasChoices("start_segment", "startSegment", "startingHole"),
        serialization_alias="startSegment",
    )
    environment: RoundEnvironment = Field(
        default=RoundEnvironment.OUTDOOR,
        validation_alias=AliasChoices("environment", "roundType"),
    )
    player_handicap: float | None = Field(
        default=None,
        validation_alias=AliasChoices("player_handicap", "playerHandicap", "handicap"),
        serialization_alias="playerHandicap",
    )
    weather: str | None = None
    temperature: float | None = None
    wind: str | None = None
    playing_partners: str | None = Field(
        default=None,
        validation_alias=AliasChoices("playing_partners", "playingPartners"),
        serialization_alias="playingPartners",
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @property
    def start_hole(self) -> int:
        return start_hole_for(self.unit_count, self.start_segment)


class RoundSubmission(BaseModel):
    """Payload handed to the post-creation API once a round is finished."""

    date: date_type
    course_name: str = Field(serialization_alias="courseName")
    course_location: str | None = Field(
        default=None, serialization_alias="courseLocation"
    )
    course_par: int = Field(serialization_alias="coursePar")
    course_rating: float | None = Field(
        default=None, serialization_alias="courseRating"
    )
    course_slope: int | None = Field(default=None, serialization_alias="courseSlope")
    tee_box: TeeColor = Field(serialization_alias="teeBox")
    holes: int
    round_type: RoundEnvironment = Field(serialization_alias="roundType")
    starting_hole: StartSegment = Field(serialization_alias="startingHole")
    weather: str | None = None
    temperature: float | None = None
    wind: str | None = None
    playing_partners: str | None = Field(
        default=None, serialization_alias="playingPartners"
    )
    handicap: float | None = None
    holes_data: List[HoleRecord] = Field(
        default_factory=list, serialization_alias="holesData"
    )

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def start_hole_for(unit_count: int, start_segment: StartSegment | str) -> int:
    if unit_count == 9 and StartSegment(start_segment) is StartSegment.BACK:
        return 10
    return 1


def validate_hole_sequence(
    holes: Iterable[HoleRecord], start_hole: int, unit_count: int
) -> None:
    numbers = [hole.hole_number for hole in holes]
    expected = list(range(start_hole, start_hole + unit_count))
    if numbers != expected:
        raise HoleSequenceError(
            f"expected holes {start_hole}..{start_hole + unit_count - 1}, got {numbers}"
        )


__all__ = [
    "FairwayResult",
    "HoleRecord",
    "HoleSequenceError",
    "MAX_UNIT_COUNT",
    "RoundConfiguration",
    "RoundEnvironment",
    "RoundSubmission",
    "StartSegment",
    "TeeColor",
    "VALID_PARS",
    "start_hole_for",
    "validate_hole_sequence",
]
