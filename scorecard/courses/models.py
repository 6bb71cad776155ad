from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from scorecard.rounds.models import TeeColor


class CourseLocation(BaseModel):
    city: str = ""
    state: str = ""
    country: str = ""

    def label(self) -> str:
        return ", ".join(part for part in (self.city, self.state) if part)


class CourseHole(BaseModel):
    number: int = Field(ge=1)
    par: int
    yardage: Dict[TeeColor, int] = Field(default_factory=dict)
    handicap: Optional[int] = None
    description: Optional[str] = None


class GolfCourse(BaseModel):
    id: str
    name: str
    location: CourseLocation = Field(default_factory=CourseLocation)
    designer: Optional[str] = None
    year_opened: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("year_opened", "yearOpened"),
        serialization_alias="yearOpened",
    )
    course_rating: Dict[TeeColor, float] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("course_rating", "courseRating"),
        serialization_alias="courseRating",
    )
    slope_rating: Dict[TeeColor, int] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("slope_rating", "slopeRating"),
        serialization_alias="slopeRating",
    )
    total_par: int = Field(
        default=72,
        validation_alias=AliasChoices("total_par", "totalPar"),
        serialization_alias="totalPar",
    )
    holes: List[CourseHole] = Field(default_factory=list)
    description: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)

    def hole(self, number: int) -> CourseHole | None:
        return next((hole for hole in self.holes if hole.number == number), None)

    def rating_for(self, tee: TeeColor | str) -> tuple[float | None, int | None]:
        tee = TeeColor(tee)
        return self.course_rating.get(tee), self.slope_rating.get(tee)


__all__ = ["CourseHole", "CourseLocation", "GolfCourse"]
