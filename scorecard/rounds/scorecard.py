from __future__ import annotations

import logging
import random
from typing import Any, Optional

from scorecard.courses.models import GolfCourse
from scorecard.courses.resolver import (
    generate_synthetic_holes,
    resolve_course,
    retee_holes,
)

from .models import (
    HoleRecord,
    RoundConfiguration,
    RoundEnvironment,
    RoundSubmission,
    TeeColor,
)
from .scoring import apply_hole_update
from .stats import RoundStats, compute_round_stats

logger = logging.getLogger(__name__)

_LAYOUT_FIELDS = frozenset({"unit_count", "start_segment"})


class HoleNotFoundError(KeyError):
    pass


class ScorecardSession:
    """Single-writer owner of a round's hole records.

    Every mutation replaces the hole list and drops the cached statistics, so
    :attr:`stats` always reflects the current holes.
    """

    def __init__(
        self,
        config: RoundConfiguration | None = None,
        *,
        rng: random.Random | None = None,
        jitter: int | None = None,
    ):
        self._config = config or RoundConfiguration()
        self._rng = rng or random.Random()
        self._jitter = jitter
        self._course: GolfCourse | None = None
        self._course_rating: float | None = None
        self._course_slope: int | None = None
        self._holes: list[HoleRecord] = []
        self._stats: RoundStats | None = None
        self._stats_fresh = False
        self._regenerate()

    @property
    def config(self) -> RoundConfiguration:
        return self._config

    @property
    def holes(self) -> tuple[HoleRecord, ...]:
        return tuple(self._holes)

    @property
    def course(self) -> GolfCourse | None:
        return self._course

    @property
    def course_rating(self) -> float | None:
        return self._course_rating

    @property
    def course_slope(self) -> int | None:
        return self._course_slope

    @property
    def sourced(self) -> bool:
        return bool(self._holes) and all(hole.sourced for hole in self._holes)

    @property
    def stats(self) -> Optional[RoundStats]:
        if not self._stats_fresh:
            self._stats = compute_round_stats(
                self._holes, self._config.player_handicap
            )
            self._stats_fresh = True
        return self._stats

    def _set_holes(self, holes: list[HoleRecord]) -> None:
        self._holes = holes
        self._stats_fresh = False

    def _regenerate(self) -> None:
        self._course = None
        self._course_rating = None
        self._course_slope = None
        self._set_holes(
            generate_synthetic_holes(
                self._config.unit_count,
                self._config.start_segment,
                rng=self._rng,
                jitter=self._jitter,
            )
        )

    def configure(self, **changes: Any) -> RoundConfiguration:
        """Replace configuration values.

        Changing the hole count or starting segment rebuilds the card from
        scratch and forgets the selected course. A tee change re-derives
        yardages against the selected course.
        """

        data = self._config.model_dump()
        data.update(changes)
        previous = self._config
        self._config = RoundConfiguration.model_validate(data)

        if any(getattr(previous, name) != getattr(self._config, name) for name in _LAYOUT_FIELDS):
            logger.debug(
                "hole layout changed, regenerating card",
                extra={
                    "unit_count": self._config.unit_count,
                    "start_segment": self._config.start_segment.value,
                },
            )
            self._regenerate()
        elif previous.tee_color != self._config.tee_color:
            self._retee()
        # handicap feeds the net score
        self._stats_fresh = False
        return self._config

    def set_tee(self, tee_color: TeeColor | str) -> None:
        self.configure(tee_color=TeeColor(tee_color))

    def _retee(self) -> None:
        if self._course is None:
            return
        resolved = retee_holes(self._course, self._config.tee_color, self._holes)
        self._course_rating = resolved.course_rating
        self._course_slope = resolved.course_slope
        self._set_holes(resolved.holes)

    def select_course(self, course: GolfCourse) -> bool:
        """Merge ``course`` into the card; returns whether every hole was sourced.

        A course with no holes in the configured range leaves the card and the
        previous selection untouched.
        """

        resolved = resolve_course(
            course,
            self._config.tee_color,
            self._config.unit_count,
            self._config.start_segment,
            self._holes,
        )
        if not resolved.matched:
            return False

        self._course = course
        self._course_rating = resolved.course_rating
        self._course_slope = resolved.course_slope
        self._config = self._config.model_copy(
            update={
                "course_name": course.name,
                "course_location": course.location.label() or None,
            }
        )
        self._set_holes(resolved.holes)
        return resolved.sourced

    def update_hole(self, hole_number: int, /, **changes: Any) -> HoleRecord:
        if "hole_number" in changes:
            raise ValueError("hole numbers cannot be changed")
        for index, hole in enumerate(self._holes):
            if hole.hole_number == hole_number:
                updated = apply_hole_update(hole, **changes)
                holes = list(self._holes)
                holes[index] = updated
                self._set_holes(holes)
                return updated
        raise HoleNotFoundError(hole_number)

    def course_par(self) -> int:
        # partial rounds report the par of the holes actually on the card
        if self._course is not None and len(self._holes) == len(self._course.holes):
            return self._course.total_par
        return sum(hole.par for hole in self._holes)

    def build_submission(self) -> RoundSubmission:
        config = self._config
        outdoor = config.environment is RoundEnvironment.OUTDOOR
        return RoundSubmission(
            date=config.date,
            course_name=config.course_name,
            course_location=config.course_location,
            course_par=self.course_par(),
            course_rating=self._course_rating,
            course_slope=self._course_slope,
            tee_box=config.tee_color,
            holes=config.unit_count,
            round_type=config.environment,
            starting_hole=config.start_segment,
            weather=config.weather if outdoor else None,
            temperature=config.temperature if outdoor else None,
            wind=config.wind if outdoor else None,
            playing_partners=config.playing_partners if outdoor else None,
            handicap=config.player_handicap,
            holes_data=list(self._holes),
        )

    def reset(self) -> None:
        self._config = RoundConfiguration()
        self._regenerate()


__all__ = ["HoleNotFoundError", "ScorecardSession"]
