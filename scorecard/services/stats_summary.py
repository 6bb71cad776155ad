from __future__ import annotations

import math
import re
from typing import Any, List, Mapping, Optional, Sequence

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from scorecard.rounds.stats import RoundStats

SCORE_KEYS = ("gross_score", "grossScore", "total_score", "totalScore", "score", "strokes")
COURSE_KEYS = ("course", "course_name", "courseName")
FIR_KEYS = ("fir_percentage", "firPercentage", "fairway_percentage", "fairwayPercentage")
GIR_KEYS = ("gir_percentage", "girPercentage")
PUTTS_KEYS = ("total_putts", "totalPutts", "putts")
# keys that only a golf round carries next to its score
GOLF_HINT_KEYS = (
    "gross_score",
    "grossScore",
    "par",
    "course_par",
    "coursePar",
    "holes",
    "holes_played",
    "holesPlayed",
    *FIR_KEYS,
    *GIR_KEYS,
    *PUTTS_KEYS,
)

SECONDARY_SEPARATOR = " | "


class StatsSummary(BaseModel):
    primary_line: str = Field(
        validation_alias=AliasChoices("primary_line", "primaryLine"),
        serialization_alias="primaryLine",
    )
    secondary_line: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("secondary_line", "secondaryLine"),
        serialization_alias="secondaryLine",
    )

    model_config = ConfigDict(populate_by_name=True)


def guess_kind(payload: Any) -> str:
    if isinstance(payload, RoundStats):
        return "golf"
    if isinstance(payload, Mapping):
        has_score = first_number(payload, SCORE_KEYS) is not None
        if has_score and any(key in payload for key in GOLF_HINT_KEYS):
            return "golf"
        return "generic"
    return "unknown"


def format_sport_stats(
    payload: Any, *, sport: str | None = None, course_name: str | None = None
) -> Optional[StatsSummary]:
    """Render a two-line summary for a golf round or a generic stats mapping.

    ``None`` means there is nothing worth showing; callers fall back to their
    own placeholder text.
    """

    if isinstance(payload, RoundStats):
        return format_round_stats_summary(payload, course_name=course_name)

    kind = guess_kind(payload)
    if sport is not None and kind != "unknown":
        kind = "golf" if sport.lower() == "golf" else "generic"

    if kind == "golf":
        return format_golf_stats_summary(payload, course_name=course_name)
    if kind == "generic":
        return format_generic_stats_summary(payload)
    return None


def format_round_stats_summary(
    stats: RoundStats | None, *, course_name: str | None = None
) -> Optional[StatsSummary]:
    if stats is None:
        return None
    return _golf_summary(
        score=stats.total_score,
        course=course_name,
        fir=stats.fairway_percentage if stats.fairway_eligible else None,
        gir=stats.gir_percentage if stats.gir_recorded else None,
        putts=stats.total_putts if stats.putts_recorded else None,
    )


def format_golf_stats_summary(
    payload: Mapping[str, Any] | None, *, course_name: str | None = None
) -> Optional[StatsSummary]:
    if not isinstance(payload, Mapping):
        return None
    return _golf_summary(
        score=first_number(payload, SCORE_KEYS),
        course=course_name or get_course_name(payload),
        fir=first_number(payload, FIR_KEYS),
        gir=first_number(payload, GIR_KEYS),
        putts=first_number(payload, PUTTS_KEYS),
    )


def _golf_summary(
    *,
    score: Optional[float],
    course: Optional[str],
    fir: Optional[float],
    gir: Optional[float],
    putts: Optional[float],
) -> Optional[StatsSummary]:
    if score is None:
        return None

    primary = format_number(score)
    if course:
        primary = f"{primary} at {course}"

    parts: List[str] = []
    if fir is not None:
        parts.append(f"FIR {format_percentage(fir)}")
    if gir is not None:
        parts.append(f"GIR {format_percentage(gir)}")
    if putts is not None:
        parts.append(f"{format_number(putts)} putts")

    return StatsSummary(
        primary_line=primary,
        secondary_line=SECONDARY_SEPARATOR.join(parts) if parts else None,
    )


def format_generic_stats_summary(
    stats: Mapping[str, Any] | None,
) -> Optional[StatsSummary]:
    if not isinstance(stats, Mapping):
        return None

    lines: List[str] = []
    for key, value in stats.items():
        rendered = render_scalar(value)
        if rendered is None:
            continue
        lines.append(f"{humanize_key(str(key))}: {rendered}")
        if len(lines) == 2:
            break

    if not lines:
        return None
    return StatsSummary(
        primary_line=lines[0],
        secondary_line=lines[1] if len(lines) > 1 else None,
    )


def humanize_key(key: str) -> str:
    """``fastestLap`` and ``fastest_lap`` both become ``Fastest Lap``."""

    spaced = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", " ", key.replace("_", " "))
    return " ".join(word[:1].upper() + word[1:] for word in spaced.split())


def render_scalar(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, (int, float)):
        return format_number(value) if math.isfinite(value) else None
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def get_course_name(record: Mapping[str, Any]) -> Optional[str]:
    for key in COURSE_KEYS:
        direct = record.get(key)
        if isinstance(direct, str) and direct.strip():
            return direct.strip()
        if isinstance(direct, Mapping):
            maybe_name = direct.get("name")
            if isinstance(maybe_name, str) and maybe_name.strip():
                return maybe_name.strip()
    return None


def get_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)) and math.isfinite(value):
        return float(value)
    if isinstance(value, str) and value.strip():
        try:
            numeric = float(value)
        except ValueError:
            return None
        if math.isfinite(numeric):
            return numeric
    return None


def first_number(record: Mapping[str, Any], keys: Sequence[str]) -> Optional[float]:
    for key in keys:
        numeric = get_number(record.get(key))
        if numeric is not None:
            return numeric
    return None


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


def format_percentage(value: float) -> str:
    return f"{int(math.floor(value + 0.5))}%"


def format_putts_per_hole(stats: RoundStats) -> str:
    return f"{stats.putts_per_hole:.1f}"


__all__ = [
    "StatsSummary",
    "format_generic_stats_summary",
    "format_golf_stats_summary",
    "format_putts_per_hole",
    "format_round_stats_summary",
    "format_sport_stats",
    "guess_kind",
]
