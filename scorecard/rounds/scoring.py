"""Per-hole scoring classification and green-in-regulation derivation."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .models import HoleRecord

_GIR_INPUTS = frozenset({"score", "putts", "par"})


class ScoreCategory(str, Enum):
    EAGLE = "eagle"
    BIRDIE = "birdie"
    PAR = "par"
    BOGEY = "bogey"
    DOUBLE_PLUS = "double_plus"


class ScoringBreakdown(BaseModel):
    eagles: int = 0
    birdies: int = 0
    pars: int = 0
    bogeys: int = 0
    double_plus: int = Field(
        default=0,
        validation_alias=AliasChoices("double_plus", "doublePlus"),
        serialization_alias="doublePlus",
    )

    model_config = ConfigDict(populate_by_name=True)


_BREAKDOWN_FIELDS: dict[ScoreCategory, str] = {
    ScoreCategory.EAGLE: "eagles",
    ScoreCategory.BIRDIE: "birdies",
    ScoreCategory.PAR: "pars",
    ScoreCategory.BOGEY: "bogeys",
    ScoreCategory.DOUBLE_PLUS: "double_plus",
}


def classify_score(score: int, par: int) -> ScoreCategory:
    diff = score - par
    # albatross and better share the eagle bucket
    if diff <= -2:
        return ScoreCategory.EAGLE
    if diff == -1:
        return ScoreCategory.BIRDIE
    if diff == 0:
        return ScoreCategory.PAR
    if diff == 1:
        return ScoreCategory.BOGEY
    return ScoreCategory.DOUBLE_PLUS


def tally_scoring(holes: Iterable[HoleRecord]) -> ScoringBreakdown:
    counts = {name: 0 for name in _BREAKDOWN_FIELDS.values()}
    for hole in holes:
        if hole.score is None:
            continue
        counts[_BREAKDOWN_FIELDS[classify_score(hole.score, hole.par)]] += 1
    return ScoringBreakdown(**counts)


def derive_gir(score: int, putts: int, par: int) -> bool:
    """Green reached in ``par - 2`` strokes or fewer, assuming two putts."""

    return (score - putts) <= (par - 2)


def effective_gir(hole: HoleRecord) -> Optional[bool]:
    if hole.score is not None and hole.putts is not None:
        return derive_gir(hole.score, hole.putts, hole.par)
    return hole.green_in_regulation


def apply_hole_update(hole: HoleRecord, **changes: Any) -> HoleRecord:
    """Return a validated copy of ``hole`` with ``changes`` applied.

    Changing ``score``, ``putts`` or ``par`` re-derives GIR once score and
    putts are both known. Otherwise the previous GIR value is kept as-is.
    """

    unknown = set(changes) - set(HoleRecord.model_fields)
    if unknown:
        raise TypeError(f"unknown hole fields: {', '.join(sorted(unknown))}")

    data = hole.model_dump()
    data.update(changes)
    updated = HoleRecord.model_validate(data)

    if _GIR_INPUTS & set(changes):
        if updated.score is not None and updated.putts is not None:
            gir = derive_gir(updated.score, updated.putts, updated.par)
            updated = updated.model_copy(update={"green_in_regulation": gir})
    return updated


__all__ = [
    "ScoreCategory",
    "ScoringBreakdown",
    "apply_hole_update",
    "classify_score",
    "derive_gir",
    "effective_gir",
    "tally_scoring",
]
