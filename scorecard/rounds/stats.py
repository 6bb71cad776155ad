from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .models import FairwayResult, HoleRecord
from .scoring import effective_gir, tally_scoring

logger = logging.getLogger(__name__)


class RoundStats(BaseModel):
    holes_played: int = Field(
        validation_alias=AliasChoices("holes_played", "holesPlayed"),
        serialization_alias="holesPlayed",
    )
    total_score: int = Field(
        validation_alias=AliasChoices("total_score", "totalScore"),
        serialization_alias="totalScore",
    )
    total_par: int = Field(
        validation_alias=AliasChoices("total_par", "totalPar"),
        serialization_alias="totalPar",
    )
    to_par: int = Field(
        validation_alias=AliasChoices("to_par", "toPar"), serialization_alias="toPar"
    )
    differential: str
    net_score: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("net_score", "netScore"),
        serialization_alias="netScore",
    )

    total_putts: int = Field(
        validation_alias=AliasChoices("total_putts", "totalPutts"),
        serialization_alias="totalPutts",
    )
    putts_per_hole: float = Field(
        validation_alias=AliasChoices("putts_per_hole", "puttsPerHole"),
        serialization_alias="puttsPerHole",
    )
    putts_recorded: int = Field(
        default=0,
        validation_alias=AliasChoices("putts_recorded", "puttsRecorded"),
        serialization_alias="puttsRecorded",
    )

    fairways_hit: int = Field(
        validation_alias=AliasChoices("fairways_hit", "fairwaysHit"),
        serialization_alias="fairwaysHit",
    )
    fairway_eligible: int = Field(
        validation_alias=AliasChoices("fairway_eligible", "fairwayEligible"),
        serialization_alias="fairwayEligible",
    )
    fairway_percentage: int = Field(
        validation_alias=AliasChoices("fairway_percentage", "fairwayPercentage"),
        serialization_alias="fairwayPercentage",
    )

    greens_in_regulation: int = Field(
        validation_alias=AliasChoices("greens_in_regulation", "greensInRegulation"),
        serialization_alias="greensInRegulation",
    )
    gir_percentage: int = Field(
        validation_alias=AliasChoices("gir_percentage", "girPercentage"),
        serialization_alias="girPercentage",
    )
    gir_recorded: int = Field(
        default=0,
        validation_alias=AliasChoices("gir_recorded", "girRecorded"),
        serialization_alias="girRecorded",
    )

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


def format_differential(value: int) -> str:
    """Render a to-par value with an explicit sign; zero renders as ``+0``."""

    return f"+{value}" if value >= 0 else str(value)


def _percentage(part: int, whole: int) -> int:
    if not whole:
        return 0
    # half-up so that 12.5% displays as 13%
    return int(math.floor(part / whole * 100 + 0.5))


def compute_round_stats(
    holes: Sequence[HoleRecord], handicap: float | None = None
) -> RoundStats | None:
    played = [hole for hole in holes if hole.score is not None]
    if not played:
        return None

    total_score = sum(hole.score for hole in played)
    total_par = sum(hole.par for hole in played)
    to_par = total_score - total_par
    total_putts = sum(hole.putts or 0 for hole in played)

    fairway_holes = [hole for hole in played if hole.par > 3]
    fairways_hit = sum(
        1 for hole in fairway_holes if hole.fairway_result is FairwayResult.HIT
    )

    gir_values = [effective_gir(hole) for hole in played]
    greens = sum(1 for value in gir_values if value is True)
    scoring = tally_scoring(played)

    net_score = total_score - handicap if handicap is not None else None

    logger.debug(
        "computed round stats",
        extra={"holes_played": len(played), "total_score": total_score},
    )

    return RoundStats(
        holes_played=len(played),
        total_score=total_score,
        total_par=total_par,
        to_par=to_par,
        differential=format_differential(to_par),
        net_score=net_score,
        total_putts=total_putts,
        putts_per_hole=total_putts / len(played),
        putts_recorded=sum(1 for hole in played if hole.putts is not None),
        fairways_hit=fairways_hit,
        fairway_eligible=len(fairway_holes),
        fairway_percentage=_percentage(fairways_hit, len(fairway_holes)),
        greens_in_regulation=greens,
        gir_percentage=_percentage(greens, len(played)),
        gir_recorded=sum(1 for value in gir_values if value is not None),
        eagles=scoring.eagles,
        birdies=scoring.birdies,
        pars=scoring.pars,
        bogeys=scoring.bogeys,
        double_plus=scoring.double_plus,
    )


__all__ = ["RoundStats", "compute_round_stats", "format_differential"]
