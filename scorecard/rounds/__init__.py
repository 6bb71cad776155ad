from .models import FairwayResult, HoleRecord, RoundConfiguration, TeeColor
from .scoring import ScoreCategory, apply_hole_update, classify_score, derive_gir
from .stats import RoundStats, compute_round_stats, format_differential

__all__ = [
    "FairwayResult",
    "HoleRecord",
    "RoundConfiguration",
    "RoundStats",
    "ScoreCategory",
    "TeeColor",
    "apply_hole_update",
    "classify_score",
    "compute_round_stats",
    "derive_gir",
    "format_differential",
]
