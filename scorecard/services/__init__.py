"""Service layer exports."""

from .stats_summary import StatsSummary, format_sport_stats

__all__ = ["StatsSummary", "format_sport_stats"]
