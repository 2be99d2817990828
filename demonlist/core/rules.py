"""Rank bands and qualification tiers.

Every function here is a pure function of the absolute rank, recomputed on
each call because the rank follows the mutable selection.
"""

from __future__ import annotations

from typing import Callable, Optional

from demonlist.core.levels import Level
from demonlist.core.score import score as default_score

MAIN_LIST_CUTOFF = 75
NUMBERED_CUTOFF = 150
FULL_COMPLETION = 100

ScoreFunction = Callable[[int, float, float], float]


def rank_label(rank: int) -> str:
    if rank <= NUMBERED_CUTOFF:
        return f"#{rank}"
    return "Legacy"


def accepts_records(rank: int) -> bool:
    return rank <= NUMBERED_CUTOFF


def qualification_percent(rank: int, percent_to_qualify: int) -> Optional[int]:
    """Minimum percent a new record needs, or None when the level takes no records."""
    if rank <= MAIN_LIST_CUTOFF:
        return percent_to_qualify
    if rank <= NUMBERED_CUTOFF:
        return FULL_COMPLETION
    return None


def qualification_text(rank: int, percent_to_qualify: int) -> str:
    required = qualification_percent(rank, percent_to_qualify)
    if required is None:
        return "This level does not accept new records."
    return f"{required}% or better to qualify"


def points_for(rank: int, level: Level, score: ScoreFunction = default_score) -> float:
    """Points for a full completion of ``level`` when it sits at ``rank``."""
    return score(rank, FULL_COMPLETION, level.percent_to_qualify)
