"""Points awarded for a completion, by absolute rank."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_SCALE = Decimal("0.001")


def score(rank: int, percent: float, min_percent: float) -> float:
    """Points for a ``percent`` completion of the level at ``rank``.

    Levels past #150 award nothing, and levels past #75 only award points for
    a full completion. Partial completions lose a third of their value.
    """
    if rank > 150:
        return 0.0
    if rank > 75 and percent < 100:
        return 0.0

    value = (-24.9975 * pow(rank - 1, 0.4) + 200) * (
        (percent - (min_percent - 1)) / (100 - (min_percent - 1))
    )
    value = max(0.0, value)
    if percent != 100:
        return round_score(value - value / 3)
    return max(round_score(value), 0.0)


def round_score(value: float) -> float:
    """Round half-up to three decimals using the shortest decimal form of ``value``."""
    return float(Decimal(repr(value)).quantize(_SCALE, rounding=ROUND_HALF_UP))
