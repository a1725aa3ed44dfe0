"""Reputation temperature.

A user's "warmth" starts at body temperature and moves a hundredth of a
degree per net vote received. There is no floor or ceiling: a user buried
in downvotes can legitimately drop below freezing.
"""

from decimal import ROUND_HALF_UP, Decimal

BASELINE_TEMPERATURE = Decimal("36.5")
DEGREES_PER_POINT = Decimal("0.01")

_ONE_DECIMAL = Decimal("0.1")


def temperature_for(net_score: int) -> float:
    """Temperature for a net score received, rounded to one decimal.

    Decimal arithmetic keeps e.g. 36.5 + 0.01 * 50 exactly 37.0.

    Args:
        net_score: Upvotes minus downvotes received across owned content

    Returns:
        Temperature in degrees
    """
    raw = BASELINE_TEMPERATURE + DEGREES_PER_POINT * net_score
    return float(raw.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))
