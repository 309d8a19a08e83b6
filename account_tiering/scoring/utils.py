"""
Decimal Utilities
account_tiering/scoring/utils.py

Precision-safe rounding for percentage scores.
"""

from decimal import Decimal, ROUND_HALF_UP


def clamp(
    value: Decimal,
    min_val: Decimal = Decimal("0"),
    max_val: Decimal = Decimal("100"),
) -> Decimal:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))

def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (12.5 -> 13)."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

def percentage(total_score: float, max_score: float) -> int:
    """
    Percentage of max_score earned, as an integer in [0, 100].

    Formula: round(total / max × 100), with max <= 0 yielding 0.
    """
    if max_score <= 0:
        return 0
    raw = round_half_up(total_score / max_score * 100)
    return int(clamp(Decimal(raw)))
