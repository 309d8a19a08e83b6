"""
Tier Assignment
account_tiering/scoring/tiering.py

Fixed thresholds (percentage lower bounds, best tier first):
    A  >= 80
    B  >= 60
    C  >= 40
    D  otherwise
"""

from typing import List, Tuple

from account_tiering.models.enumerations import Tier

TIER_THRESHOLDS: List[Tuple[int, Tier]] = [
    (80, Tier.A),
    (60, Tier.B),
    (40, Tier.C),
]


def tier_for_percentage(percentage: int) -> Tier:
    """Map a percentage score to its tier."""
    for lower_bound, tier in TIER_THRESHOLDS:
        if percentage >= lower_bound:
            return tier
    return Tier.D
