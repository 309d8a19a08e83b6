"""
scoring/: Account Scoring & Tiering Engine

Modules:
    utils.py    - Half-up rounding and percentage helpers
    tiering.py  - Fixed A/B/C/D tier thresholds
    engine.py   - ScoringEngine: score, tier and rank accounts
"""

from account_tiering.scoring.engine import AnswerIndex, ScoringEngine, evaluate, question_score
from account_tiering.scoring.tiering import TIER_THRESHOLDS, tier_for_percentage

__all__ = [
    "AnswerIndex",
    "ScoringEngine",
    "evaluate",
    "question_score",
    "TIER_THRESHOLDS",
    "tier_for_percentage",
]
