"""
Results Report - Account Tiering
account_tiering/services/report.py

Summary of a ranked result set: per-tier counts and the top accounts.
"""

from typing import Dict, List, Optional

from account_tiering.config import settings
from account_tiering.models.enumerations import Tier
from account_tiering.models.evaluation import EvaluationResult, ResultsReport


def tier_counts(results: List[EvaluationResult]) -> Dict[Tier, int]:
    """Number of accounts per tier; every tier is present, even when 0."""
    counts = {tier: 0 for tier in Tier}
    for result in results:
        counts[result.score.tier] += 1
    return counts


def build_report(results: List[EvaluationResult], top_limit: Optional[int] = None) -> ResultsReport:
    """
    Args:
        results: Ranked engine output (ascending rank).
        top_limit: Size of the top accounts table; defaults to TOP_ACCOUNTS_LIMIT.
    """
    limit = top_limit if top_limit is not None else settings.TOP_ACCOUNTS_LIMIT
    return ResultsReport(
        total_accounts=len(results),
        tier_counts=tier_counts(results),
        top_accounts=results[:limit],
        results=results,
    )
