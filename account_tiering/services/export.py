"""
CSV Export - Account Tiering
account_tiering/services/export.py

Rank,Company,Industry,Score,Percentage,Tier
1,Acme Corp,Technology,10/10,100%,A

Cells are joined with "," and rows with "\\n" without quoting and without
a trailing newline, so files match earlier exports byte-for-byte.
"""

from typing import List

from account_tiering.models.evaluation import EvaluationResult

CSV_HEADER = ["Rank", "Company", "Industry", "Score", "Percentage", "Tier"]


def format_number(value: float) -> str:
    """Render integral floats without a decimal point (10.0 -> '10')."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def result_to_row(result: EvaluationResult) -> List[str]:
    score = result.score
    return [
        str(score.rank),
        result.account.name,
        result.account.industry,
        f"{format_number(score.total_score)}/{format_number(score.max_score)}",
        f"{score.percentage}%",
        score.tier.value,
    ]


def export_results_csv(results: List[EvaluationResult]) -> str:
    """Serialize ranked results in ascending rank order."""
    ordered = sorted(results, key=lambda r: r.score.rank)
    rows = [CSV_HEADER] + [result_to_row(result) for result in ordered]
    return "\n".join(",".join(row) for row in rows)
