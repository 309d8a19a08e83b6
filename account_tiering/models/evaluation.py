from pydantic import BaseModel, Field
from uuid import UUID
from typing import Dict, List

from account_tiering.models.account import Account
from account_tiering.models.answer import AccountAnswer
from account_tiering.models.enumerations import Tier
from account_tiering.models.question import Question


class AccountScore(BaseModel):
    """
    Derived score of one account. Recomputed on every input change, never persisted.
    """

    account_id: UUID
    total_score: float = Field(..., description="Sum of earned question weights")
    max_score: float = Field(..., description="Sum of all question weights")
    percentage: int = Field(..., ge=0, le=100, description="round(100 * total / max), 0 when max <= 0")
    tier: Tier
    rank: int = Field(default=0, ge=0, description="1-based position after sorting; 0 until ranked")


class EvaluationResult(BaseModel):
    """
    Output unit of the scoring engine, one per account.
    """

    account: Account
    score: AccountScore
    answers: List[AccountAnswer] = Field(default_factory=list)


class EvaluateRequest(BaseModel):
    """
    Stateless engine input.
    """

    accounts: List[Account] = Field(default_factory=list)
    questions: List[Question] = Field(default_factory=list)
    answers: List[AccountAnswer] = Field(default_factory=list)


class CompletionStatus(BaseModel):
    """
    How many (account, question) pairs have an answer.
    """

    answered: int
    total: int

    @property
    def is_complete(self) -> bool:
        return self.total > 0 and self.answered == self.total


class ResultsReport(BaseModel):
    """
    Results view: tier summary, top accounts and the full ranking.
    """

    total_accounts: int
    tier_counts: Dict[Tier, int]
    top_accounts: List[EvaluationResult]
    results: List[EvaluationResult]
