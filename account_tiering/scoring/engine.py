# account_tiering/scoring/engine.py
"""
Account Scoring Engine
----------------------
Turns (account, question, answer) triples into ranked, tiered results.

Per account:
    max_score   = Σ question.weight                 (answered or not)
    total_score = Σ question.weight for every question whose answer qualifies
    percentage  = round(100 × total_score / max_score), 0 when max_score <= 0
    tier        = A (>= 80) | B (>= 60) | C (>= 40) | D

Qualifying answers by question type:
    boolean          the answer is the boolean True
    number           the answer is > 0
    multiple_choice  any non-empty option is selected (all options score alike)

Results are stable-sorted by percentage descending (ties keep input order)
and ranked 1..N without shared ranks.
"""
import structlog
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
from uuid import UUID

from account_tiering.models.account import Account
from account_tiering.models.answer import AccountAnswer
from account_tiering.models.enumerations import QuestionType
from account_tiering.models.evaluation import AccountScore, EvaluationResult
from account_tiering.models.question import Question
from account_tiering.scoring.tiering import tier_for_percentage
from account_tiering.scoring.utils import percentage as percentage_of

logger = structlog.get_logger(__name__)

AnswerKey = Tuple[UUID, UUID]


class AnswerIndex:
    """Answers keyed by (account_id, question_id) for O(1) lookup."""

    def __init__(self, answers: Iterable[AccountAnswer]):
        self._by_key: Dict[AnswerKey, AccountAnswer] = {}
        self._by_account: Dict[UUID, List[AccountAnswer]] = {}
        for answer in answers:
            # first answer wins if a pair is duplicated
            self._by_key.setdefault((answer.account_id, answer.question_id), answer)
            self._by_account.setdefault(answer.account_id, []).append(answer)

    def get(self, account_id: UUID, question_id: UUID) -> Optional[AccountAnswer]:
        return self._by_key.get((account_id, question_id))

    def for_account(self, account_id: UUID) -> List[AccountAnswer]:
        return list(self._by_account.get(account_id, []))

    def __len__(self) -> int:
        return len(self._by_key)


def _qualifies(question_type: QuestionType, value) -> bool:
    if question_type == QuestionType.BOOLEAN:
        return value is True
    if question_type == QuestionType.NUMBER:
        return value > 0
    # multiple_choice
    return bool(value)


def question_score(question: Question, answer: Optional[AccountAnswer]) -> float:
    """
    Points earned on one question: the full weight or nothing.

    A missing answer earns 0. So does an answer recorded under a different
    type than the question (e.g. the string "true" for a boolean question).
    """
    if answer is None:
        return 0.0

    if answer.answer.kind != question.type.value:
        logger.warning(
            "answer_type_mismatch",
            question_id=str(question.id),
            account_id=str(answer.account_id),
            question_type=question.type.value,
            answer_kind=answer.answer.kind,
        )
        return 0.0

    return question.weight if _qualifies(question.type, answer.value) else 0.0


class ScoringEngine:
    """Score, tier and rank accounts against weighted questions."""

    def evaluate(
        self,
        accounts: Sequence[Account],
        questions: Sequence[Question],
        answers: Sequence[AccountAnswer],
    ) -> List[EvaluationResult]:
        """
        Args:
            accounts: Accounts to score; their order breaks percentage ties.
            questions: Evaluation questions. May be empty (every account gets 0% / D).
            answers: Recorded answers. Answers for unknown accounts or
                     questions are never looked up and so are ignored.

        Returns:
            One EvaluationResult per account, sorted by percentage descending
            with rank set to the 1-based position.
        """
        index = AnswerIndex(answers)
        max_score = sum(q.weight for q in questions)

        non_positive = [str(q.id) for q in questions if q.weight <= 0]
        if non_positive:
            logger.warning(
                "non_positive_question_weight",
                question_ids=non_positive,
                max_score=max_score,
            )

        results = [
            self._score_account(account, questions, index, max_score)
            for account in accounts
        ]

        # sorted() is stable: equal percentages keep their input order
        results = sorted(results, key=lambda r: -r.score.percentage)
        for position, result in enumerate(results):
            result.score.rank = position + 1

        logger.info(
            "evaluation_completed",
            accounts=len(accounts),
            questions=len(questions),
            answers=len(answers),
            max_score=max_score,
        )
        return results

    def _score_account(
        self,
        account: Account,
        questions: Sequence[Question],
        index: AnswerIndex,
        max_score: float,
    ) -> EvaluationResult:
        total_score = 0.0
        for question in questions:
            total_score += question_score(question, index.get(account.id, question.id))

        pct = percentage_of(total_score, max_score)
        if max_score > 0 and not 0 <= total_score <= max_score:
            logger.warning(
                "percentage_clamped",
                account_id=str(account.id),
                total_score=total_score,
                max_score=max_score,
            )

        score = AccountScore(
            account_id=account.id,
            total_score=total_score,
            max_score=max_score,
            percentage=pct,
            tier=tier_for_percentage(pct),
            rank=0,
        )

        logger.debug(
            "account_scored",
            account_id=str(account.id),
            total_score=total_score,
            max_score=max_score,
            percentage=pct,
            tier=score.tier.value,
        )

        return EvaluationResult(
            account=account,
            score=score,
            answers=index.for_account(account.id),
        )


def evaluate(
    accounts: Sequence[Account],
    questions: Sequence[Question],
    answers: Sequence[AccountAnswer],
) -> List[EvaluationResult]:
    """Module-level shortcut for ScoringEngine().evaluate()."""
    return ScoringEngine().evaluate(accounts, questions, answers)
