"""
Wizard Session - Account Tiering
account_tiering/services/wizard_session.py

In-memory state of one four-step wizard run:

    1. Company Setup       -> Company
    2. Criteria Builder    -> Question[]
    3. Account Evaluation  -> Account[], AccountAnswer[]
    4. Results & Tiering   -> EvaluationResult[]

Every mutation of questions, accounts or answers re-runs the scoring
engine before returning, so ``results`` is never stale.
"""

import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple, Union
from uuid import UUID, uuid4

import structlog
from pydantic import ValidationError

from account_tiering.config import settings
from account_tiering.core.exceptions import (
    AnswerValidationException,
    EntityNotFoundException,
    WizardStepException,
)
from account_tiering.models.account import Account, AccountCreate
from account_tiering.models.answer import AccountAnswer, AnswerValue, answer_value_adapter
from account_tiering.models.company import Company, CompanyCreate
from account_tiering.models.enumerations import QuestionType, WizardStep
from account_tiering.models.evaluation import CompletionStatus, EvaluationResult
from account_tiering.models.question import Question, QuestionCreate
from account_tiering.models.session import SessionState
from account_tiering.scoring.engine import ScoringEngine
from account_tiering.services.reference_data import DEFAULT_QUESTION

logger = structlog.get_logger(__name__)

RawAnswer = Union[bool, float, str]

ANSWER_MESSAGES = {
    QuestionType.BOOLEAN: "Answer must be true or false",
    QuestionType.NUMBER: "Answer must be a number",
    QuestionType.MULTIPLE_CHOICE: "Answer must be one of the question's options",
}


class WizardSession:
    """State and step navigation of one wizard run."""

    def __init__(
        self,
        owner_id: str = "current_user",
        seed_default_question: Optional[bool] = None,
        engine: Optional[ScoringEngine] = None,
    ):
        self.id: UUID = uuid4()
        self.owner_id = owner_id
        self.created_at = datetime.now(timezone.utc)
        self.seed_default_question = (
            settings.SEED_DEFAULT_QUESTION if seed_default_question is None else seed_default_question
        )
        self._engine = engine or ScoringEngine()
        self._lock = threading.RLock()
        self._reset()

    def _reset(self) -> None:
        self.current_step = WizardStep.COMPANY_SETUP
        self.company: Optional[Company] = None
        self._questions: List[Question] = []
        self._accounts: List[Account] = []
        self._answers: Dict[Tuple[UUID, UUID], AccountAnswer] = {}
        self._results: List[EvaluationResult] = []

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def questions(self) -> List[Question]:
        return list(self._questions)

    @property
    def accounts(self) -> List[Account]:
        return list(self._accounts)

    @property
    def answers(self) -> List[AccountAnswer]:
        return list(self._answers.values())

    @property
    def results(self) -> List[EvaluationResult]:
        return list(self._results)

    def get_question(self, question_id: UUID) -> Question:
        for question in self._questions:
            if question.id == question_id:
                return question
        raise EntityNotFoundException("Question", str(question_id))

    def get_account(self, account_id: UUID) -> Account:
        for account in self._accounts:
            if account.id == account_id:
                return account
        raise EntityNotFoundException("Account", str(account_id))

    def completion_status(self) -> CompletionStatus:
        """Answered (account, question) pairs out of accounts × questions."""
        with self._lock:
            question_ids = {q.id for q in self._questions}
            account_ids = {a.id for a in self._accounts}
            answered = sum(
                1 for account_id, question_id in self._answers
                if account_id in account_ids and question_id in question_ids
            )
            return CompletionStatus(
                answered=answered,
                total=len(self._accounts) * len(self._questions),
            )

    def snapshot(self) -> SessionState:
        with self._lock:
            return SessionState(
                id=self.id,
                owner_id=self.owner_id,
                created_at=self.created_at,
                current_step=self.current_step,
                company=self.company,
                questions=self.questions,
                accounts=self.accounts,
                answers=self.answers,
                completion=self.completion_status(),
            )

    # ------------------------------------------------------------------
    # Recompute
    # ------------------------------------------------------------------

    def _recompute(self) -> None:
        self._results = self._engine.evaluate(
            self._accounts, self._questions, list(self._answers.values())
        )

    # ------------------------------------------------------------------
    # Step 1: Company Setup
    # ------------------------------------------------------------------

    def set_company(self, data: CompanyCreate) -> Company:
        """Store the company profile and move on to the criteria builder."""
        with self._lock:
            if self.company is not None:
                company = self.company.model_copy(update=data.model_dump())
            else:
                company = Company(**data.model_dump(), owner_id=self.owner_id)
            self.company = company

            if not self._questions and self.seed_default_question:
                self._questions.append(self._seed_question())
                self._recompute()

            self.current_step = WizardStep.CRITERIA_BUILDER
            logger.info("company_saved", session_id=str(self.id), company=company.name)
            return company

    def _seed_question(self) -> Question:
        weight = min(
            max(DEFAULT_QUESTION["weight"], settings.MIN_QUESTION_WEIGHT),
            settings.MAX_QUESTION_WEIGHT,
        )
        return self._build_question(QuestionCreate(**{**DEFAULT_QUESTION, "weight": weight}))

    # ------------------------------------------------------------------
    # Step 2: Criteria Builder
    # ------------------------------------------------------------------

    def _build_question(self, data: QuestionCreate) -> Question:
        return Question(
            **data.model_dump(),
            company_id=self.company.id if self.company else None,
            owner_id=self.owner_id,
        )

    def add_question(self, data: QuestionCreate) -> Question:
        with self._lock:
            question = self._build_question(data)
            self._questions.append(question)
            self._recompute()
            logger.info("question_added", session_id=str(self.id), question_id=str(question.id))
            return question

    def replace_questions(self, data: List[QuestionCreate]) -> List[Question]:
        """Replace the whole criteria set. Answers to dropped questions are discarded."""
        with self._lock:
            self._questions = [self._build_question(item) for item in data]
            self._drop_orphaned_answers()
            self._recompute()
            logger.info("questions_replaced", session_id=str(self.id), count=len(self._questions))
            return self.questions

    def update_question_weight(self, question_id: UUID, weight: float) -> Question:
        with self._lock:
            question = self.get_question(question_id)
            updated = question.model_copy(update={"weight": weight})
            self._questions[self._questions.index(question)] = updated
            self._recompute()
            return updated

    def remove_question(self, question_id: UUID) -> None:
        with self._lock:
            question = self.get_question(question_id)
            self._questions.remove(question)
            self._drop_orphaned_answers()
            self._recompute()
            logger.info("question_removed", session_id=str(self.id), question_id=str(question_id))

    def _drop_orphaned_answers(self) -> None:
        question_ids = {q.id for q in self._questions}
        account_ids = {a.id for a in self._accounts}
        self._answers = {
            key: answer for key, answer in self._answers.items()
            if key[0] in account_ids and key[1] in question_ids
        }

    # ------------------------------------------------------------------
    # Step 3: Account Evaluation
    # ------------------------------------------------------------------

    def add_account(self, data: AccountCreate) -> Account:
        with self._lock:
            account = Account(**data.model_dump(), owner_id=self.owner_id)
            self._accounts.append(account)
            self._recompute()
            logger.info("account_added", session_id=str(self.id), account_id=str(account.id))
            return account

    def remove_account(self, account_id: UUID) -> None:
        """Remove an account together with its answers."""
        with self._lock:
            account = self.get_account(account_id)
            self._accounts.remove(account)
            self._drop_orphaned_answers()
            self._recompute()
            logger.info("account_removed", session_id=str(self.id), account_id=str(account_id))

    def record_answer(self, account_id: UUID, question_id: UUID, raw: RawAnswer) -> AccountAnswer:
        """Validate ``raw`` against the question type and store it, replacing any previous answer."""
        with self._lock:
            self.get_account(account_id)
            question = self.get_question(question_id)
            value = parse_answer(question, raw)

            key = (account_id, question_id)
            existing = self._answers.get(key)
            answer = AccountAnswer(
                account_id=account_id,
                question_id=question_id,
                answer=value,
                owner_id=self.owner_id,
            )
            if existing is not None:
                answer = answer.model_copy(update={"id": existing.id})
            self._answers[key] = answer
            self._recompute()
            return answer

    def clear_answer(self, account_id: UUID, question_id: UUID) -> None:
        with self._lock:
            if self._answers.pop((account_id, question_id), None) is None:
                raise EntityNotFoundException("Answer", f"{account_id}/{question_id}")
            self._recompute()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def advance(self) -> WizardStep:
        """Move to the next step if the current one is complete."""
        with self._lock:
            step = self.current_step
            if step == WizardStep.COMPANY_SETUP and self.company is None:
                raise WizardStepException(step, "Company details are required before building criteria")
            if step == WizardStep.CRITERIA_BUILDER and not self._questions:
                raise WizardStepException(step, "Add at least one question before evaluating accounts")
            if step == WizardStep.ACCOUNT_EVALUATION and not self.completion_status().is_complete:
                raise WizardStepException(step, "Answer every question for every account before viewing results")
            if step == WizardStep.RESULTS:
                raise WizardStepException(step, "Already at the final step")

            self.current_step = WizardStep(step + 1)
            return self.current_step

    def back(self) -> WizardStep:
        with self._lock:
            if self.current_step > WizardStep.COMPANY_SETUP:
                self.current_step = WizardStep(self.current_step - 1)
            return self.current_step

    def start_over(self) -> None:
        with self._lock:
            self._reset()
            logger.info("session_reset", session_id=str(self.id))


def parse_answer(question: Question, raw: RawAnswer) -> AnswerValue:
    """
    Build the tagged answer variant for ``question`` from a raw form value.

    Raises:
        AnswerValidationException: the value does not match the question
            type, or names an option the question does not offer.
    """
    try:
        value = answer_value_adapter.validate_python({"kind": question.type.value, "value": raw})
    except ValidationError:
        raise AnswerValidationException(str(question.id), ANSWER_MESSAGES[question.type])

    if question.type == QuestionType.MULTIPLE_CHOICE:
        if not value.value or (question.options and value.value not in question.options):
            raise AnswerValidationException(str(question.id), ANSWER_MESSAGES[question.type])

    return value
