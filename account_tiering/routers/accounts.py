"""
Account Evaluation Router - Account Tiering
account_tiering/routers/accounts.py

Step 3: accounts and their answers.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from account_tiering.config import settings
from account_tiering.core.dependencies import get_session
from account_tiering.models.account import Account, AccountCreate
from account_tiering.models.answer import AccountAnswer, AnswerSubmit
from account_tiering.models.evaluation import CompletionStatus
from account_tiering.services.wizard_session import WizardSession

router = APIRouter(prefix=settings.API_V1_PREFIX, tags=["Account Evaluation"])


@router.get("/sessions/{session_id}/accounts", response_model=List[Account], summary="List accounts")
async def list_accounts(session: WizardSession = Depends(get_session)) -> List[Account]:
    return session.accounts


@router.post(
    "/sessions/{session_id}/accounts",
    response_model=Account,
    status_code=status.HTTP_201_CREATED,
    summary="Add an account",
)
async def add_account(
    account: AccountCreate,
    session: WizardSession = Depends(get_session),
) -> Account:
    return session.add_account(account)


@router.delete(
    "/sessions/{session_id}/accounts/{account_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove an account and its answers",
)
async def remove_account(
    account_id: UUID,
    session: WizardSession = Depends(get_session),
) -> Response:
    session.remove_account(account_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/sessions/{session_id}/completion",
    response_model=CompletionStatus,
    summary="Answered questions out of accounts x questions",
)
async def completion(session: WizardSession = Depends(get_session)) -> CompletionStatus:
    return session.completion_status()


@router.put(
    "/sessions/{session_id}/accounts/{account_id}/answers/{question_id}",
    response_model=AccountAnswer,
    summary="Record an answer",
    description="The value must match the question type: true/false, a number, or one of the options.",
)
async def record_answer(
    account_id: UUID,
    question_id: UUID,
    submit: AnswerSubmit,
    session: WizardSession = Depends(get_session),
) -> AccountAnswer:
    return session.record_answer(account_id, question_id, submit.value)


@router.delete(
    "/sessions/{session_id}/accounts/{account_id}/answers/{question_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Clear an answer",
)
async def clear_answer(
    account_id: UUID,
    question_id: UUID,
    session: WizardSession = Depends(get_session),
) -> Response:
    session.clear_answer(account_id, question_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
