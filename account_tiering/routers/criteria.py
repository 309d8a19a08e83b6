"""
Criteria Builder Router - Account Tiering
account_tiering/routers/criteria.py

Step 2: weighted evaluation questions.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from account_tiering.config import settings
from account_tiering.core.dependencies import get_session
from account_tiering.models.question import Question, QuestionCreate, WeightUpdate
from account_tiering.services.wizard_session import WizardSession

router = APIRouter(prefix=settings.API_V1_PREFIX, tags=["Criteria Builder"])


@router.get("/sessions/{session_id}/questions", response_model=List[Question], summary="List questions")
async def list_questions(session: WizardSession = Depends(get_session)) -> List[Question]:
    return session.questions


@router.post(
    "/sessions/{session_id}/questions",
    response_model=Question,
    status_code=status.HTTP_201_CREATED,
    summary="Add a question",
)
async def add_question(
    question: QuestionCreate,
    session: WizardSession = Depends(get_session),
) -> Question:
    return session.add_question(question)


@router.put(
    "/sessions/{session_id}/questions",
    response_model=List[Question],
    summary="Replace all questions",
    description="Replaces the criteria set. Answers to questions that no longer exist are discarded.",
)
async def replace_questions(
    questions: List[QuestionCreate],
    session: WizardSession = Depends(get_session),
) -> List[Question]:
    return session.replace_questions(questions)


@router.patch(
    "/sessions/{session_id}/questions/{question_id}",
    response_model=Question,
    summary="Update question weight",
)
async def update_question_weight(
    question_id: UUID,
    update: WeightUpdate,
    session: WizardSession = Depends(get_session),
) -> Question:
    return session.update_question_weight(question_id, update.weight)


@router.delete(
    "/sessions/{session_id}/questions/{question_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a question",
)
async def remove_question(
    question_id: UUID,
    session: WizardSession = Depends(get_session),
) -> Response:
    session.remove_question(question_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
