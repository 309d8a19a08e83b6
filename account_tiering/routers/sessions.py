"""
Session Router - Account Tiering
account_tiering/routers/sessions.py

Wizard lifecycle, step navigation and step 1 (company setup).
"""

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from typing import Optional
from uuid import UUID

from account_tiering.config import settings
from account_tiering.core.dependencies import get_session, get_session_store
from account_tiering.models.company import Company, CompanyCreate
from account_tiering.models.enumerations import WizardStep
from account_tiering.models.session import SessionCreate, SessionState
from account_tiering.services.session_store import SessionStore
from account_tiering.services.wizard_session import WizardSession

router = APIRouter(prefix=settings.API_V1_PREFIX, tags=["Sessions"])



#  Schemas


class StepResponse(BaseModel):
    current_step: WizardStep



#  Routes


@router.post(
    "/sessions",
    response_model=SessionState,
    status_code=status.HTTP_201_CREATED,
    summary="Start a wizard session",
)
async def create_session(
    body: Optional[SessionCreate] = None,
    store: SessionStore = Depends(get_session_store),
) -> SessionState:
    body = body or SessionCreate()
    return store.create(owner_id=body.owner_id).snapshot()


@router.get("/sessions/{session_id}", response_model=SessionState, summary="Get session state")
async def get_session_state(session: WizardSession = Depends(get_session)) -> SessionState:
    return session.snapshot()


@router.delete(
    "/sessions/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Discard a session",
)
async def delete_session(
    session_id: UUID,
    store: SessionStore = Depends(get_session_store),
) -> Response:
    store.delete(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/sessions/{session_id}/start-over", response_model=SessionState, summary="Reset to step 1")
async def start_over(session: WizardSession = Depends(get_session)) -> SessionState:
    session.start_over()
    return session.snapshot()


@router.post("/sessions/{session_id}/next", response_model=StepResponse, summary="Advance one step")
async def next_step(session: WizardSession = Depends(get_session)) -> StepResponse:
    return StepResponse(current_step=session.advance())


@router.post("/sessions/{session_id}/back", response_model=StepResponse, summary="Go back one step")
async def previous_step(session: WizardSession = Depends(get_session)) -> StepResponse:
    return StepResponse(current_step=session.back())


@router.put(
    "/sessions/{session_id}/company",
    response_model=Company,
    summary="Step 1: set company profile",
    description="Stores the company profile and moves the session to the criteria builder.",
)
async def set_company(
    company: CompanyCreate,
    session: WizardSession = Depends(get_session),
) -> Company:
    return session.set_company(company)
