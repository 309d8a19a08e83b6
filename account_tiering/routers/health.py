"""
Health Check Router - Account Tiering
account_tiering/routers/health.py

Liveness plus the state of the in-memory session store.
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from typing import Dict
from datetime import datetime, timezone

from account_tiering.config import settings
from account_tiering.core.dependencies import get_session_store
from account_tiering.services.session_store import SessionStore

router = APIRouter(tags=["Health"])



#  Schemas


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    dependencies: Dict[str, str]



#  Routes


@router.get("/health", response_model=HealthResponse, summary="Service health")
async def health_check(store: SessionStore = Depends(get_session_store)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
        dependencies={
            "session_store": f"healthy ({len(store)}/{store.max_sessions} sessions)",
        },
    )
