"""
Dependencies - Account Tiering
account_tiering/core/dependencies.py

FastAPI dependency injection for the session store and scoring engine.
"""

from functools import lru_cache
from uuid import UUID

from account_tiering.scoring.engine import ScoringEngine
from account_tiering.services.session_store import SessionStore
from account_tiering.services.wizard_session import WizardSession


@lru_cache()
def get_session_store() -> SessionStore:
    """Get cached SessionStore instance."""
    return SessionStore()


@lru_cache()
def get_scoring_engine() -> ScoringEngine:
    """Get cached ScoringEngine instance."""
    return ScoringEngine()


def get_session(session_id: UUID) -> WizardSession:
    """Resolve the ``session_id`` path parameter to a WizardSession."""
    return get_session_store().get(session_id)
