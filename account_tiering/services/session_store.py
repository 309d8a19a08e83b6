"""
Session Store - Account Tiering
account_tiering/services/session_store.py

Process-local registry of wizard sessions. Nothing is persisted; the
oldest session is evicted once MAX_SESSIONS is exceeded.
"""

import threading
from collections import OrderedDict
from typing import Optional
from uuid import UUID

import structlog

from account_tiering.config import settings
from account_tiering.core.exceptions import EntityNotFoundException
from account_tiering.services.wizard_session import WizardSession

logger = structlog.get_logger(__name__)


class SessionStore:
    """Thread-safe in-memory map of session id -> WizardSession."""

    def __init__(self, max_sessions: Optional[int] = None):
        self.max_sessions = max_sessions or settings.MAX_SESSIONS
        self._sessions: "OrderedDict[UUID, WizardSession]" = OrderedDict()
        self._lock = threading.Lock()

    def create(self, owner_id: str = "current_user") -> WizardSession:
        session = WizardSession(owner_id=owner_id)
        with self._lock:
            self._sessions[session.id] = session
            while len(self._sessions) > self.max_sessions:
                evicted_id, _ = self._sessions.popitem(last=False)
                logger.warning("session_evicted", session_id=str(evicted_id))
        logger.info("session_created", session_id=str(session.id), owner_id=owner_id)
        return session

    def get(self, session_id: UUID) -> WizardSession:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise EntityNotFoundException("Session", str(session_id))
        return session

    def delete(self, session_id: UUID) -> None:
        with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise EntityNotFoundException("Session", str(session_id))
        logger.info("session_deleted", session_id=str(session_id))

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
