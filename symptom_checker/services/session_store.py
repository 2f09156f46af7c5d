"""
In-memory registry of flow sessions.

Nothing is persisted; sessions disappear when the process restarts.
"""

import uuid
from collections import OrderedDict
from typing import Optional

from symptom_checker.config import get_settings
from symptom_checker.core.exceptions import SessionNotFoundError
from symptom_checker.core.logging import get_logger
from symptom_checker.services.analysis_gateway import AnalysisGateway
from symptom_checker.services.symptom_flow import SymptomCheckerFlow

logger = get_logger(__name__)


class SessionStore:
    """Bounded mapping of session id to flow; the oldest session is evicted first."""

    def __init__(self, max_sessions: int = 1000):
        self.max_sessions = max_sessions
        self._sessions: OrderedDict[str, SymptomCheckerFlow] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self, gateway: AnalysisGateway) -> tuple[str, SymptomCheckerFlow]:
        """Start a new flow at the consent step."""
        while self._sessions and len(self._sessions) >= self.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.info("Session evicted", extra={"session_id": evicted})

        session_id = uuid.uuid4().hex
        flow = SymptomCheckerFlow(gateway)
        self._sessions[session_id] = flow
        logger.debug("Session created", extra={"session_id": session_id})
        return session_id, flow

    def get(self, session_id: str) -> SymptomCheckerFlow:
        flow = self._sessions.get(session_id)
        if flow is None:
            raise SessionNotFoundError(session_id)
        return flow

    def delete(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)

    def clear(self) -> None:
        self._sessions.clear()


_store_instance: Optional[SessionStore] = None


def get_session_store() -> SessionStore:
    """Get the process-wide session store."""
    global _store_instance
    if _store_instance is None:
        _store_instance = SessionStore(max_sessions=get_settings().MAX_SESSIONS)
    return _store_instance
