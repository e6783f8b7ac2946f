# Role: In-memory session store for the HTTP API. Owns lifecycle of ConversationController objects:
# create/get by session_id, reset a chat, and cleanup sessions idle past their TTL.

from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Optional, Tuple

from pixelseeker.config import get_logger
from pixelseeker.core.conversation_controller import ConversationController

logger = get_logger(__name__)

ControllerFactory = Callable[[], ConversationController]


class SessionManager:
    def __init__(
        self,
        controller_factory: Optional[ControllerFactory] = None,
        session_ttl_minutes: int = 60,
    ) -> None:
        self._factory = controller_factory or ConversationController
        self._sessions: Dict[str, Tuple[ConversationController, datetime]] = {}
        self._ttl = timedelta(minutes=session_ttl_minutes)
        # Guards the dict only; per-conversation serialization lives in the controller.
        self._lock = threading.Lock()

    def get_or_create(self, session_id: str) -> ConversationController:
        # Reuse existing controller or start a fresh, seeded one. Touch last-seen either way.
        now = datetime.now(timezone.utc)
        with self._lock:
            entry = self._sessions.get(session_id)
            controller = entry[0] if entry else self._factory()
            self._sessions[session_id] = (controller, now)
        if entry is None:
            logger.info("Started session %s", session_id)
        return controller

    def get(self, session_id: str) -> Optional[ConversationController]:
        with self._lock:
            entry = self._sessions.get(session_id)
        return entry[0] if entry else None

    def reset(self, session_id: str) -> ConversationController:
        controller = self._factory()
        with self._lock:
            self._sessions[session_id] = (controller, datetime.now(timezone.utc))
        logger.info("Reset session %s", session_id)
        return controller

    def cleanup_expired(self) -> int:
        # Role: drop inactive sessions to avoid unbounded growth (best for long-running servers).
        # Pending conversations are kept even when stale.
        now = datetime.now(timezone.utc)
        with self._lock:
            to_delete = [
                sid
                for sid, (controller, seen) in self._sessions.items()
                if (now - seen) > self._ttl and not controller.pending
            ]
            for sid in to_delete:
                del self._sessions[sid]
        if to_delete:
            logger.info("Dropped %d expired sessions", len(to_delete))
        return len(to_delete)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
