# Role: Orchestrator for one conversation. It glues together:
# the transcript, intent routing, the catalog tool, the dialogue LLM, and the pending ("typing") indicator.

from __future__ import annotations

import threading
from typing import Optional, Tuple

from pixelseeker.config import get_logger
from pixelseeker.core.intent_router import IntentRouter
from pixelseeker.core.transcript_store import TranscriptStore
from pixelseeker.errors import ConversationBusyError, DialogueError
from pixelseeker.llm.dialogue_client import DialogueClient
from pixelseeker.models.intent import Intent, RouteResult
from pixelseeker.models.message import Message
from pixelseeker.tools.catalog_client import CatalogClient
from pixelseeker.utils.replies import (
    CATALOG_FAILURE_MESSAGE,
    DIALOGUE_FAILURE_MESSAGE,
    EMPTY_PHRASE_MESSAGE,
    build_not_found_message,
    build_recommendations_message,
)

logger = get_logger(__name__)


class ConversationController:
    """
    Idle/Pending state machine for a single chat.

    submit_user_message() is only accepted while Idle. Each accepted call appends exactly one
    outgoing and one incoming Message, and always leaves the controller Idle again, whatever the
    upstream services did.
    """

    def __init__(
        self,
        transcript: Optional[TranscriptStore] = None,
        router: Optional[IntentRouter] = None,
        catalog_client: Optional[CatalogClient] = None,
        dialogue_client: Optional[DialogueClient] = None,
    ) -> None:
        # Key line: dependencies are injectable for testing/mocking.
        self._transcript = transcript if transcript is not None else TranscriptStore.seeded()
        self.router = router or IntentRouter()
        self.catalog_client = catalog_client or CatalogClient()
        self.dialogue_client = dialogue_client or DialogueClient()

        # Key line: single-slot guard; a second submission while Pending is rejected, not queued.
        self._slot = threading.Lock()
        self._pending = False

    @property
    def pending(self) -> bool:
        return self._pending

    @property
    def transcript(self) -> Tuple[Message, ...]:
        return self._transcript.messages

    def submit_user_message(self, text: str) -> Message:
        # 1) Claim the slot (Idle -> Pending) and record the user message
        # 2) Route the utterance
        # 3) Execute the branch; every failure degrades to a canned reply
        # 4) Append the reply, then clear Pending no matter what happened
        if not self._slot.acquire(blocking=False):
            raise ConversationBusyError("A previous message is still being processed")

        try:
            self._transcript.append(Message.from_user(text))
            self._pending = True

            route = self.router.route(text)
            if route.intent == Intent.CATALOG_LOOKUP:
                reply_text = self._run_catalog(route)
            else:
                reply_text = self._run_dialogue()

            reply = Message.from_assistant(reply_text)
            self._transcript.append(reply)

            logger.debug(
                "Turn done: intent=%s transcript_len=%d reply=%r",
                route.intent.value,
                len(self._transcript),
                reply_text[:120],
            )
            return reply
        finally:
            self._pending = False
            self._slot.release()

    def _run_catalog(self, route: RouteResult) -> str:
        phrase = route.phrase or ""
        if not phrase:
            return EMPTY_PHRASE_MESSAGE

        try:
            result = self.catalog_client.search(phrase)
        except Exception:
            logger.exception("Catalog client raised for phrase %r", phrase)
            return CATALOG_FAILURE_MESSAGE

        if not result.ok:
            return CATALOG_FAILURE_MESSAGE
        if not result.entries:
            return build_not_found_message(phrase)
        return build_recommendations_message(phrase, result.entries)

    def _run_dialogue(self) -> str:
        try:
            text = self.dialogue_client.complete(self._transcript.as_role_tagged_sequence())
        except DialogueError:
            # Already logged by the client.
            return DIALOGUE_FAILURE_MESSAGE
        except Exception:
            logger.exception("Dialogue client raised unexpectedly")
            return DIALOGUE_FAILURE_MESSAGE
        return text
