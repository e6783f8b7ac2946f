# Role: Read-only transparency endpoints for the UI (transcript + pending flag), plus a reset action.
# Does NOT run any turn logic.

from typing import List

from fastapi import APIRouter
from pydantic import BaseModel

from pixelseeker.api import deps
from pixelseeker.core.conversation_controller import ConversationController
from pixelseeker.models.message import Message

router = APIRouter(tags=["transcript"])

class TranscriptSnapshot(BaseModel):
    session_id: str
    pending: bool
    messages: List[Message]

def _snapshot(session_id: str, controller: ConversationController) -> TranscriptSnapshot:
    return TranscriptSnapshot(
        session_id=session_id,
        pending=controller.pending,
        messages=list(controller.transcript),
    )

@router.get("/transcript/{session_id}", response_model=TranscriptSnapshot)
def get_transcript(session_id: str) -> TranscriptSnapshot:
    # Key line: unknown sessions get a fresh seeded transcript, same as the first /chat would.
    deps.session_manager.cleanup_expired()
    controller = deps.session_manager.get_or_create(session_id)
    return _snapshot(session_id, controller)

@router.post("/sessions/{session_id}/reset", response_model=TranscriptSnapshot)
def reset_session(session_id: str) -> TranscriptSnapshot:
    controller = deps.session_manager.reset(session_id)
    return _snapshot(session_id, controller)
