# Role: Thin HTTP adapter for the chat endpoint. Validates request/response shapes and delegates the entire
# conversation turn to the session's ConversationController (business logic lives in core, not in the API layer).

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from pixelseeker.api import deps
from pixelseeker.errors import ConversationBusyError

router = APIRouter(tags=["chat"])

class ChatRequest(BaseModel):
    session_id: str = Field(min_length=1)
    user_message: str = Field(min_length=1)

class ChatResponse(BaseModel):
    session_id: str
    assistant_message: str

@router.post("/chat", response_model=ChatResponse)
def chat(req: ChatRequest) -> ChatResponse:
    # 1) Find (or start) the session's controller
    # 2) Run one turn; a still-pending session answers 409 instead of racing the transcript
    # 3) Return the assistant text in a stable schema for UI/clients
    deps.session_manager.cleanup_expired()
    controller = deps.session_manager.get_or_create(req.session_id)
    try:
        reply = controller.submit_user_message(req.user_message)
    except ConversationBusyError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    return ChatResponse(session_id=req.session_id, assistant_message=reply.text)
