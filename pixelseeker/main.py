# Role: ASGI entrypoint. Loads .env before any client reads its settings, then builds the FastAPI app
# around the shared SessionManager. Run with: uvicorn pixelseeker.main:app

from typing import Optional

from fastapi import FastAPI

import pixelseeker.config
pixelseeker.config.load_env()

from pixelseeker.api import deps
from pixelseeker.api.chat import router as chat_router
from pixelseeker.api.transcript import router as transcript_router
from pixelseeker.core.session_manager import SessionManager


def create_app(manager: Optional[SessionManager] = None) -> FastAPI:
    """Build the API. Passing a manager swaps the process-wide one (tests, alternate wiring)."""
    if manager is not None:
        deps.session_manager = manager

    api = FastAPI(title="PixelSeeker API", version="0.1.0")
    api.include_router(chat_router)
    api.include_router(transcript_router)

    @api.get("/")
    def index() -> dict:
        return {"service": "pixelseeker", "chat": "POST /chat", "transcript": "GET /transcript/{session_id}"}

    @api.get("/health")
    def health() -> dict:
        return {"status": "ok", "sessions": len(deps.session_manager)}

    return api


app = create_app()
