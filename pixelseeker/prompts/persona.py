# Role: Default persona directive for the dialogue service. Sent as the first (system) message of every
# completion request; overridable via PIXELSEEKER_PERSONA.

from __future__ import annotations

import os

DEFAULT_PERSONA = (
    "You are PixelSeeker, an expert in video games. Help users find games based on their preferences, "
    "recommend trending titles, and answer any gaming-related questions. "
    "Respond in an engaging and knowledgeable manner."
)


def build_persona_prompt() -> str:
    persona = (os.getenv("PIXELSEEKER_PERSONA") or "").strip()
    return persona or DEFAULT_PERSONA
