# Role: Single chat message schema for the transcript. Stored in TranscriptStore and read by the UI/API
# (id + text + direction + sender + timestamp). Pydantic makes it easy to serialize/debug.

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Direction = Literal["incoming", "outgoing"]

ASSISTANT_SENDER = "PixelSeeker"
USER_SENDER = "user"


class Message(BaseModel):
    # Key line: messages never change after they enter the transcript.
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    text: str
    direction: Direction
    sender: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_user(cls, text: str) -> "Message":
        return cls(text=text, direction="outgoing", sender=USER_SENDER)

    @classmethod
    def from_assistant(cls, text: str) -> "Message":
        return cls(text=text, direction="incoming", sender=ASSISTANT_SENDER)

    @property
    def is_from_assistant(self) -> bool:
        return self.sender == ASSISTANT_SENDER
