# Role: Append-only chat log for one conversation. Owns message order (display order == context order)
# and converts entries into the role-tagged sequence the dialogue service expects.

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

from pixelseeker.models.message import Message
from pixelseeker.utils.replies import WELCOME_MESSAGE


class TranscriptStore:
    def __init__(self) -> None:
        self._messages: List[Message] = []

    @classmethod
    def seeded(cls) -> "TranscriptStore":
        # Every session starts with exactly one assistant welcome message.
        store = cls()
        store.append(Message.from_assistant(WELCOME_MESSAGE))
        return store

    def append(self, message: Message) -> None:
        self._messages.append(message)

    @property
    def messages(self) -> Tuple[Message, ...]:
        return tuple(self._messages)

    def as_role_tagged_sequence(self) -> List[Dict[str, str]]:
        return [
            {"role": "assistant" if m.is_from_assistant else "user", "content": m.text}
            for m in self._messages
        ]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))
