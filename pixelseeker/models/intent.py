# Role: Closed set of conversation intents. Classifiers produce them, the controller dispatches on them;
# adding an intent means adding a member here plus a classifier, not editing routing internals.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Intent(str, Enum):
    CATALOG_LOOKUP = "catalog_lookup"
    OPEN_DIALOGUE = "open_dialogue"


@dataclass(frozen=True)
class RouteResult:
    intent: Intent
    # Only set for CATALOG_LOOKUP. May be "" (trigger word with nothing else).
    phrase: Optional[str] = None

    @classmethod
    def catalog(cls, phrase: str) -> "RouteResult":
        return cls(intent=Intent.CATALOG_LOOKUP, phrase=phrase)

    @classmethod
    def dialogue(cls) -> "RouteResult":
        return cls(intent=Intent.OPEN_DIALOGUE)
