# Role: Routes a user utterance to one of the closed Intent variants.
# Classification is delegated to an ordered list of classifiers (first match wins); anything unclaimed
# falls through to open dialogue. The default setup is a single literal keyword trigger.

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from pixelseeker.config import get_logger
from pixelseeker.models.intent import RouteResult

logger = get_logger(__name__)

DEFAULT_TRIGGER = "recommend"


class IntentClassifier(Protocol):
    def classify(self, text: str) -> Optional[RouteResult]:
        ...


class KeywordClassifier:
    """
    Literal substring trigger for catalog lookups.

    "recommend rpg" -> CATALOG_LOOKUP("rpg"). Matching is case-insensitive and not word-bounded,
    so "Recommendation" matches too. Only the first occurrence of the trigger is removed; an
    empty phrase is returned as-is and left to the caller.
    """

    def __init__(self, trigger: str = DEFAULT_TRIGGER) -> None:
        if not trigger:
            raise ValueError("trigger must be non-empty")
        self.trigger = trigger.casefold()

    def classify(self, text: str) -> Optional[RouteResult]:
        if self.trigger not in text:
            return None
        phrase = text.replace(self.trigger, "", 1).strip()
        return RouteResult.catalog(phrase)


class IntentRouter:
    def __init__(self, classifiers: Optional[Sequence[IntentClassifier]] = None) -> None:
        self.classifiers = list(classifiers) if classifiers is not None else [KeywordClassifier()]

    def route(self, text: str) -> RouteResult:
        # 1) Case-fold once, so classifiers all see the same normalized text
        # 2) First classifier that claims the text wins
        # 3) Nothing claimed -> open dialogue
        normalized = (text or "").casefold()

        for classifier in self.classifiers:
            result = classifier.classify(normalized)
            if result is not None:
                logger.debug("Routed %r -> %s (phrase=%r)", text, result.intent.value, result.phrase)
                return result

        logger.debug("Routed %r -> %s", text, "open_dialogue")
        return RouteResult.dialogue()
