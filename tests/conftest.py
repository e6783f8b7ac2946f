"""
Shared fakes for PixelSeeker tests.

The controller only needs objects with `search(phrase)` / `complete(messages)`, so the upstream
services are replaced by small recording fakes instead of network mocks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pytest

from pixelseeker.core.conversation_controller import ConversationController
from pixelseeker.errors import CatalogError, ErrorKind
from pixelseeker.models.catalog import CatalogEntry
from pixelseeker.tools.catalog_client import CatalogSearchResult


@dataclass
class FakeCatalog:
    entries: List[CatalogEntry] = field(default_factory=list)
    fail: bool = False
    raise_exc: Optional[Exception] = None
    calls: List[str] = field(default_factory=list)

    def search(self, phrase: str) -> CatalogSearchResult:
        self.calls.append(phrase)
        if self.raise_exc is not None:
            raise self.raise_exc
        if self.fail:
            return CatalogSearchResult(
                ok=False,
                error=CatalogError("boom", kind=ErrorKind.HTTP_STATUS, status_code=500),
            )
        return CatalogSearchResult(ok=True, entries=list(self.entries))


@dataclass
class FakeDialogue:
    reply: str = "A roguelike is a game with permadeath and procedural levels."
    error: Optional[Exception] = None
    calls: List[List[Dict[str, str]]] = field(default_factory=list)

    def complete(self, messages: List[Dict[str, str]]) -> str:
        self.calls.append(list(messages))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture
def fake_dialogue() -> FakeDialogue:
    return FakeDialogue()


@pytest.fixture
def controller(fake_catalog: FakeCatalog, fake_dialogue: FakeDialogue) -> ConversationController:
    return ConversationController(catalog_client=fake_catalog, dialogue_client=fake_dialogue)
