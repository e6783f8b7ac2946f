# Role: External tool adapter for game recommendations. Calls the RAWG games search endpoint filtered by tag
# and returns a tagged result: ok + normalized CatalogEntry list, or not ok + the CatalogError that caused it.
# An empty list with ok=True is a legitimate "no matches", not a failure.

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

import pixelseeker.config as config
from pixelseeker.config import get_logger
from pixelseeker.errors import (
    CatalogError,
    HTTPStatusError,
    MalformedResponseError,
    NetworkError,
    UpstreamError,
)
from pixelseeker.models.catalog import CatalogEntry

logger = get_logger(__name__)


@dataclass(frozen=True)
class CatalogSearchResult:
    ok: bool
    entries: List[CatalogEntry] = field(default_factory=list)
    error: Optional[CatalogError] = None


class CatalogClient:
    BASE_URL = "https://api.rawg.io/api/games"
    PAGE_SIZE = 5

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        # Key line: missing key is not fatal here; RAWG answers 401 and that becomes a tagged failure.
        self.api_key = api_key or os.getenv("RAWG_API_KEY", "")
        self.base_url = base_url or os.getenv("RAWG_API_URL", self.BASE_URL)
        self.timeout = timeout if timeout is not None else config.http_timeout_seconds()
        self._http = session or requests

    def search(self, phrase: str) -> CatalogSearchResult:
        # 1) Fetch one page of games tagged with the phrase
        # 2) Normalize each item (defaults for missing fields)
        # 3) Never raise: failures come back as ok=False with the error attached
        try:
            items = self._fetch(phrase)
            try:
                entries = [self._normalize(item) for item in items]
            except (TypeError, ValueError) as e:
                raise MalformedResponseError(f"Bad RAWG payload: {e}") from e
        except UpstreamError as e:
            err = CatalogError.wrap(e)
            logger.warning("Catalog search for %r failed [%s]: %s", phrase, err.kind.value, err)
            return CatalogSearchResult(ok=False, error=err)

        logger.debug("Catalog search for %r returned %d entries", phrase, len(entries))
        return CatalogSearchResult(ok=True, entries=entries)

    def _fetch(self, phrase: str) -> List[Dict[str, Any]]:
        params = {"key": self.api_key, "tags": phrase, "page_size": self.PAGE_SIZE}

        try:
            r = self._http.get(self.base_url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkError(f"RAWG request failed: {e}") from e

        if not r.ok:
            raise HTTPStatusError("RAWG returned an error status", status_code=r.status_code)

        try:
            payload = r.json()
        except ValueError as e:
            raise MalformedResponseError(f"Bad RAWG payload: {e}") from e

        if not isinstance(payload, dict):
            raise MalformedResponseError("RAWG payload is not a JSON object")

        results = payload.get("results")
        if results is None:
            return []
        if not isinstance(results, list):
            raise MalformedResponseError("RAWG 'results' is not a list")
        return [item for item in results if isinstance(item, dict)]

    @staticmethod
    def _normalize(item: Dict[str, Any]) -> CatalogEntry:
        # Key line: every field ends up a non-empty display string.
        platforms = item.get("platforms")
        if platforms is None:
            platforms = []
        if not isinstance(platforms, list):
            raise MalformedResponseError("RAWG 'platforms' is not a list")

        names = []
        for p in platforms:
            platform = p.get("platform") if isinstance(p, dict) else None
            name = platform.get("name") if isinstance(platform, dict) else None
            if name:
                names.append(str(name))

        return CatalogEntry(
            name=str(item.get("name") or "Untitled"),
            release_date=str(item.get("released") or "Unknown"),
            rating=_format_rating(item.get("rating")),
            platforms=", ".join(names) if names else "Not listed",
        )


def _format_rating(rating: Any) -> str:
    # RAWG sends 4.0 for whole ratings; show it as "4". 0 means "not rated".
    if not rating:
        return "N/A"
    if isinstance(rating, float) and rating.is_integer():
        return str(int(rating))
    return str(rating)
