# Role: Normalized game record returned by the catalog tool. Every field is always a display-ready string
# (missing upstream values are defaulted by the client, never left absent).

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CatalogEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    release_date: str
    rating: str
    platforms: str
