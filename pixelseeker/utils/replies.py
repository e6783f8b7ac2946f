# Role: Deterministic assistant texts. Welcome, fallbacks, clarification, and the markdown list built from
# catalog entries. Kept in one place so the controller and tests agree on the exact wording.

from __future__ import annotations

from typing import Sequence

from pixelseeker.models.catalog import CatalogEntry

WELCOME_MESSAGE = (
    "Welcome to PixelSeeker! Ask me for game recommendations by genre, style, "
    'or keywords like "first-person shooters" or "RPGs".'
)

DIALOGUE_FAILURE_MESSAGE = "There was an issue processing your request. Please try again later."

CATALOG_FAILURE_MESSAGE = "I couldn't reach the game catalog right now. Please try again in a moment."

EMPTY_PHRASE_MESSAGE = (
    'What kind of games should I recommend? Add a genre or keyword, like "recommend rpg" '
    'or "recommend platformer".'
)


def format_catalog_entry(entry: CatalogEntry) -> str:
    return (
        f"- **{entry.name}** (Released: {entry.release_date}, "
        f"Rating: {entry.rating}, Platforms: {entry.platforms})"
    )


def build_recommendations_message(phrase: str, entries: Sequence[CatalogEntry]) -> str:
    # Key line: one bullet per entry, in the order the catalog returned them.
    game_list = "\n".join(format_catalog_entry(e) for e in entries)
    return f'Here are some recommendations based on your interest in "{phrase}":\n\n{game_list}'


def build_not_found_message(phrase: str) -> str:
    return f'I couldn\'t find any games matching "{phrase}". Try using a different genre or keyword.'
