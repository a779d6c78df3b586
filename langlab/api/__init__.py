"""Language Lab API access."""

from langlab.api.client import (
    LangLabClient,
    MENU_PATH,
    FLASHCARDS_PATH,
)

__all__ = [
    "LangLabClient",
    "MENU_PATH",
    "FLASHCARDS_PATH",
]
