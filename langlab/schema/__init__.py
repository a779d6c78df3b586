"""Record definitions for API responses."""

from langlab.schema.models import (
    MenuEntry,
    Card,
    decode_list,
    decode_menu_entries,
    decode_cards,
)

__all__ = [
    "MenuEntry",
    "Card",
    "decode_list",
    "decode_menu_entries",
    "decode_cards",
]
