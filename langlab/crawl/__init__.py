"""Menu traversal and card preparation."""

from langlab.crawl.cards import (
    is_malformed,
    split_malformed_card,
    clean_card,
    prepare_cards,
)
from langlab.crawl.walker import (
    ROOT_MENU_ID,
    collect_chapter_cards,
    download_book,
    download_language,
    download_flashcards,
)

__all__ = [
    # cards
    "is_malformed",
    "split_malformed_card",
    "clean_card",
    "prepare_cards",
    # walker
    "ROOT_MENU_ID",
    "collect_chapter_cards",
    "download_book",
    "download_language",
    "download_flashcards",
]
