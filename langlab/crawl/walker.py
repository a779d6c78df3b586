"""Menu tree traversal: language -> book -> chapters -> flashcards.

The vendor menu is walked depth-first from the root (parent id 0). Languages
and books are matched by exact title unless the config asks for every one.
Inside a book, the "Flashcards" or "Progress Checks" entry lists the
chapters; chapters nest to varying depth before reaching a study mode node
that holds the cards.
"""

from pathlib import Path
from typing import List, Optional

from langlab.api.client import LangLabClient
from langlab.common.config import (
    FLASHCARDS,
    FLASHCARDS_STUDY_MODE,
    PROGRESS_CHECKS,
    CrawlConfig,
    get_output_dir,
)
from langlab.common.logging import log_debug, log_info
from langlab.crawl.cards import prepare_cards
from langlab.output.cards import FILE_HEADER, render_chapter_rows, write_book_file
from langlab.output.titles import normalize_chapter_title
from langlab.schema.models import Card, MenuEntry


ROOT_MENU_ID = 0


def collect_chapter_cards(client: LangLabClient, node: MenuEntry, debug: bool = False) -> List[Card]:
    """Collect every card below a chapter node, in discovery order.

    A terminal node (flashcards and quiz) holds its cards under a
    "Flashcards: Study Mode" child. A study mode node reached directly holds
    the cards itself. Any other node is descended into, child by child.
    """
    log_debug(debug, f"  {node.title}")
    if node.flashcards_and_quiz:
        study_mode = client.get_menu_option_with_names(node.menu_id, FLASHCARDS_STUDY_MODE)
        if study_mode is None:
            log_info("skip", f"Chapter {node.title} does not have flashcard mode")
            return []
        return prepare_cards(client.get_flash_cards(study_mode.menu_id))

    if node.title == FLASHCARDS_STUDY_MODE:
        return prepare_cards(client.get_flash_cards(node.menu_id))

    cards: List[Card] = []
    for child in client.get_menu_options(node.menu_id):
        cards.extend(collect_chapter_cards(client, child, debug=debug))
    return cards


def download_book(
    client: LangLabClient,
    config: CrawlConfig,
    language: MenuEntry,
    book: MenuEntry,
    debug: bool = False,
) -> Optional[Path]:
    """Download one book's flashcards into <output_dir>/<book>.txt.

    Returns the written path, or None when the book has no flashcards.
    """
    option = client.get_menu_option_with_names(book.menu_id, FLASHCARDS, PROGRESS_CHECKS)
    if option is None:
        log_info("skip", f"Book {book.title} does not have flashcards or progress checks")
        return None

    rows: List[str] = [FILE_HEADER]
    for chapter in client.get_menu_options(option.menu_id):
        cards = collect_chapter_cards(client, chapter, debug=debug)
        title = normalize_chapter_title(chapter.title)
        log_info("chapter", f"Chapter: {title}")
        log_debug(debug, f"{len(cards)} cards in {title}")
        rows.extend(render_chapter_rows(cards, book.title, title, language.title))

    if len(rows) == 1:
        log_info("skip", f"No flashcards found for book {book.title}")
        return None

    path = write_book_file(get_output_dir(config), book.title, "".join(rows))
    log_info("file", f"File written to {path}")
    return path


def download_language(
    client: LangLabClient,
    config: CrawlConfig,
    language: MenuEntry,
    debug: bool = False,
) -> List[Path]:
    """Download every selected book of a language."""
    written: List[Path] = []
    for book in client.get_menu_options(language.menu_id):
        if not config.wants_book(book.title):
            continue
        log_info("book", f"Downloading flashcards for book {book.title}")
        path = download_book(client, config, language, book, debug=debug)
        if path is not None:
            written.append(path)
    return written


def download_flashcards(client: LangLabClient, config: CrawlConfig, debug: bool = False) -> List[Path]:
    """Walk the whole menu from the root and download every selected book.

    Returns the files written. An empty list is not an error: the language
    or book may simply not exist, or have no flashcards.
    """
    written: List[Path] = []
    for language in client.get_menu_options(ROOT_MENU_ID):
        if not config.wants_language(language.title):
            continue
        log_info("language", f"Downloading flashcards for language {language.title}")
        written.extend(download_language(client, config, language, debug=debug))
    if not written:
        log_debug(debug, "no files written")
    return written


__all__ = [
    "ROOT_MENU_ID",
    "collect_chapter_cards",
    "download_book",
    "download_language",
    "download_flashcards",
]
