"""Tab-separated flashcard file rendering and writing."""

from pathlib import Path
from typing import List, Sequence

from langlab.common.errors import FilesystemError
from langlab.common.utils import ensure_dir, sanitize_filename
from langlab.output.titles import direction_label
from langlab.schema.models import Card


# Anki text-import header: tab separated, HTML allowed, deck name in column 3
FILE_HEADER = """#separator:tab
#html:true
#deck column:3
"""


def _row(front: str, back: str, deck: str) -> str:
    return f"{front}\t{back}\t{deck}\n"


def render_chapter_rows(
    cards: Sequence[Card],
    book_title: str,
    chapter_title: str,
    language_name: str,
) -> List[str]:
    """Render both directions of every card in a chapter.

    All language -> English rows come first, then all English -> language
    rows, each in card order. The deck column is the book title followed by
    the direction label of the (already normalized) chapter title.
    """
    if not cards:
        return []
    forward_deck = f"{book_title} {direction_label(chapter_title, language_name)}"
    reverse_deck = f"{book_title} {direction_label(chapter_title, language_name, reverse=True)}"
    rows = [_row(card.side_a, card.side_b, forward_deck) for card in cards]
    rows.extend(_row(card.side_b, card.side_a, reverse_deck) for card in cards)
    return rows


def book_file_path(output_dir: Path, book_title: str) -> Path:
    return output_dir / f"{sanitize_filename(book_title)}.txt"


def write_book_file(output_dir: Path, book_title: str, content: str) -> Path:
    """Write a book's rendered document, replacing any previous file."""
    path = book_file_path(output_dir, book_title)
    try:
        ensure_dir(output_dir)
        path.write_text(content, encoding="utf-8", newline="")
    except OSError as e:
        raise FilesystemError(f"Could not write {path}: {e}") from e
    return path


__all__ = [
    "FILE_HEADER",
    "render_chapter_rows",
    "book_file_path",
    "write_book_file",
]
