"""Output generation: chapter labels and tab-separated flashcard files."""

from langlab.output.titles import (
    normalize_chapter_title,
    direction_label,
)
from langlab.output.cards import (
    FILE_HEADER,
    render_chapter_rows,
    book_file_path,
    write_book_file,
)

__all__ = [
    # titles
    "normalize_chapter_title",
    "direction_label",
    # cards
    "FILE_HEADER",
    "render_chapter_rows",
    "book_file_path",
    "write_book_file",
]
