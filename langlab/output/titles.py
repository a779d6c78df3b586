"""Chapter title normalization.

Vendor chapter titles look like "5. Family and Friends" or "1.<i>2</i> Greetings".
They are turned into labels that sort correctly as deck names and carry the
card direction, e.g. "05. (S2E) Family and Friends" / "05. (E2S) Family and Friends".
"""


ITALIC_TAGS = ("<i>", "</i>")


def normalize_chapter_title(title: str) -> str:
    """Zero-pad a single-digit chapter number and strip italic markup."""
    # "5." -> "05." so alphabetical sorting matches chapter order
    if len(title) > 1 and title[1] == ".":
        title = "0" + title
    for tag in ITALIC_TAGS:
        title = title.replace(tag, "")
    return title


def direction_label(title: str, language_name: str, reverse: bool = False) -> str:
    """Insert the direction tag after the "NN. " prefix of a normalized title.

    Forward rows (language -> English) get "(L2E)", reverse rows "(E2L)",
    where L is the first letter of the language name. Titles without the
    "NN. " prefix are returned unchanged.
    """
    if title[2:4] != ". ":
        return title
    initial = language_name[:1]
    tag = f"(E2{initial})" if reverse else f"({initial}2E)"
    return title[:4] + tag + " " + title[4:]


__all__ = [
    "normalize_chapter_title",
    "direction_label",
]
