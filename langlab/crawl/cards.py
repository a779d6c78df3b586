"""Card cleanup for the tab-separated export.

Cards become single tab-separated lines, so tabs and line breaks are removed
from both sides. One known upstream record is broken differently: several
cards were pasted into its side A, one per CRLF-separated line with a tab
between the two sides. Those are split back out into separate cards.
"""

from typing import Iterable, List

from langlab.common.utils import strip_chars
from langlab.schema.models import Card


MALFORMED_SEPARATOR = "\r\n"
CONTROL_CHARS = "\t\r\n"


def is_malformed(card: Card) -> bool:
    return MALFORMED_SEPARATOR in card.side_a


def split_malformed_card(card: Card) -> List[Card]:
    """Recover the cards packed into a malformed card's side A.

    The first line belongs to the previous card, which is already correct, so
    it is dropped. Lines that do not split into exactly two tab-separated
    parts are dropped too.
    """
    recovered: List[Card] = []
    for part in card.side_a.split(MALFORMED_SEPARATOR)[1:]:
        sides = part.split("\t")
        if len(sides) == 2:
            recovered.append(Card(side_a=sides[0], side_b=sides[1]))
    return recovered


def clean_card(card: Card) -> Card:
    """Return the card with every tab and line break removed from both sides."""
    return Card(
        side_a=strip_chars(card.side_a, CONTROL_CHARS),
        side_b=strip_chars(card.side_b, CONTROL_CHARS),
        card_id=card.card_id,
    )


def prepare_cards(raw_cards: Iterable[Card]) -> List[Card]:
    """Repair or clean each fetched card, keeping fetch order.

    Cards with an empty side are not emitted.
    """
    cards: List[Card] = []
    for card in raw_cards:
        if is_malformed(card):
            candidates = split_malformed_card(card)
        else:
            candidates = [clean_card(card)]
        cards.extend(c for c in candidates if c.side_a and c.side_b)
    return cards


__all__ = [
    "MALFORMED_SEPARATOR",
    "is_malformed",
    "split_malformed_card",
    "clean_card",
    "prepare_cards",
]
