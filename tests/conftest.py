"""Shared fixtures: an in-memory stand-in for the Language Lab API."""
from __future__ import annotations

from typing import Dict, List

import pytest

from langlab.common.config import CrawlConfig
from langlab.schema.models import Card, MenuEntry


class FakeClient:
    """Serves menus and flashcards from dicts and records every request."""

    def __init__(self, menus: Dict[int, List[MenuEntry]], cards: Dict[int, List[Card]] | None = None):
        self.menus = menus
        self.cards = cards or {}
        self.menu_requests: List[int] = []
        self.card_requests: List[int] = []

    def get_menu_options(self, parent_id: int) -> List[MenuEntry]:
        self.menu_requests.append(parent_id)
        return list(self.menus.get(parent_id, []))

    def get_menu_option_with_names(self, parent_id: int, *names: str):
        for option in self.get_menu_options(parent_id):
            if option.title in names:
                return option
        return None

    def get_flash_cards(self, menu_id: int) -> List[Card]:
        self.card_requests.append(menu_id)
        return list(self.cards.get(menu_id, []))


def menu(menu_id: int, title: str, leaf: bool = False) -> MenuEntry:
    return MenuEntry(menu_id=menu_id, title=title, flashcards_and_quiz=leaf)


def card(side_a: str, side_b: str) -> Card:
    return Card(side_a=side_a, side_b=side_b)


@pytest.fixture
def config(tmp_path) -> CrawlConfig:
    return CrawlConfig(
        language="Spanish",
        book="Complete Spanish",
        output_dir=str(tmp_path / "output"),
    )
