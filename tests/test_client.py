"""Tests for response decoding and the HTTP client."""
from __future__ import annotations

import time
from typing import Any, List

import pytest
import requests

from langlab.api.client import FLASHCARDS_PATH, MENU_PATH, LangLabClient
from langlab.common.errors import DecodeError, TransportError
from langlab.schema.models import Card, MenuEntry, decode_cards, decode_menu_entries


MENU_RECORD = {
    "Menu_ID": 12,
    "MenuTitle": "Complete Spanish Step-by-Step",
    "TitleInformation": "",
    "Base64Image": None,
    "MenuFormat": "List",
    "DeckType": "",
    "SelfScoring": False,
    "DeckTitle": None,
    "FlashCardsAndQuiz": True,
    "SideALabel": "Spanish",
    "SideBLabel": "English",
    "DataDeck_ID": 0,
    "ForceSideA": False,
    "Unpublished": False,
}

CARD_RECORD = {
    "Card_ID": 991,
    "SideA": "el perro",
    "SideB": "the dog",
    "StyleA": "",
    "StyleB": "",
    "SideAAudio": "perro.mp3",
    "SideBAudio": None,
    "TTSAudio": True,
    "TTSSideA": "es-ES",
}


class FakeResponse:
    def __init__(self, body: Any = None, status_code: int = 200, invalid_json: bool = False):
        self.body = body
        self.status_code = status_code
        self.invalid_json = invalid_json

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self) -> Any:
        if self.invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.body


class FakeSession:
    def __init__(self, responses: List[Any]):
        self.responses = list(responses)
        self.calls: List[tuple] = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self) -> None:
        self.closed = True


def make_client(responses, **kwargs) -> LangLabClient:
    return LangLabClient(base_url="https://api.example/api/", session=FakeSession(responses), **kwargs)


def test_decode_menu_entry_keeps_every_field():
    entry = MenuEntry.from_api(MENU_RECORD)
    assert entry.menu_id == 12
    assert entry.title == "Complete Spanish Step-by-Step"
    assert entry.flashcards_and_quiz is True
    assert entry.base64_image == ""
    assert entry.side_a_label == "Spanish"


def test_decode_card_ignores_missing_and_null_fields():
    c = Card.from_api(CARD_RECORD)
    assert (c.card_id, c.side_a, c.side_b) == (991, "el perro", "the dog")
    assert c.side_b_audio == ""
    assert c.side_a_video == ""
    assert c.tts_audio is True


def test_decode_rejects_wrong_field_types():
    with pytest.raises(DecodeError):
        MenuEntry.from_api({**MENU_RECORD, "Menu_ID": "12"})
    with pytest.raises(DecodeError):
        MenuEntry.from_api({**MENU_RECORD, "Menu_ID": True})
    with pytest.raises(DecodeError):
        Card.from_api({**CARD_RECORD, "SideA": 5})


def test_decode_rejects_non_array_bodies():
    with pytest.raises(DecodeError):
        decode_menu_entries({"Menu_ID": 1})
    with pytest.raises(DecodeError):
        decode_cards(["not an object"])


def test_decode_empty_and_null_bodies():
    assert decode_cards([]) == []
    assert decode_cards(None) == []


def test_get_menu_options_requests_parent_id():
    client = make_client([FakeResponse([MENU_RECORD])], timeout=5.0)
    entries = client.get_menu_options(0)
    assert [e.menu_id for e in entries] == [12]
    assert client.session.calls == [("https://api.example/api" + MENU_PATH, {"parentID": 0}, 5.0)]


def test_get_flash_cards_requests_menu_id():
    client = make_client([FakeResponse([CARD_RECORD])])
    cards = client.get_flash_cards(44)
    assert [c.side_a for c in cards] == ["el perro"]
    url, params, _ = client.session.calls[0]
    assert url.endswith(FLASHCARDS_PATH)
    assert params == {"menuID": 44}


def test_get_flash_cards_empty_node():
    client = make_client([FakeResponse([])])
    assert client.get_flash_cards(44) == []


def test_get_menu_option_with_names_first_match_in_listing_order():
    records = [
        {"Menu_ID": 1, "MenuTitle": "Grammar"},
        {"Menu_ID": 2, "MenuTitle": "Progress Checks"},
        {"Menu_ID": 3, "MenuTitle": "Flashcards"},
    ]
    client = make_client([FakeResponse(records), FakeResponse(records)])
    assert client.get_menu_option_with_names(7, "Flashcards", "Progress Checks").menu_id == 2
    assert client.get_menu_option_with_names(7, "Vocabulary") is None


def test_connection_error_is_transport_error():
    client = make_client([requests.ConnectionError("refused")])
    with pytest.raises(TransportError):
        client.get_menu_options(0)


def test_http_error_status_is_transport_error():
    client = make_client([FakeResponse(status_code=500)])
    with pytest.raises(TransportError):
        client.get_menu_options(0)


def test_invalid_json_is_decode_error():
    client = make_client([FakeResponse(invalid_json=True)])
    with pytest.raises(DecodeError):
        client.get_flash_cards(1)


def test_no_retry_by_default():
    session_items = [requests.Timeout("slow"), FakeResponse([])]
    client = make_client(session_items)
    with pytest.raises(TransportError):
        client.get_menu_options(0)
    assert len(client.session.calls) == 1


def test_retries_transport_errors(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda seconds: None)
    client = make_client([requests.ConnectionError("reset"), FakeResponse([MENU_RECORD])], retries=2)
    assert [e.menu_id for e in client.get_menu_options(0)] == [12]
    assert len(client.session.calls) == 2


def test_retries_give_up_with_last_error(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda seconds: None)
    client = make_client([FakeResponse(status_code=503)] * 3, retries=2)
    with pytest.raises(TransportError):
        client.get_menu_options(0)
    assert len(client.session.calls) == 3


def test_decode_errors_are_not_retried(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda seconds: None)
    client = make_client([FakeResponse(invalid_json=True), FakeResponse([])], retries=3)
    with pytest.raises(DecodeError):
        client.get_menu_options(0)
    assert len(client.session.calls) == 1


def test_client_context_manager_closes_session():
    with make_client([]) as client:
        session = client.session
    assert session.closed
