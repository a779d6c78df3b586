"""Fixed-shape records for the Language Lab menu and flashcard endpoints.

Every vendor field is part of the record, even the ones the downloader never
reads, so decoding stays strict: a present field of the wrong JSON type is a
DecodeError. Missing fields and nulls take the zero value for their type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from langlab.common.errors import DecodeError


def _get(obj: Dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = obj.get(key)
    if value is None:
        return default
    # JSON true/false decode to bool, which is also an int
    if kind is int and isinstance(value, bool):
        raise DecodeError(f"field {key!r} must be a number, got {value!r}")
    if kind is int and isinstance(value, float) and value.is_integer():
        return int(value)
    if not isinstance(value, kind):
        raise DecodeError(f"field {key!r} must be {kind.__name__}, got {type(value).__name__}")
    return value


def _str(obj: Dict[str, Any], key: str) -> str:
    return _get(obj, key, str, "")


def _int(obj: Dict[str, Any], key: str) -> int:
    return _get(obj, key, int, 0)


def _bool(obj: Dict[str, Any], key: str) -> bool:
    return _get(obj, key, bool, False)


def _require_object(obj: Any, what: str) -> Dict[str, Any]:
    if not isinstance(obj, dict):
        raise DecodeError(f"{what} must be a JSON object, got {type(obj).__name__}")
    return obj


@dataclass(frozen=True)
class MenuEntry:
    """One node of the vendor's content menu (language, book, chapter, mode...)."""
    menu_id: int
    title: str
    title_information: str = ""
    base64_image: str = ""
    menu_format: str = ""
    deck_type: str = ""
    self_scoring: bool = False
    deck_title: str = ""
    flashcards_and_quiz: bool = False  # terminal node holding flashcards and a quiz
    side_a_label: str = ""
    side_b_label: str = ""
    data_deck_id: int = 0
    force_side_a: bool = False
    unpublished: bool = False

    @staticmethod
    def from_api(obj: Any) -> "MenuEntry":
        obj = _require_object(obj, "menu entry")
        return MenuEntry(
            menu_id=_int(obj, "Menu_ID"),
            title=_str(obj, "MenuTitle"),
            title_information=_str(obj, "TitleInformation"),
            base64_image=_str(obj, "Base64Image"),
            menu_format=_str(obj, "MenuFormat"),
            deck_type=_str(obj, "DeckType"),
            self_scoring=_bool(obj, "SelfScoring"),
            deck_title=_str(obj, "DeckTitle"),
            flashcards_and_quiz=_bool(obj, "FlashCardsAndQuiz"),
            side_a_label=_str(obj, "SideALabel"),
            side_b_label=_str(obj, "SideBLabel"),
            data_deck_id=_int(obj, "DataDeck_ID"),
            force_side_a=_bool(obj, "ForceSideA"),
            unpublished=_bool(obj, "Unpublished"),
        )


@dataclass(frozen=True)
class Card:
    """One flashcard. Side A is the source language, side B the target."""
    side_a: str
    side_b: str
    card_id: int = 0
    style_a: str = ""
    style_b: str = ""
    side_a_audio: str = ""
    side_b_audio: str = ""
    side_a_image: str = ""
    side_b_image: str = ""
    side_a_video: str = ""
    side_b_video: str = ""
    side_a_label: str = ""
    side_b_label: str = ""
    tts_audio: bool = False
    tts_side_a: str = ""
    tts_side_b: str = ""

    @staticmethod
    def from_api(obj: Any) -> "Card":
        obj = _require_object(obj, "flashcard")
        return Card(
            card_id=_int(obj, "Card_ID"),
            side_a=_str(obj, "SideA"),
            side_b=_str(obj, "SideB"),
            style_a=_str(obj, "StyleA"),
            style_b=_str(obj, "StyleB"),
            side_a_audio=_str(obj, "SideAAudio"),
            side_b_audio=_str(obj, "SideBAudio"),
            side_a_image=_str(obj, "SideAImage"),
            side_b_image=_str(obj, "SideBImage"),
            side_a_video=_str(obj, "SideAVideo"),
            side_b_video=_str(obj, "SideBVideo"),
            side_a_label=_str(obj, "SideALabel"),
            side_b_label=_str(obj, "SideBLabel"),
            tts_audio=_bool(obj, "TTSAudio"),
            tts_side_a=_str(obj, "TTSSideA"),
            tts_side_b=_str(obj, "TTSSideB"),
        )


def decode_list(body: Any, decoder, what: str) -> List[Any]:
    """Decode a JSON array body with a per-record decoder."""
    if body is None:
        return []
    if not isinstance(body, list):
        raise DecodeError(f"{what} response must be a JSON array, got {type(body).__name__}")
    return [decoder(item) for item in body]


def decode_menu_entries(body: Any) -> List[MenuEntry]:
    return decode_list(body, MenuEntry.from_api, "menu")


def decode_cards(body: Any) -> List[Card]:
    return decode_list(body, Card.from_api, "flashcard")


__all__ = [
    "MenuEntry",
    "Card",
    "decode_list",
    "decode_menu_entries",
    "decode_cards",
]
