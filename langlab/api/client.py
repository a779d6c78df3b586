"""HTTP client for the Language Lab menu and flashcard endpoints."""

from typing import Any, Dict, List, Optional

import requests
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from langlab.common.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from langlab.common.errors import DecodeError, TransportError
from langlab.common.logging import log_debug, log_info
from langlab.schema.models import Card, MenuEntry, decode_cards, decode_menu_entries


MENU_PATH = "/GetSubMenus"
FLASHCARDS_PATH = "/GetFlashCards"

USER_AGENT = "langlab-flashcards/1.0"


class LangLabClient:
    """Fetches menu nodes and flashcards, one blocking request at a time.

    With ``retries=0`` (the default) a failed request raises immediately.
    Otherwise transport failures are retried with exponential backoff and the
    last error is re-raised. Decode errors are never retried.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retries: int = 0,
        session: Optional[requests.Session] = None,
        debug: bool = False,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retries = retries
        self.debug = debug
        if session is None:
            session = requests.Session()
            session.headers.update({"User-Agent": USER_AGENT})
        self.session = session

    def _retrying(self) -> Retrying:
        return Retrying(
            reraise=True,
            stop=stop_after_attempt(self.retries + 1),
            wait=wait_exponential(multiplier=1, min=1, max=8),
            retry=retry_if_exception_type(TransportError),
            before_sleep=self._log_retry,
        )

    def _log_retry(self, retry_state) -> None:
        exc = retry_state.outcome.exception()
        log_info("api", f"[retry] {exc} (attempt {retry_state.attempt_number}/{self.retries + 1})")

    def _get_once(self, path: str, params: Dict[str, Any]) -> requests.Response:
        url = self.base_url + path
        log_debug(self.debug, f"GET {url} {params}")
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(f"GET {url} {params} failed: {e}") from e
        return resp

    def _get_json(self, path: str, params: Dict[str, Any]) -> Any:
        """GET an endpoint and decode its JSON body."""
        resp = self._retrying()(self._get_once, path, params)
        try:
            return resp.json()
        except ValueError as e:
            raise DecodeError(f"{path} {params} did not return JSON: {e}") from e

    def get_menu_options(self, parent_id: int) -> List[MenuEntry]:
        """Return the child menu entries of a parent node (0 is the root)."""
        body = self._get_json(MENU_PATH, {"parentID": parent_id})
        entries = decode_menu_entries(body)
        log_debug(self.debug, f"menu {parent_id}: {len(entries)} entries")
        return entries

    def get_menu_option_with_names(self, parent_id: int, *names: str) -> Optional[MenuEntry]:
        """Return the first child whose title equals one of `names`, or None."""
        for option in self.get_menu_options(parent_id):
            if option.title in names:
                return option
        return None

    def get_flash_cards(self, menu_id: int) -> List[Card]:
        """Return the raw flashcards stored at a study mode node."""
        body = self._get_json(FLASHCARDS_PATH, {"menuID": menu_id})
        cards = decode_cards(body)
        log_debug(self.debug, f"flashcards {menu_id}: {len(cards)} cards")
        return cards

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "LangLabClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
