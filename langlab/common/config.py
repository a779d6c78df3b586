"""Crawl configuration for the flashcard downloader.

A run can be configured with a -config.json file that specifies:
- language: exact title of the language menu entry (default: "Spanish")
- book: exact title of the book menu entry (default: "Complete Spanish Step-by-Step")
- download_all: process every language and every book, ignoring the names above
- output_dir: directory the .txt files are written to (default: "output")
- base_url: Language Lab API root
- timeout: per-request timeout in seconds
- retries: extra attempts after a failed request (default: 0, fail immediately)

Defaults can also come from LANGLAB_* environment variables (or a .env file).
"""

import json
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional


CONFIG_FILENAME = "-config.json"

DEFAULT_BASE_URL = "https://mhe-language-lab.azurewebsites.net/api"
DEFAULT_LANGUAGE = "Spanish"
DEFAULT_BOOK = "Complete Spanish Step-by-Step"
DEFAULT_OUTPUT_DIR = "output"
DEFAULT_TIMEOUT = 30.0

# Menu titles the vendor uses for the flashcard-bearing parts of a book
FLASHCARDS = "Flashcards"
PROGRESS_CHECKS = "Progress Checks"
FLASHCARDS_STUDY_MODE = "Flashcards: Study Mode"


def _env(name: str, default: str) -> str:
    return os.environ.get(name) or default


@dataclass
class CrawlConfig:
    """Configuration for one downloader run."""
    language: str = field(default_factory=lambda: _env("LANGLAB_LANGUAGE", DEFAULT_LANGUAGE))
    book: str = field(default_factory=lambda: _env("LANGLAB_BOOK", DEFAULT_BOOK))
    download_all: bool = False
    output_dir: str = field(default_factory=lambda: _env("LANGLAB_OUTPUT_DIR", DEFAULT_OUTPUT_DIR))
    base_url: str = field(default_factory=lambda: _env("LANGLAB_BASE_URL", DEFAULT_BASE_URL))
    timeout: float = DEFAULT_TIMEOUT
    retries: int = 0

    def __post_init__(self):
        if not self.download_all:
            if not self.language:
                raise ValueError("language must be set unless download_all is enabled")
            if not self.book:
                raise ValueError("book must be set unless download_all is enabled")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if self.retries < 0:
            raise ValueError(f"retries must be >= 0, got {self.retries}")
        self.base_url = self.base_url.rstrip("/")

    def wants_language(self, title: str) -> bool:
        """Whether a language menu entry should be processed."""
        return self.download_all or title == self.language

    def wants_book(self, title: str) -> bool:
        """Whether a book menu entry should be processed."""
        return self.download_all or title == self.book


_FIELD_TYPES: Dict[str, tuple] = {
    "language": (str,),
    "book": (str,),
    "download_all": (bool,),
    "output_dir": (str,),
    "base_url": (str,),
    "timeout": (int, float),
    "retries": (int,),
}


def _check_value(key: str, value: Any) -> None:
    expected = _FIELD_TYPES[key]
    # bool is an int subclass; only download_all may be a bool
    if isinstance(value, bool) and bool not in expected:
        raise ValueError(f"{key} must not be a boolean")
    if not isinstance(value, expected):
        names = " or ".join(t.__name__ for t in expected)
        raise ValueError(f"{key} must be {names}, got {type(value).__name__}")


def config_from_dict(data: Dict[str, Any]) -> CrawlConfig:
    """Build a CrawlConfig from a mapping, rejecting unknown keys and bad types."""
    known = {f.name for f in fields(CrawlConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
    for key, value in data.items():
        _check_value(key, value)
    return CrawlConfig(**data)


def load_config(path: Optional[Path]) -> CrawlConfig:
    """Load configuration from a -config.json file.

    Returns the defaults if no path is given.
    """
    if path is None:
        return CrawlConfig()

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ValueError(f"Could not read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")

    return config_from_dict(data)


def apply_overrides(config: CrawlConfig, **overrides: Any) -> CrawlConfig:
    """Return a new config with every non-None override applied."""
    data = {f.name: getattr(config, f.name) for f in fields(CrawlConfig)}
    for key, value in overrides.items():
        if value is not None:
            data[key] = value
    return config_from_dict(data)


def find_default_config(folder: Path) -> Optional[Path]:
    """Return the -config.json in a folder, or None if there is none."""
    config_path = folder / CONFIG_FILENAME
    if not config_path.is_file():
        return None
    return config_path


def get_output_dir(config: CrawlConfig) -> Path:
    """Get the resolved output directory path from config."""
    return Path(config.output_dir).resolve()
