"""Common utility functions shared across the library."""

import os
import re
from pathlib import Path


_DEF_ENV_LOADED = False


def _load_env_file() -> None:
    """Load environment variables from .env file if present."""
    global _DEF_ENV_LOADED
    if _DEF_ENV_LOADED:
        return
    _DEF_ENV_LOADED = True
    try:
        # Look for .env in langlab/common/../.. (project root) or langlab/common/..
        here = Path(__file__).parent
        candidates = [
            here.parent.parent / ".env",  # project root
            here.parent / ".env",
        ]
        for p in candidates:
            if not p.exists():
                continue
            for raw in p.read_text(encoding="utf-8", errors="ignore").splitlines():
                line = raw.strip()
                if not line or line.startswith("#"):
                    continue
                if line.startswith("export "):
                    line = line[len("export "):].strip()
                if "=" not in line:
                    continue
                k, v = line.split("=", 1)
                key = k.strip()
                val = v.strip().strip('"').strip("'")
                if key and os.environ.get(key) is None:
                    os.environ[key] = val
    except OSError:
        pass


# Call once on import
_load_env_file()


def sanitize_filename(name: str) -> str:
    """Make a title usable as a single file name.

    Only path separators are replaced with underscores.
    """
    return re.sub(r'[/\\]', '_', name)


def strip_chars(text: str, chars: str) -> str:
    """Remove every occurrence of each character in `chars` from text."""
    return text.translate({ord(ch): None for ch in chars})


def ensure_dir(path: Path) -> None:
    """Create directory if it doesn't exist."""
    path.mkdir(parents=True, exist_ok=True)
