"""Common utilities shared across fetching, crawling and output."""

from langlab.common.utils import (
    _load_env_file,
    sanitize_filename,
    strip_chars,
    ensure_dir,
)
from langlab.common.logging import (
    log_info,
    log_debug,
    log_error,
    banner,
)
from langlab.common.errors import (
    LangLabError,
    TransportError,
    DecodeError,
    FilesystemError,
)
from langlab.common.config import (
    CONFIG_FILENAME,
    CrawlConfig,
    load_config,
    apply_overrides,
    find_default_config,
    get_output_dir,
)

__all__ = [
    # utils
    "_load_env_file",
    "sanitize_filename",
    "strip_chars",
    "ensure_dir",
    # logging
    "log_info",
    "log_debug",
    "log_error",
    "banner",
    # errors
    "LangLabError",
    "TransportError",
    "DecodeError",
    "FilesystemError",
    # config
    "CONFIG_FILENAME",
    "CrawlConfig",
    "load_config",
    "apply_overrides",
    "find_default_config",
    "get_output_dir",
]
