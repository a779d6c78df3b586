#!/usr/bin/env python3
"""Download Language Lab flashcards into Anki-importable text files.

Walks the Language Lab menu from the root, finds the configured language and
book, and writes every flashcard of the book, in both directions, to
output/<book>.txt:

    #separator:tab
    #html:true
    #deck column:3
    hola<TAB>hello<TAB>Complete Spanish Step-by-Step 01. (S2E) Greetings
    ...

Usage:
    python download.py --language Spanish --book "Complete Spanish Step-by-Step"
    python download.py --verbose                      # uses ./-config.json if present
    python download.py --config=path/to/-config.json
    python download.py --all
"""

import argparse
from pathlib import Path
from typing import List, Optional

from langlab.api.client import LangLabClient
from langlab.common.config import CONFIG_FILENAME, apply_overrides, find_default_config, load_config
from langlab.common.errors import LangLabError
from langlab.common.logging import banner, log_error
from langlab.crawl.walker import download_flashcards


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Download Language Lab flashcards as tab-separated Anki import files"
    )
    parser.add_argument(
        "--config",
        type=str,
        help=f"Path to a {CONFIG_FILENAME} file (default: ./{CONFIG_FILENAME} if present)",
    )
    parser.add_argument(
        "--language",
        help="Exact title of the language to download (overrides config)",
    )
    parser.add_argument(
        "--book",
        help="Exact title of the book to download (overrides config)",
    )
    parser.add_argument(
        "--all",
        dest="download_all",
        action="store_true",
        default=None,
        help="Download every book of every language",
    )
    parser.add_argument(
        "--output-dir",
        help="Directory for the generated .txt files (default: output)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Per-request timeout in seconds",
    )
    parser.add_argument(
        "--retries",
        type=int,
        help="Retry failed requests this many times (default: 0)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the downloader."""
    args = build_parser().parse_args(argv)

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            log_error(f"Config file does not exist: {config_path}")
            return 2
    else:
        config_path = find_default_config(Path.cwd())

    try:
        config = apply_overrides(
            load_config(config_path),
            language=args.language,
            book=args.book,
            download_all=args.download_all,
            output_dir=args.output_dir,
            timeout=args.timeout,
            retries=args.retries,
        )
    except ValueError as e:
        log_error(str(e))
        return 2

    if args.verbose:
        banner("🚀 Language Lab flashcard download")
        if config.download_all:
            print("   Mode: every language and book")
        else:
            print(f"   Language: {config.language}")
            print(f"   Book: {config.book}")
        print(f"   Output: {config.output_dir}")

    try:
        with LangLabClient(
            base_url=config.base_url,
            timeout=config.timeout,
            retries=config.retries,
            debug=args.debug,
        ) as client:
            written = download_flashcards(client, config, debug=args.debug)
    except LangLabError as e:
        log_error(str(e))
        return 1

    if args.verbose:
        banner("✅ Complete!")
        print(f"   Files written: {len(written)}")
        for path in written:
            print(f"   {path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
