"""Language Lab flashcard downloader library.

Subpackages:
- langlab.common: Shared utilities (config, logging, errors, utils)
- langlab.schema: Fixed-shape records for the menu and flashcard endpoints
- langlab.api: HTTP client for the Language Lab API
- langlab.crawl: Menu tree traversal and card repair
- langlab.output: Chapter title normalization and tab-separated file writing
"""
