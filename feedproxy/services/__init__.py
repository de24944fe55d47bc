"""
Services package

Contains the feed pipeline services:
- predicate_service: Title filter construction (regex / skip words)
- feed_fetcher_service: Upstream feed download and parsing
- feed_filter_service: Item filtering into the output feed
- rss_writer_service: RSS 2.0 rendering
- status_service: Host resource snapshot
"""

from .feed_fetcher_service import FeedFetcherService
from .feed_filter_service import filter_feed
from .predicate_service import (
    FilterPredicate,
    RegexPredicate,
    SkipWordsPredicate,
    build_predicate,
)
from .rss_writer_service import render_rss, write_rss
from .status_service import collect_status, format_status

__all__ = [
    "FeedFetcherService",
    "filter_feed",
    "FilterPredicate",
    "RegexPredicate",
    "SkipWordsPredicate",
    "build_predicate",
    "render_rss",
    "write_rss",
    "collect_status",
    "format_status",
]
