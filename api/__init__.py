"""
Módulo API
"""
from .errors import (
    FeedError,
    FeedFetchError,
    InvalidFeedFormat,
    NoValidStations,
)
from .sheet_feed import fetch_feed_text, cache_buster

__all__ = [
    'FeedError',
    'FeedFetchError',
    'InvalidFeedFormat',
    'NoValidStations',
    'fetch_feed_text',
    'cache_buster',
]
