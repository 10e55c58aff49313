"""Caching infrastructure.

This module provides the memo table and the lookup cache built on it.
"""

from .cache_table import CacheTable
from .lookup_cache import LookupCache

__all__ = [
    "CacheTable",
    "LookupCache",
]
