"""
Caller-owned memoization of page layouts.

The pipeline itself keeps no state between calls. Callers that navigate back
and forth between pages can hold a PageLayoutCache and pass it around
explicitly.
"""

import logging
import threading
from collections import OrderedDict
from typing import Any, Callable

from mushaf.config import MushafSettings, get_settings
from mushaf.core.page import build_page_layout, check_page_number
from mushaf.models import PageLayout

logger = logging.getLogger(__name__)


class PageLayoutCache:
    """
    Bounded LRU cache of PageLayout values keyed by page number.

    Safe to share between threads. Layouts are immutable, so handing the same
    instance to several callers is fine.

    Example:
        cache = PageLayoutCache(maxsize=16)
        layout = cache.get_or_build(305, lambda: fetch_page(305))
    """

    def __init__(self, maxsize: int | None = None, settings: MushafSettings | None = None):
        self._settings = settings or get_settings()
        self._maxsize = maxsize if maxsize is not None else self._settings.cache_size
        if self._maxsize < 1:
            raise ValueError(f"maxsize must be >= 1, got {self._maxsize}")
        self._entries: OrderedDict[int, PageLayout] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @property
    def maxsize(self) -> int:
        return self._maxsize

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, page_number: object) -> bool:
        with self._lock:
            return page_number in self._entries

    def get(self, page_number: int) -> PageLayout | None:
        """Return the cached layout for a page, or None."""
        with self._lock:
            layout = self._entries.get(page_number)
            if layout is None:
                self.misses += 1
                return None
            self._entries.move_to_end(page_number)
            self.hits += 1
            return layout

    def put(self, layout: PageLayout) -> None:
        """Store a layout, evicting the least recently used one if full."""
        with self._lock:
            self._entries[layout.page_number] = layout
            self._entries.move_to_end(layout.page_number)
            while len(self._entries) > self._maxsize:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted page %d from layout cache", evicted)

    def get_or_build(self, page_number: int, load_response: Callable[[], Any]) -> PageLayout:
        """
        Return the cached layout or build it from a freshly loaded response.

        Args:
            page_number: Page number (1-604)
            load_response: Zero-argument callable returning the page's raw
                response; only called on a cache miss

        Returns:
            PageLayout
        """
        page_number = check_page_number(page_number)
        layout = self.get(page_number)
        if layout is not None:
            return layout
        # Built outside the lock; concurrent misses for one page build twice
        layout = build_page_layout(load_response(), page_number)
        self.put(layout)
        return layout

    def invalidate(self, page_number: int | None = None) -> None:
        """Drop one page, or every page when page_number is None."""
        with self._lock:
            if page_number is None:
                self._entries.clear()
            else:
                self._entries.pop(page_number, None)
