from __future__ import annotations

import threading
from collections import defaultdict
from typing import Any, Optional

LISTING_KEY = "/"


def post_key(slug: str) -> str:
    return f"/vlogs/{slug}"


class PageCache:
    """Rendered route results, dropped by key when the underlying data changes.

    Every ``invalidate`` bumps the key's generation. A reader takes the
    generation before querying the store and stores its result with
    ``set_if_generation``; if a write invalidated the key in between, the
    read is discarded instead of caching a result that predates the write.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, Any] = {}
        self._generations: defaultdict[str, int] = defaultdict(int)

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            return self._entries.get(key)

    def generation(self, key: str) -> int:
        with self._lock:
            return self._generations[key]

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = value

    def set_if_generation(self, key: str, generation: int, value: Any) -> bool:
        with self._lock:
            if self._generations[key] != generation:
                return False
            self._entries[key] = value
            return True

    def invalidate(self, *keys: str) -> None:
        with self._lock:
            for key in keys:
                self._entries.pop(key, None)
                self._generations[key] += 1

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            for key in self._generations:
                self._generations[key] += 1

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries


page_cache = PageCache()
