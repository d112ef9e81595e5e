"""Identity allocation for newly created records."""

import threading


class IdentityAllocator:
    """Hands out unique, strictly increasing integer ids.

    The first id returned is ``start + 1``. Ids are never reused, even
    after the record holding one is deleted.
    """

    def __init__(self, start: int = 0):
        self._last = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Return the next id."""
        with self._lock:
            self._last += 1
            return self._last

    @property
    def last_id(self) -> int:
        """Most recently issued id (or the start value)."""
        return self._last
