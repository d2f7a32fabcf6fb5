"""Request-scoped queue of URLs waiting to be purged."""

from collections.abc import Iterable


class PurgeBatchQueue:
    """Accumulates URLs for the lifetime of one request.

    Duplicates collapse in the underlying set. Not thread-safe; each request
    owns its own queue.
    """

    def __init__(self):
        self._pending: set[str] = set()

    def __len__(self) -> int:
        return len(self._pending)

    def __bool__(self) -> bool:
        return bool(self._pending)

    def enqueue(self, urls: Iterable[str]) -> None:
        """Add URLs to the pending batch. Empty values are ignored."""
        self._pending.update(url for url in urls if url)

    def flush_deduplicated(self) -> set[str]:
        """Return the unique pending URLs and empty the queue."""
        urls, self._pending = self._pending, set()
        return urls
