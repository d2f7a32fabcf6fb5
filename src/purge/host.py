"""Interfaces the host application implements for the purge coordinator."""

from collections.abc import Callable
from typing import Protocol

from .events import ContentItem, EventKind

# Site feed kinds understood by SiteContext.feed_url()
FEED_RDF = "rdf"
FEED_RSS = "rss"
FEED_RSS2 = "rss2"
FEED_ATOM = "atom"
FEED_COMMENTS_RSS2 = "comments_rss2"

ContentChangeHandler = Callable[..., None]


class SiteContext(Protocol):
    """Read accessors for content, taxonomy, users and site URLs.

    Every URL returned is absolute. Lookups that cannot be resolved return
    None instead of raising.
    """

    def get_content(self, content_id: int) -> ContentItem | None: ...

    def permalink(self, content_id: int) -> str | None: ...

    def category_url(self, category_id: int) -> str | None: ...

    def tag_url(self, tag_id: int) -> str | None: ...

    def author_url(self, author_id: int) -> str | None: ...

    def author_feed_url(self, author_id: int) -> str | None: ...

    def type_archive_url(self, content_type: str) -> str | None: ...

    def type_archive_feed_url(self, content_type: str) -> str | None: ...

    def feed_url(self, kind: str) -> str | None: ...

    def comments_feed_url(self, content_id: int) -> str | None: ...

    def home_url(self, path: str = "") -> str: ...

    def shows_static_front_page(self) -> bool: ...

    def posts_page_id(self) -> int | None: ...

    def static_page_permalinks(self) -> list[str]: ...


class EventSource(Protocol):
    """Registers handlers for host content changes.

    Handlers are called as ``handler(event, content=None)`` where
    ``content`` is an optional snapshot of the changed item.
    """

    def on_change(self, kind: EventKind, handler: ContentChangeHandler) -> None: ...


class RequestSignals(Protocol):
    """Out-of-band purge requests carried by the current request."""

    @property
    def content_id(self) -> int | None: ...

    def purge_all_authorized(self) -> bool: ...


class NoRequestSignals:
    """Signals for work happening outside of a request."""

    content_id = None

    def purge_all_authorized(self) -> bool:
        return False
