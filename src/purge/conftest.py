"""Fixtures for purge tests."""

from unittest.mock import MagicMock

import pytest

from purge.events import ContentItem
from purge.host import FEED_ATOM, FEED_COMMENTS_RSS2, FEED_RDF, FEED_RSS, FEED_RSS2
from purge.services.coordinator import InvalidationCoordinator

SITE = "http://example.com"


class FakeSite:
    """In-memory site context with WordPress-style URLs."""

    def __init__(self, items=None, pages=None, static_front=False, posts_page_id=None):
        self.items = {item.id: item for item in items or []}
        self.categories = {1: "news", 2: "sport"}
        self.tags = {10: "alpha", 11: "beta"}
        self.authors = {7: "jane"}
        self.pages = pages if pages is not None else ["about", "contact"]
        self.static_front = static_front
        self._posts_page_id = posts_page_id

    def get_content(self, content_id):
        return self.items.get(content_id)

    def permalink(self, content_id):
        item = self.items.get(content_id)
        return item.permalink if item else None

    def category_url(self, category_id):
        slug = self.categories.get(category_id)
        return f"{SITE}/category/{slug}/" if slug else None

    def tag_url(self, tag_id):
        slug = self.tags.get(tag_id)
        return f"{SITE}/tag/{slug}/" if slug else None

    def author_url(self, author_id):
        name = self.authors.get(author_id)
        return f"{SITE}/author/{name}/" if name else None

    def author_feed_url(self, author_id):
        name = self.authors.get(author_id)
        return f"{SITE}/author/{name}/feed/" if name else None

    def type_archive_url(self, content_type):
        return f"{SITE}/type/{content_type}/" if content_type == "post" else None

    def type_archive_feed_url(self, content_type):
        return f"{SITE}/type/{content_type}/feed/" if content_type == "post" else None

    def feed_url(self, kind):
        return {
            FEED_RDF: f"{SITE}/feed/rdf",
            FEED_RSS: f"{SITE}/feed/rss",
            FEED_RSS2: f"{SITE}/feed",
            FEED_ATOM: f"{SITE}/feed/atom/",
            FEED_COMMENTS_RSS2: f"{SITE}/comments/feed/",
        }.get(kind)

    def comments_feed_url(self, content_id):
        item = self.items.get(content_id)
        return f"{item.permalink}feed/" if item and item.permalink else None

    def home_url(self, path=""):
        return SITE + path

    def shows_static_front_page(self):
        return self.static_front

    def posts_page_id(self):
        return self._posts_page_id

    def static_page_permalinks(self):
        return [f"{SITE}/{slug}/" for slug in self.pages]


def make_item(id=42, status="publish", **kwargs):
    """Build a ContentItem with sensible defaults."""
    defaults = {
        "permalink": f"{SITE}/hello-world/",
        "content_type": "post",
        "author_id": 7,
        "category_ids": (1,),
        "tag_ids": (10,),
    }
    defaults.update(kwargs)
    return ContentItem(id=id, status=status, **defaults)


class FakeSignals:
    """Request signals with fixed values."""

    def __init__(self, content_id=None, authorized=False):
        self.content_id = content_id
        self.authorized = authorized
        self.checked = False

    def purge_all_authorized(self):
        self.checked = True
        return self.authorized


@pytest.fixture
def site():
    return FakeSite(items=[make_item()])


@pytest.fixture
def transport():
    return MagicMock()


@pytest.fixture
def coordinator(site, transport):
    return InvalidationCoordinator(site=site, transport=transport)


def sent_urls(transport):
    """URLs of every request passed to a mock transport."""
    return [call.args[0].url for call in transport.send.call_args_list]
