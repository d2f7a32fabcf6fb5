"""URL expansion rules.

Maps one content change to every URL whose cached copy it makes stale.
"""

from collections.abc import Iterable

from ..events import PUBLISHED, ContentChangeEvent, ContentItem
from ..host import (
    FEED_ATOM,
    FEED_COMMENTS_RSS2,
    FEED_RDF,
    FEED_RSS,
    FEED_RSS2,
    SiteContext,
)


def trailingslashit(url: str) -> str:
    """Return the URL with exactly one trailing slash."""
    return url.rstrip("/") + "/"


def untrailingslashit(url: str) -> str:
    """Return the URL without trailing slashes."""
    return url.rstrip("/")


def _clean(urls: Iterable[str | None]) -> set[str]:
    return {url for url in urls if url}


def content_urls(content: ContentItem, site: SiteContext) -> set[str]:
    """URLs belonging to the item itself: permalink, taxonomies, author, type archive."""
    urls: list[str | None] = [content.permalink]

    urls.extend(site.category_url(category_id) for category_id in content.category_ids)
    urls.extend(site.tag_url(tag_id) for tag_id in content.tag_ids)

    if content.author_id is not None:
        urls.append(site.author_url(content.author_id))
        urls.append(site.author_feed_url(content.author_id))

    archive_url = site.type_archive_url(content.content_type)
    if archive_url:
        urls.append(archive_url)
        urls.append(site.type_archive_feed_url(content.content_type))

    urls.append(site.comments_feed_url(content.id))
    return _clean(urls)


def feed_urls(site: SiteContext) -> set[str]:
    """Site-wide feeds.

    RSS and RSS2 are listed with and without a trailing slash since either
    form may have been cached.
    """
    rss_url = site.feed_url(FEED_RSS)
    rss2_url = site.feed_url(FEED_RSS2)

    urls = [
        site.feed_url(FEED_RDF),
        rss_url,
        trailingslashit(rss_url) if rss_url else None,
        rss2_url,
        trailingslashit(rss2_url) if rss2_url else None,
        site.feed_url(FEED_ATOM),
        site.feed_url(FEED_COMMENTS_RSS2),
    ]
    return _clean(urls)


def front_urls(site: SiteContext) -> set[str]:
    """Homepage, the posts page when a static front page is used, and every page."""
    urls: list[str | None] = [trailingslashit(site.home_url())]

    if site.shows_static_front_page():
        posts_page_id = site.posts_page_id()
        if posts_page_id is not None:
            urls.append(site.permalink(posts_page_id))

    urls.extend(site.static_page_permalinks())
    return _clean(urls)


def expand(event: ContentChangeEvent, content: ContentItem | None, site: SiteContext) -> set[str]:
    """Return the set of URLs made stale by ``event``.

    Content that is neither published nor trashed has no public copy to
    invalidate, unless the event is a deletion. When ``content`` is None
    only the site-wide URLs are returned.

    Args:
        event: The change that happened
        content: Snapshot of the changed item, if it still resolves
        site: Lookups for permalinks, archives and feeds

    Returns:
        Absolute URLs to purge
    """
    if content is not None and not content.is_public and not event.is_deletion:
        return set()

    urls = set()
    if content is not None:
        urls |= content_urls(content, site)
    urls |= feed_urls(site)
    urls |= front_urls(site)
    return urls


def feed_purge_required(old_status: str | None, new_status: str | None) -> bool:
    """Whether a status transition requires a wildcard purge of the feed root.

    Only fires when neither side of the transition is published.
    """
    return old_status != PUBLISHED and new_status != PUBLISHED
