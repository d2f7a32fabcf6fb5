"""Invalidation coordinator.

Collects purge URLs for the current request and sends them once the
response is ready.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from django.conf import settings
from django.utils.module_loading import import_string

from ..events import ContentChangeEvent, ContentItem, EventKind
from ..exceptions import InvalidPurgeUrlError
from ..host import RequestSignals, SiteContext
from .ban import OutboundPurgeRequest, PurgeTarget, build_purge_request
from .batch import PurgeBatchQueue
from .expansion import expand, feed_purge_required
from .transport import get_transport

logger = logging.getLogger(__name__)

FEED_ROOT_PATH = "/feed/"


class CoordinatorState(Enum):
    IDLE = "idle"
    ACCUMULATING = "accumulating"
    FLUSHED = "flushed"


@dataclass(frozen=True)
class FlushResult:
    """What a flush sent out."""

    urls: frozenset[str] = field(default_factory=frozenset)
    full_site: bool = False

    def __bool__(self) -> bool:
        return bool(self.urls) or self.full_site


class InvalidationCoordinator:
    """Turns content changes into BAN requests for one request lifecycle."""

    def __init__(self, site: SiteContext, transport, host_override: str | None = None, queue=None):
        self.site = site
        self.transport = transport
        self.host_override = host_override or None
        self.queue = queue if queue is not None else PurgeBatchQueue()
        self.state = CoordinatorState.IDLE

    def on_content_change(self, event: ContentChangeEvent, content: ContentItem | None = None) -> None:
        """Expand a change into URLs and queue them for the end of the request."""
        if self.state is CoordinatorState.FLUSHED:
            logger.warning("Ignoring %s for %s after flush", event.kind.value, event.content_id)
            return

        self.state = CoordinatorState.ACCUMULATING

        if content is None and event.content_id is not None:
            content = self.site.get_content(event.content_id)

        urls = expand(event, content, self.site)
        self.queue.enqueue(urls)
        logger.debug("Queued %d URLs for %s on %s", len(urls), event.kind.value, event.content_id)

        if event.kind is EventKind.STATUS_TRANSITION and feed_purge_required(event.old_status, event.new_status):
            self.purge_url(self.site.home_url(FEED_ROOT_PATH), wildcard=True)

    def on_request_end(self, signals: RequestSignals) -> FlushResult:
        """Flush the batch. Runs once; later calls do nothing.

        A content id carried by the request is purged along with the batch.
        A full-site purge only happens when nothing else was queued and the
        request is authorized for it.

        Args:
            signals: Request data: the content id to purge and whether a
                full-site purge was authorized

        Returns:
            FlushResult with the URLs sent, or full_site set
        """
        if self.state is CoordinatorState.FLUSHED:
            return FlushResult()

        if signals.content_id is not None:
            self.on_content_change(ContentChangeEvent(EventKind.CONTENT_EDITED, content_id=signals.content_id))

        urls = self.queue.flush_deduplicated()
        self.state = CoordinatorState.FLUSHED

        if urls:
            for url in sorted(urls):
                self.purge_url(url)
            logger.info("Purged %d URLs", len(urls))
            return FlushResult(urls=frozenset(urls))

        if signals.purge_all_authorized():
            home_url = self.site.home_url()
            self.purge_url(home_url, wildcard=True)
            logger.info("Purged entire site %s", home_url)
            return FlushResult(full_site=True)

        return FlushResult()

    def purge_url(self, url: str, wildcard: bool = False) -> OutboundPurgeRequest | None:
        """Send a single BAN request right away, bypassing the queue.

        Args:
            url: Absolute URL to purge
            wildcard: Ban everything below the URL path

        Returns:
            The request that was sent, or None if the URL is not purgeable
        """
        try:
            purge_request = build_purge_request(PurgeTarget(url, wildcard=wildcard), self.host_override)
        except InvalidPurgeUrlError as e:
            logger.warning("Skipping purge: %s", e)
            return None

        self.transport.send(purge_request)
        return purge_request


def build_coordinator(transport=None) -> InvalidationCoordinator:
    """Create a coordinator wired to the configured site context and transport."""
    site_class = import_string(settings.VARNISH_PURGE_SITE_CONTEXT)
    return InvalidationCoordinator(
        site=site_class(),
        transport=transport or get_transport(),
        host_override=getattr(settings, "VARNISH_HOST", "") or None,
    )
