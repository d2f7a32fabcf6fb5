"""Outbound delivery of BAN requests."""

import logging

import requests
from django.conf import settings
from kombu.exceptions import OperationalError

from .ban import OutboundPurgeRequest

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5


class HttpTransport:
    """Send BAN requests synchronously with requests.

    Failures are logged and swallowed: a dropped purge leaves the cache
    stale until the next change, it never breaks the caller.
    """

    def __init__(self, timeout: float | None = None):
        self.timeout = timeout or getattr(settings, "VARNISH_PURGE_TIMEOUT", DEFAULT_TIMEOUT)

    def send(self, purge_request: OutboundPurgeRequest) -> requests.Response | None:
        try:
            response = requests.request(
                purge_request.method,
                purge_request.url,
                headers=purge_request.headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning(
                "%s %s (Host: %s) failed: %s",
                purge_request.method,
                purge_request.url,
                purge_request.host_header,
                e,
            )
            return None

        logger.debug(
            "%s %s (Host: %s) -> %s",
            purge_request.method,
            purge_request.url,
            purge_request.host_header,
            response.status_code,
        )
        return response


class CeleryTransport:
    """Hand each BAN request to a Celery worker.

    An unreachable broker is logged the same way a failed BAN is.
    """

    def send(self, purge_request: OutboundPurgeRequest) -> None:
        from ..tasks import send_purge_request

        try:
            send_purge_request.delay(purge_request.url, purge_request.host_header)
        except OperationalError as e:
            logger.warning(
                "Could not queue %s %s (Host: %s): %s",
                purge_request.method,
                purge_request.url,
                purge_request.host_header,
                e,
            )


def get_transport() -> HttpTransport | CeleryTransport:
    """Return the transport selected by VARNISH_PURGE_ASYNC."""
    if getattr(settings, "VARNISH_PURGE_ASYNC", False):
        return CeleryTransport()
    return HttpTransport()
