"""Build BAN requests for Varnish."""

from dataclasses import dataclass
from urllib.parse import urlsplit

from ..exceptions import InvalidPurgeUrlError

BAN_METHOD = "BAN"
WILDCARD = ".*"


@dataclass(frozen=True)
class PurgeTarget:
    """A URL to purge.

    ``wildcard`` appends the match-anything suffix so everything below the
    path is banned. ``host`` replaces the host the request is sent to.
    """

    url: str
    wildcard: bool = False
    host: str | None = None

    def __str__(self) -> str:
        return self.url + (WILDCARD if self.wildcard else "")


@dataclass(frozen=True)
class OutboundPurgeRequest:
    """A BAN request ready to be sent."""

    url: str
    host_header: str
    method: str = BAN_METHOD

    @property
    def headers(self) -> dict[str, str]:
        return {"Host": self.host_header}


def _bracket(host: str) -> str:
    """Wrap a bare IPv6 address in brackets; leave names and host:port alone."""
    if host.count(":") > 1 and not host.startswith("["):
        return f"[{host}]"
    return host


def build_purge_request(target: PurgeTarget, host_override: str | None = None) -> OutboundPurgeRequest:
    """Turn a purge target into a BAN request.

    The request always goes out over plain HTTP on the default port. When a
    host override is set the request is addressed to it, while the original
    host travels in the Host header so Varnish matches the right vhost.

    Args:
        target: URL to purge, with its wildcard flag and optional host
        host_override: Varnish address used when the target names none

    Returns:
        The BAN request to send

    Raises:
        InvalidPurgeUrlError: If the URL cannot be parsed or has no host
    """
    try:
        parts = urlsplit(target.url)
        original_host = parts.hostname
    except ValueError as e:
        raise InvalidPurgeUrlError(f"Malformed URL {target.url!r}: {e}") from e
    if not original_host:
        raise InvalidPurgeUrlError(f"URL has no host: {target.url!r}")

    original_host = _bracket(original_host)
    host = _bracket(target.host or host_override or original_host)
    # "http://host.*" would ban every host sharing the prefix, so a bare host means the root
    path = parts.path or "/"
    if target.wildcard:
        path += WILDCARD

    return OutboundPurgeRequest(url=f"http://{host}{path}", host_header=original_host)
