"""Tracks the coordinator that belongs to the current request."""

from contextlib import contextmanager
from contextvars import ContextVar

from ..events import ContentChangeEvent, ContentItem
from ..host import NoRequestSignals
from .coordinator import InvalidationCoordinator, build_coordinator

_current: ContextVar[InvalidationCoordinator | None] = ContextVar("purge_coordinator", default=None)


def current_coordinator() -> InvalidationCoordinator | None:
    """Return the coordinator of the active request, if any."""
    return _current.get()


@contextmanager
def activate(coordinator: InvalidationCoordinator):
    """Make ``coordinator`` current for the duration of the block."""
    token = _current.set(coordinator)
    try:
        yield coordinator
    finally:
        _current.reset(token)


def handle_content_change(event: ContentChangeEvent, content: ContentItem | None = None) -> None:
    """Route a host event to the active coordinator.

    Outside of a request (management commands, workers, the shell) there is
    no end-of-request hook, so a one-off coordinator flushes immediately.
    """
    coordinator = current_coordinator()
    if coordinator is not None:
        coordinator.on_content_change(event, content)
        return

    coordinator = build_coordinator()
    coordinator.on_content_change(event, content)
    coordinator.on_request_end(NoRequestSignals())
