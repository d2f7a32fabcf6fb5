"""Value types passed between the host and the purge coordinator."""

from dataclasses import dataclass
from enum import Enum

PUBLISHED = "publish"
TRASHED = "trash"

# Statuses with a public (and therefore cached) representation
PUBLIC_STATUSES = frozenset({PUBLISHED, TRASHED})


class EventKind(str, Enum):
    """Content changes the host reports."""

    CONTENT_PUBLISHED = "content-published"
    CONTENT_EDITED = "content-edited"
    CONTENT_DELETED = "content-deleted"
    CONTENT_TRASHED = "content-trashed"
    ATTACHMENT_DELETED = "attachment-deleted"
    THEME_SWITCHED = "theme-switched"
    COMMENT_POSTED = "comment-posted"
    STATUS_TRANSITION = "status-transition"


DELETION_EVENTS = frozenset({EventKind.CONTENT_DELETED, EventKind.ATTACHMENT_DELETED})


@dataclass(frozen=True)
class ContentChangeEvent:
    """A single change reported by the host.

    ``content_id`` is None for site-wide events such as a theme switch.
    ``old_status`` and ``new_status`` are only set for status transitions.
    """

    kind: EventKind
    content_id: int | None = None
    old_status: str | None = None
    new_status: str | None = None

    @property
    def is_deletion(self) -> bool:
        return self.kind in DELETION_EVENTS


@dataclass(frozen=True)
class ContentItem:
    """Read-only view of a piece of host content."""

    id: int
    permalink: str | None
    status: str
    content_type: str = "post"
    author_id: int | None = None
    category_ids: tuple[int, ...] = ()
    tag_ids: tuple[int, ...] = ()

    @property
    def is_public(self) -> bool:
        return self.status in PUBLIC_STATUSES
