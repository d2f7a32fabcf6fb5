"""Purge exceptions."""


class InvalidPurgeUrlError(ValueError):
    """Raised when a URL cannot be turned into a BAN request."""

    pass
