"""Template context processors."""

from .services.authorization import can_purge_all, purge_all_url


def purge_all_link(request):
    """Include the "Purge Varnish" link for users allowed to use it."""
    user = getattr(request, "user", None)
    if not can_purge_all(user):
        return {}
    return {"purge_all_url": purge_all_url(user, request.path)}
