"""Authorization for the full-site purge and request-carried purge signals."""

import logging

from django.conf import settings
from django.core import signing
from django.urls import reverse
from django.utils.http import urlencode

logger = logging.getLogger(__name__)

PURGE_ALL_PARAM = "purge_all"
PURGE_TOKEN_PARAM = "purge_token"
CONTENT_PARAM = "post"
TOKEN_SALT = "purge.purge_all"
DEFAULT_TOKEN_MAX_AGE = 60 * 60 * 24


def can_purge_all(user) -> bool:
    """Capability check: only active staff may purge the whole site."""
    return bool(user and user.is_authenticated and user.is_active and user.is_staff)


def make_purge_all_token(user) -> str:
    """Signed token binding a full-site purge link to ``user``."""
    return signing.TimestampSigner(salt=TOKEN_SALT).sign(str(user.pk))


def check_purge_all_token(user, token: str | None) -> bool:
    """Anti-forgery check for a full-site purge token."""
    if not token or not user or not user.is_authenticated:
        return False

    max_age = getattr(settings, "VARNISH_PURGE_TOKEN_MAX_AGE", DEFAULT_TOKEN_MAX_AGE)
    try:
        value = signing.TimestampSigner(salt=TOKEN_SALT).unsign(token, max_age=max_age)
    except signing.BadSignature:
        logger.info("Rejected full-site purge token for user %s", user.pk)
        return False

    return value == str(user.pk)


def purge_all_url(user, path: str | None = None) -> str:
    """Relative URL that triggers a full-site purge for ``user``."""
    query = urlencode({PURGE_ALL_PARAM: 1, PURGE_TOKEN_PARAM: make_purge_all_token(user)})
    return f"{path or reverse('home')}?{query}"


class DjangoRequestSignals:
    """Reads purge signals from a Django request's query string."""

    def __init__(self, request):
        self.request = request

    @property
    def content_id(self) -> int | None:
        value = self.request.GET.get(CONTENT_PARAM)
        try:
            return int(value) if value else None
        except ValueError:
            return None

    def purge_all_requested(self) -> bool:
        return PURGE_ALL_PARAM in self.request.GET

    def purge_all_authorized(self) -> bool:
        if not self.purge_all_requested():
            return False

        user = getattr(self.request, "user", None)
        return can_purge_all(user) and check_purge_all_token(user, self.request.GET.get(PURGE_TOKEN_PARAM))
