"""Core Django app configuration."""

import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    """Core app configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"

    def ready(self):
        """Log where purge requests will be sent."""
        from django.conf import settings

        if settings.VARNISH_HOST:
            logger.info("Sending BAN requests to Varnish host %s", settings.VARNISH_HOST)
