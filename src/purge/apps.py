"""Purge app configuration."""

from django.apps import AppConfig


class PurgeConfig(AppConfig):
    """Connects host content events to the purge coordinator."""

    name = "purge"
    verbose_name = "Varnish purge"

    def ready(self):
        """Register a handler for every content change kind."""
        from django.conf import settings
        from django.utils.module_loading import import_string

        from .events import EventKind
        from .services.scope import handle_content_change

        source = import_string(settings.VARNISH_PURGE_EVENT_SOURCE)()
        for kind in EventKind:
            source.on_change(kind, handle_content_change)
