"""Content signals sent by the blog in addition to Django's model signals."""

from django.dispatch import Signal

# Sent with ``instance`` after a post was moved to the trash.
content_trashed = Signal()

# Sent with ``old_status`` and ``new_status`` every time a post is saved.
status_transition = Signal()

# Sent with ``old_theme`` and ``new_theme`` when the site theme changes.
theme_switched = Signal()
