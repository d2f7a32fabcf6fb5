"""Bridges blog model signals to purge content change handlers."""

from django.db.models.signals import m2m_changed, post_save, pre_delete

from purge.events import ContentChangeEvent, EventKind

from .models import Comment, Post, SiteOptions
from .signals import content_trashed, status_transition, theme_switched

# m2m actions that change which archives list a post
TAXONOMY_ACTIONS = ("post_add", "pre_remove", "pre_clear")


class BlogEventSource:
    """Register purge handlers against the blog's signals.

    Receivers are connected strongly and with a fixed dispatch_uid, so
    registering the same kind twice keeps a single receiver.
    """

    def on_change(self, kind: EventKind, handler) -> None:
        connect = getattr(self, f"_connect_{kind.name.lower()}")
        connect(handler, dispatch_uid=f"purge.{kind.value}")

    def _connect_content_published(self, handler, dispatch_uid):
        def receiver(sender, instance, created, raw=False, **kwargs):
            if created and not raw:
                handler(ContentChangeEvent(EventKind.CONTENT_PUBLISHED, content_id=instance.pk))

        post_save.connect(receiver, sender=Post, weak=False, dispatch_uid=dispatch_uid)

    def _connect_content_edited(self, handler, dispatch_uid):
        def receiver(sender, instance, created, raw=False, **kwargs):
            if not created and not raw:
                handler(ContentChangeEvent(EventKind.CONTENT_EDITED, content_id=instance.pk))

        def taxonomy_receiver(sender, instance, action, reverse, pk_set, **kwargs):
            if action not in TAXONOMY_ACTIONS:
                return
            if reverse:
                # Changed from the category/tag side: every affected post
                post_ids = pk_set if pk_set is not None else instance.posts.values_list("pk", flat=True)
            else:
                post_ids = [instance.pk]
            for post_id in post_ids:
                handler(ContentChangeEvent(EventKind.CONTENT_EDITED, content_id=post_id))

        post_save.connect(receiver, sender=Post, weak=False, dispatch_uid=dispatch_uid)
        for through in (Post.categories.through, Post.tags.through):
            m2m_changed.connect(
                taxonomy_receiver, sender=through, weak=False, dispatch_uid=f"{dispatch_uid}.{through.__name__}"
            )

    def _connect_content_deleted(self, handler, dispatch_uid):
        # pre_delete so permalinks and taxonomies still resolve
        def receiver(sender, instance, **kwargs):
            if instance.post_type != "attachment":
                handler(ContentChangeEvent(EventKind.CONTENT_DELETED, content_id=instance.pk))

        pre_delete.connect(receiver, sender=Post, weak=False, dispatch_uid=dispatch_uid)

    def _connect_attachment_deleted(self, handler, dispatch_uid):
        def receiver(sender, instance, **kwargs):
            if instance.post_type == "attachment":
                handler(ContentChangeEvent(EventKind.ATTACHMENT_DELETED, content_id=instance.pk))

        pre_delete.connect(receiver, sender=Post, weak=False, dispatch_uid=dispatch_uid)

    def _connect_content_trashed(self, handler, dispatch_uid):
        def receiver(sender, instance, **kwargs):
            handler(ContentChangeEvent(EventKind.CONTENT_TRASHED, content_id=instance.pk))

        content_trashed.connect(receiver, sender=Post, weak=False, dispatch_uid=dispatch_uid)

    def _connect_theme_switched(self, handler, dispatch_uid):
        def receiver(sender, **kwargs):
            handler(ContentChangeEvent(EventKind.THEME_SWITCHED))

        theme_switched.connect(receiver, sender=SiteOptions, weak=False, dispatch_uid=dispatch_uid)

    def _connect_comment_posted(self, handler, dispatch_uid):
        def receiver(sender, instance, created, raw=False, **kwargs):
            if created and not raw:
                handler(ContentChangeEvent(EventKind.COMMENT_POSTED, content_id=instance.post_id))

        post_save.connect(receiver, sender=Comment, weak=False, dispatch_uid=dispatch_uid)

    def _connect_status_transition(self, handler, dispatch_uid):
        def receiver(sender, instance, old_status, new_status, **kwargs):
            handler(
                ContentChangeEvent(
                    EventKind.STATUS_TRANSITION,
                    content_id=instance.pk,
                    old_status=old_status,
                    new_status=new_status,
                )
            )

        status_transition.connect(receiver, sender=Post, weak=False, dispatch_uid=dispatch_uid)
