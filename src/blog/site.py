"""Blog implementation of the purge site context."""

from django.conf import settings
from django.contrib.auth import get_user_model
from django.urls import NoReverseMatch, reverse

from purge.events import ContentItem
from purge.host import FEED_ATOM, FEED_COMMENTS_RSS2, FEED_RDF, FEED_RSS, FEED_RSS2

from .models import Category, Post, SiteOptions, Tag

FEED_URL_NAMES = {
    FEED_RDF: "feed_rdf",
    FEED_RSS: "feed_rss",
    FEED_RSS2: "feed",
    FEED_ATOM: "feed_atom",
    FEED_COMMENTS_RSS2: "comments_feed",
}


class BlogSiteContext:
    """Resolves blog content and URLs as absolute URLs under SITE_URL."""

    def __init__(self, site_url: str | None = None):
        self.site_url = (site_url or settings.SITE_URL).rstrip("/")

    def _absolute(self, name: str, **kwargs) -> str | None:
        try:
            return self.site_url + reverse(name, kwargs=kwargs or None)
        except NoReverseMatch:
            return None

    def content_for(self, post: Post) -> ContentItem:
        """Snapshot a post as a ContentItem."""
        return ContentItem(
            id=post.pk,
            permalink=self._absolute("post_detail", slug=post.slug),
            status=post.status,
            content_type=post.post_type,
            author_id=post.author_id,
            category_ids=tuple(post.categories.values_list("pk", flat=True)),
            tag_ids=tuple(post.tags.values_list("pk", flat=True)),
        )

    def get_content(self, content_id: int) -> ContentItem | None:
        post = Post.objects.filter(pk=content_id).first()
        return self.content_for(post) if post else None

    def permalink(self, content_id: int) -> str | None:
        slug = Post.objects.filter(pk=content_id).values_list("slug", flat=True).first()
        return self._absolute("post_detail", slug=slug) if slug else None

    def category_url(self, category_id: int) -> str | None:
        slug = Category.objects.filter(pk=category_id).values_list("slug", flat=True).first()
        return self._absolute("category", slug=slug) if slug else None

    def tag_url(self, tag_id: int) -> str | None:
        slug = Tag.objects.filter(pk=tag_id).values_list("slug", flat=True).first()
        return self._absolute("tag", slug=slug) if slug else None

    def _username(self, author_id: int) -> str | None:
        return get_user_model().objects.filter(pk=author_id).values_list("username", flat=True).first()

    def author_url(self, author_id: int) -> str | None:
        username = self._username(author_id)
        return self._absolute("author", username=username) if username else None

    def author_feed_url(self, author_id: int) -> str | None:
        username = self._username(author_id)
        return self._absolute("author_feed", username=username) if username else None

    def type_archive_url(self, content_type: str) -> str | None:
        if content_type not in Post.ARCHIVED_TYPES:
            return None
        return self._absolute("type_archive", post_type=content_type)

    def type_archive_feed_url(self, content_type: str) -> str | None:
        if content_type not in Post.ARCHIVED_TYPES:
            return None
        return self._absolute("type_archive_feed", post_type=content_type)

    def feed_url(self, kind: str) -> str | None:
        name = FEED_URL_NAMES.get(kind)
        return self._absolute(name) if name else None

    def comments_feed_url(self, content_id: int) -> str | None:
        slug = Post.objects.filter(pk=content_id).values_list("slug", flat=True).first()
        return self._absolute("post_comments_feed", slug=slug) if slug else None

    def home_url(self, path: str = "") -> str:
        if path and not path.startswith("/"):
            path = "/" + path
        return self.site_url + path

    def shows_static_front_page(self) -> bool:
        return SiteOptions.load().shows_static_front_page

    def posts_page_id(self) -> int | None:
        return SiteOptions.load().page_for_posts_id

    def static_page_permalinks(self) -> list[str]:
        slugs = Post.objects.filter(post_type="page", status=Post.PUBLISH).values_list("slug", flat=True)
        return [self._absolute("post_detail", slug=slug) for slug in slugs]
