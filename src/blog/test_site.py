"""Tests for the blog site context."""

import pytest
from django.contrib.auth.models import User
from django.test import override_settings

from blog.models import Category, Post, SiteOptions, Tag
from blog.site import BlogSiteContext
from purge.events import ContentChangeEvent, EventKind
from purge.host import FEED_ATOM, FEED_COMMENTS_RSS2, FEED_RDF, FEED_RSS, FEED_RSS2
from purge.services.expansion import expand

SITE = "https://blog.example"


@pytest.fixture
def site():
    return BlogSiteContext(site_url=SITE)


@pytest.fixture
def author(db):
    return User.objects.create_user("jane")


@pytest.fixture
def post(author):
    post = Post.objects.create(title="Hello", slug="hello", status=Post.PUBLISH, author=author)
    post.categories.add(Category.objects.create(name="News", slug="news"))
    post.tags.add(Tag.objects.create(name="Alpha", slug="alpha"))
    return post


class TestBlogSiteContext:
    def test_get_content(self, site, post):
        item = site.get_content(post.pk)

        assert item.id == post.pk
        assert item.permalink == f"{SITE}/hello/"
        assert item.status == "publish"
        assert item.content_type == "post"
        assert item.author_id == post.author_id
        assert len(item.category_ids) == 1
        assert len(item.tag_ids) == 1

    def test_get_missing_content(self, site, db):
        assert site.get_content(999) is None

    def test_taxonomy_and_author_urls(self, site, post):
        assert site.category_url(post.categories.get().pk) == f"{SITE}/category/news/"
        assert site.tag_url(post.tags.get().pk) == f"{SITE}/tag/alpha/"
        assert site.author_url(post.author_id) == f"{SITE}/author/jane/"
        assert site.author_feed_url(post.author_id) == f"{SITE}/author/jane/feed/"

    def test_missing_lookups_return_none(self, site, db):
        assert site.category_url(999) is None
        assert site.tag_url(999) is None
        assert site.author_url(999) is None
        assert site.permalink(999) is None
        assert site.comments_feed_url(999) is None

    def test_type_archives(self, site):
        assert site.type_archive_url("post") == f"{SITE}/type/post/"
        assert site.type_archive_feed_url("post") == f"{SITE}/type/post/feed/"
        assert site.type_archive_url("page") is None
        assert site.type_archive_feed_url("attachment") is None

    def test_feed_urls(self, site):
        assert site.feed_url(FEED_RSS2) == f"{SITE}/feed/"
        assert site.feed_url(FEED_RSS) == f"{SITE}/feed/rss/"
        assert site.feed_url(FEED_RDF) == f"{SITE}/feed/rdf/"
        assert site.feed_url(FEED_ATOM) == f"{SITE}/feed/atom/"
        assert site.feed_url(FEED_COMMENTS_RSS2) == f"{SITE}/comments/feed/"
        assert site.feed_url("unknown") is None

    def test_comments_feed(self, site, post):
        assert site.comments_feed_url(post.pk) == f"{SITE}/hello/feed/"

    def test_home_url(self, site):
        assert site.home_url() == SITE
        assert site.home_url("/feed/") == f"{SITE}/feed/"
        assert site.home_url("feed/") == f"{SITE}/feed/"

    @override_settings(SITE_URL="http://configured.example/")
    def test_site_url_from_settings(self):
        assert BlogSiteContext().home_url() == "http://configured.example"

    def test_static_front_page(self, site, author):
        page = Post.objects.create(title="Blog", slug="blog", status=Post.PUBLISH, post_type="page", author=author)
        options = SiteOptions.load()
        assert not site.shows_static_front_page()

        options.show_on_front = "page"
        options.page_for_posts = page
        options.save()

        assert site.shows_static_front_page()
        assert site.posts_page_id() == page.pk

    def test_static_pages_are_published_pages(self, site, author):
        Post.objects.create(title="About", slug="about", status=Post.PUBLISH, post_type="page", author=author)
        Post.objects.create(title="Secret", slug="secret", status=Post.DRAFT, post_type="page", author=author)

        assert site.static_page_permalinks() == [f"{SITE}/about/"]


class TestExpandWithBlog:
    def test_published_post(self, site, post):
        about = Post.objects.create(
            title="About", slug="about", status=Post.PUBLISH, post_type="page", author=post.author
        )
        event = ContentChangeEvent(EventKind.CONTENT_EDITED, content_id=post.pk)

        urls = expand(event, site.get_content(post.pk), site)

        assert {
            f"{SITE}/hello/",
            f"{SITE}/category/news/",
            f"{SITE}/tag/alpha/",
            f"{SITE}/author/jane/",
            f"{SITE}/",
            f"{SITE}/{about.slug}/",
            f"{SITE}/feed/",
            f"{SITE}/feed/rss/",
        } <= urls
