"""Tests for public blog views and feeds."""

import pytest
from django.contrib.auth.models import User
from django.test import Client

from blog.models import Category, Comment, Post, SiteOptions, Tag


@pytest.fixture
def client():
    return Client()


@pytest.fixture
def author(db):
    return User.objects.create_user("jane")


@pytest.fixture
def post(author):
    post = Post.objects.create(title="Hello", slug="hello", body="# Hi", status=Post.PUBLISH, author=author)
    post.categories.add(Category.objects.create(name="News", slug="news"))
    post.tags.add(Tag.objects.create(name="Alpha", slug="alpha"))
    return post


@pytest.mark.django_db
class TestBlogViews:
    def test_home_lists_published_posts(self, client, post, author):
        Post.objects.create(title="Unfinished", slug="unfinished", status=Post.DRAFT, author=author)

        response = client.get("/")

        assert response.status_code == 200
        assert b"Hello" in response.content
        assert b"Unfinished" not in response.content

    def test_home_shows_static_front_page(self, client, author):
        page = Post.objects.create(
            title="Welcome", slug="welcome", body="Front", status=Post.PUBLISH, post_type="page", author=author
        )
        options = SiteOptions.load()
        options.show_on_front = "page"
        options.page_on_front = page
        options.save()

        response = client.get("/")

        assert b"Welcome" in response.content

    def test_post_detail_renders_markdown(self, client, post):
        response = client.get("/hello/")

        assert response.status_code == 200
        assert b"<h1" in response.content

    def test_draft_is_not_found(self, client, author):
        Post.objects.create(title="Draft", slug="draft", status=Post.DRAFT, author=author)

        assert client.get("/draft/").status_code == 404

    @pytest.mark.parametrize("path", ["/category/news/", "/tag/alpha/", "/author/jane/", "/type/post/"])
    def test_archives(self, client, post, path):
        response = client.get(path)

        assert response.status_code == 200
        assert b"Hello" in response.content

    def test_type_archive_for_pages_not_found(self, client, db):
        assert client.get("/type/page/").status_code == 404

    @pytest.mark.parametrize(
        "path",
        [
            "/feed/",
            "/feed/rss/",
            "/feed/rdf/",
            "/feed/atom/",
            "/author/jane/feed/",
            "/type/post/feed/",
        ],
    )
    def test_post_feeds(self, client, post, path):
        response = client.get(path)

        assert response.status_code == 200
        assert b"Hello" in response.content

    def test_comment_feeds(self, client, post):
        Comment.objects.create(post=post, author_name="Bob", body="Nice post")

        assert b"Nice post" in client.get("/comments/feed/").content
        assert b"Nice post" in client.get("/hello/feed/").content
