"""Syndication feeds."""

from django.contrib.auth import get_user_model
from django.contrib.syndication.views import Feed
from django.shortcuts import get_object_or_404
from django.urls import reverse
from django.utils.feedgenerator import Atom1Feed, RssUserland091Feed

from .models import Comment, Post

FEED_LENGTH = 20


class LatestPostsFeed(Feed):
    """RSS 2.0 feed of published posts."""

    title = "Latest posts"
    description = "New and updated posts."

    def link(self):
        return reverse("home")

    def items(self):
        return Post.objects.filter(post_type="post", status=Post.PUBLISH)[:FEED_LENGTH]

    def item_title(self, item):
        return item.title

    def item_description(self, item):
        return item.render

    def item_pubdate(self, item):
        return item.created_at

    def item_updateddate(self, item):
        return item.updated_at


class LatestPostsRssFeed(LatestPostsFeed):
    feed_type = RssUserland091Feed


class LatestPostsAtomFeed(LatestPostsFeed):
    feed_type = Atom1Feed
    subtitle = LatestPostsFeed.description


class AuthorPostsFeed(LatestPostsFeed):
    """Published posts by a single author."""

    def get_object(self, request, username):
        return get_object_or_404(get_user_model(), username=username)

    def title(self, obj):
        return f"Posts by {obj.get_username()}"

    def link(self, obj):
        return reverse("author", kwargs={"username": obj.get_username()})

    def items(self, obj):
        return Post.objects.filter(author=obj, post_type="post", status=Post.PUBLISH)[:FEED_LENGTH]


class PostTypeFeed(LatestPostsFeed):
    """Published items of one post type."""

    def get_object(self, request, post_type):
        return post_type

    def link(self, obj):
        return reverse("type_archive", kwargs={"post_type": obj})

    def items(self, obj):
        return Post.objects.filter(post_type=obj, status=Post.PUBLISH)[:FEED_LENGTH]


class LatestCommentsFeed(Feed):
    """RSS 2.0 feed of comments across the site."""

    title = "Latest comments"
    description = "Recent comments on published posts."

    def link(self):
        return reverse("home")

    def items(self):
        return Comment.objects.filter(post__status=Post.PUBLISH).select_related("post").order_by("-created_at")[
            :FEED_LENGTH
        ]

    def item_title(self, item):
        return f"Comment on {item.post.title} by {item.author_name}"

    def item_description(self, item):
        return item.body

    def item_link(self, item):
        return item.post.get_absolute_url()

    def item_pubdate(self, item):
        return item.created_at


class PostCommentsFeed(LatestCommentsFeed):
    """Comments on a single post."""

    def get_object(self, request, slug):
        return get_object_or_404(Post, slug=slug, status=Post.PUBLISH)

    def title(self, obj):
        return f"Comments on {obj.title}"

    def link(self, obj):
        return obj.get_absolute_url()

    def items(self, obj):
        return obj.comments.select_related("post").order_by("-created_at")[:FEED_LENGTH]
