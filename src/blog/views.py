"""Public blog views."""

from django.contrib.auth import get_user_model
from django.core.paginator import Paginator
from django.http import Http404
from django.shortcuts import get_object_or_404, render

from .models import Category, Post, SiteOptions, Tag

POSTS_PER_PAGE = 10


def _published_posts():
    return Post.objects.filter(post_type="post", status=Post.PUBLISH).select_related("author")


def _render_listing(request, queryset, title):
    paginator = Paginator(queryset, POSTS_PER_PAGE)
    listing = paginator.get_page(request.GET.get("page"))
    return render(request, "blog/post_list.html", {"title": title, "posts": listing})


def home(request):
    """Latest posts, or the static front page when one is configured."""
    options = SiteOptions.load()
    if options.shows_static_front_page and options.page_on_front and options.page_on_front.is_published:
        return render(request, "blog/post_detail.html", {"post": options.page_on_front})
    return _render_listing(request, _published_posts(), "Latest posts")


def post_detail(request, slug: str):
    """A single published post or page."""
    post = get_object_or_404(Post, slug=slug, status=Post.PUBLISH)
    return render(
        request,
        "blog/post_detail.html",
        {"post": post, "comments": post.comments.all()},
    )


def category(request, slug: str):
    """Posts in a category."""
    term = get_object_or_404(Category, slug=slug)
    return _render_listing(request, _published_posts().filter(categories=term), term.name)


def tag(request, slug: str):
    """Posts with a tag."""
    term = get_object_or_404(Tag, slug=slug)
    return _render_listing(request, _published_posts().filter(tags=term), term.name)


def author(request, username: str):
    """Posts by an author."""
    user = get_object_or_404(get_user_model(), username=username)
    return _render_listing(request, _published_posts().filter(author=user), f"Posts by {user.get_username()}")


def type_archive(request, post_type: str):
    """Archive of a post type that has one."""
    if post_type not in Post.ARCHIVED_TYPES:
        raise Http404("No archive for this post type")
    queryset = Post.objects.filter(post_type=post_type, status=Post.PUBLISH).select_related("author")
    return _render_listing(request, queryset, "Archive")
