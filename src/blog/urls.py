"""Blog URL configuration."""

from django.urls import path

from . import feeds, views

urlpatterns = [
    path("", views.home, name="home"),
    # Site feeds
    path("feed/", feeds.LatestPostsFeed(), name="feed"),
    path("feed/rss/", feeds.LatestPostsRssFeed(), name="feed_rss"),
    path("feed/rdf/", feeds.LatestPostsRssFeed(), name="feed_rdf"),
    path("feed/atom/", feeds.LatestPostsAtomFeed(), name="feed_atom"),
    path("comments/feed/", feeds.LatestCommentsFeed(), name="comments_feed"),
    # Archives
    path("category/<slug:slug>/", views.category, name="category"),
    path("tag/<slug:slug>/", views.tag, name="tag"),
    path("author/<str:username>/", views.author, name="author"),
    path("author/<str:username>/feed/", feeds.AuthorPostsFeed(), name="author_feed"),
    path("type/<slug:post_type>/", views.type_archive, name="type_archive"),
    path("type/<slug:post_type>/feed/", feeds.PostTypeFeed(), name="type_archive_feed"),
    # Posts and pages
    path("<slug:slug>/feed/", feeds.PostCommentsFeed(), name="post_comments_feed"),
    path("<slug:slug>/", views.post_detail, name="post_detail"),
]
