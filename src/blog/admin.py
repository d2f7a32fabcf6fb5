"""Admin registration for blog content."""

from django.contrib import admin

from .models import Category, Comment, Post, SiteOptions, Tag


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ["title", "post_type", "status", "author", "updated_at"]
    list_filter = ["post_type", "status"]
    search_fields = ["title", "body"]
    prepopulated_fields = {"slug": ("title",)}
    filter_horizontal = ["categories", "tags"]


@admin.register(Category, Tag)
class TermAdmin(admin.ModelAdmin):
    list_display = ["name", "slug"]
    prepopulated_fields = {"slug": ("name",)}


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ["author_name", "post", "created_at"]


@admin.register(SiteOptions)
class SiteOptionsAdmin(admin.ModelAdmin):
    list_display = ["__str__", "theme", "show_on_front"]
