"""Blog content models."""

from django.conf import settings
from django.db import models
from django.urls import reverse
from markdown import markdown

from .signals import content_trashed, status_transition, theme_switched

# Constants
TITLE_MAX_LENGTH = 200
NAME_MAX_LENGTH = 100
STATUS_MAX_LENGTH = 20

NEW_STATUS = "new"


class Category(models.Model):
    """A post category."""

    name = models.CharField(max_length=NAME_MAX_LENGTH)
    slug = models.SlugField(max_length=NAME_MAX_LENGTH, unique=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name

    def get_absolute_url(self):
        return reverse("category", kwargs={"slug": self.slug})


class Tag(models.Model):
    """A post tag."""

    name = models.CharField(max_length=NAME_MAX_LENGTH)
    slug = models.SlugField(max_length=NAME_MAX_LENGTH, unique=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name

    def get_absolute_url(self):
        return reverse("tag", kwargs={"slug": self.slug})


class Post(models.Model):
    """A post, static page or attachment."""

    PUBLISH = "publish"
    DRAFT = "draft"
    TRASH = "trash"

    STATUS_CHOICES = [
        ("publish", "Published"),
        ("draft", "Draft"),
        ("pending", "Pending Review"),
        ("private", "Private"),
        ("future", "Scheduled"),
        ("trash", "Trash"),
    ]

    TYPE_CHOICES = [
        ("post", "Post"),
        ("page", "Page"),
        ("attachment", "Attachment"),
    ]

    # Post types with their own archive listing
    ARCHIVED_TYPES = ("post",)

    title = models.CharField(max_length=TITLE_MAX_LENGTH)
    slug = models.SlugField(max_length=TITLE_MAX_LENGTH, unique=True)
    body = models.TextField(blank=True, default="")
    status = models.CharField(max_length=STATUS_MAX_LENGTH, choices=STATUS_CHOICES, default=DRAFT, db_index=True)
    post_type = models.CharField(max_length=STATUS_MAX_LENGTH, choices=TYPE_CHOICES, default="post", db_index=True)
    author = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="posts")
    categories = models.ManyToManyField(Category, blank=True, related_name="posts")
    tags = models.ManyToManyField(Tag, blank=True, related_name="posts")

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Read from __dict__ so a deferred status does not hit the database
        self._saved_status = self.__dict__.get("status", NEW_STATUS) if self.pk else NEW_STATUS

    def __str__(self):
        return self.title

    def get_absolute_url(self):
        return reverse("post_detail", kwargs={"slug": self.slug})

    def save(self, *args, **kwargs):
        """Save and report the status transition, even when unchanged."""
        old_status = self._saved_status
        super().save(*args, **kwargs)
        self._saved_status = self.status
        status_transition.send(sender=Post, instance=self, old_status=old_status, new_status=self.status)

    def trash(self):
        """Move the post to the trash."""
        self.status = self.TRASH
        self.save(update_fields=["status", "updated_at"])
        content_trashed.send(sender=Post, instance=self)

    @property
    def is_published(self):
        return self.status == self.PUBLISH

    @property
    def render(self):
        """Render the markdown body to HTML."""
        return markdown(self.body, extensions=["fenced_code", "nl2br", "tables", "toc"])


class Comment(models.Model):
    """A reader comment on a post."""

    post = models.ForeignKey(Post, on_delete=models.CASCADE, related_name="comments")
    author_name = models.CharField(max_length=NAME_MAX_LENGTH)
    body = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]

    def __str__(self):
        return f"{self.author_name} on {self.post}"


class SiteOptions(models.Model):
    """Site-wide reading options. A single row."""

    SHOW_ON_FRONT_CHOICES = [
        ("posts", "Latest posts"),
        ("page", "A static page"),
    ]

    theme = models.CharField(max_length=NAME_MAX_LENGTH, default="default")
    show_on_front = models.CharField(max_length=10, choices=SHOW_ON_FRONT_CHOICES, default="posts")
    page_on_front = models.ForeignKey(Post, null=True, blank=True, on_delete=models.SET_NULL, related_name="+")
    page_for_posts = models.ForeignKey(Post, null=True, blank=True, on_delete=models.SET_NULL, related_name="+")

    class Meta:
        verbose_name = "site options"
        verbose_name_plural = "site options"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._saved_theme = self.__dict__.get("theme")

    def __str__(self):
        return "Site options"

    def save(self, *args, **kwargs):
        """Save and report a theme change."""
        old_theme = self._saved_theme
        super().save(*args, **kwargs)
        self._saved_theme = self.theme
        if old_theme != self.theme:
            theme_switched.send(sender=SiteOptions, old_theme=old_theme, new_theme=self.theme)

    @classmethod
    def load(cls):
        """Return the options row, creating it on first use."""
        options, _ = cls.objects.get_or_create(pk=1)
        return options

    @property
    def shows_static_front_page(self):
        return self.show_on_front == "page"

    def switch_theme(self, theme: str):
        """Change the active theme."""
        self.theme = theme
        self.save(update_fields=["theme"])
