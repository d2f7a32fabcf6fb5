"""URL configuration for varnish-purge."""

from django.contrib import admin
from django.urls import include, path

from . import views as core_views

urlpatterns = [
    path("admin/", admin.site.urls),
    # Health check
    path("health/", core_views.health, name="health"),
    # Blog pages, archives and feeds
    path("", include("blog.urls")),
]
