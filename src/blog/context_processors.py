from django.conf import settings

from .models import SiteOptions


def site(request):
    """Expose the site title and the active theme to templates."""
    return {
        "site_title": settings.SITE_TITLE,
        "site_theme": SiteOptions.load().theme,
    }
