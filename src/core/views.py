"""Core views."""

from django.http import JsonResponse


def health(request):
    """Health check endpoint."""
    return JsonResponse({"status": "ok"})
