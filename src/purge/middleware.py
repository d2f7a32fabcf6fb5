"""Request lifecycle hook for the purge coordinator."""

from django.contrib import messages

from .services.authorization import DjangoRequestSignals
from .services.coordinator import build_coordinator
from .services.scope import activate


class PurgeMiddleware:
    """Give each request its own coordinator and flush it after the view.

    Place after the authentication and message middleware.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        coordinator = build_coordinator()
        request.purge_coordinator = coordinator

        with activate(coordinator):
            response = self.get_response(request)
            result = coordinator.on_request_end(DjangoRequestSignals(request))

        if result.full_site:
            messages.success(request, "Varnish cache purged.", fail_silently=True)

        return response
