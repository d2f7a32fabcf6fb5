"""Celery tasks for purge dispatch."""

from celery import shared_task

from .services.ban import OutboundPurgeRequest
from .services.transport import HttpTransport


@shared_task(ignore_result=True)
def send_purge_request(url: str, host_header: str):
    """Send a single BAN request from a worker."""
    response = HttpTransport().send(OutboundPurgeRequest(url=url, host_header=host_header))
    return response is not None
