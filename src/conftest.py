"""Global pytest fixtures."""

from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def ban_requests():
    """Intercept outgoing BAN requests for every test."""
    with patch("purge.services.transport.requests.request") as mock_request:
        mock_request.return_value.status_code = 200
        yield mock_request
