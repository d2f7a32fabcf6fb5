"""Tests for BAN request delivery."""

from unittest.mock import patch

import pytest
import requests
from django.contrib.auth.models import User
from django.test import override_settings
from kombu.exceptions import OperationalError

from blog.models import Post
from purge.services.ban import OutboundPurgeRequest
from purge.services.transport import CeleryTransport, HttpTransport, get_transport
from purge.tasks import send_purge_request

BAN = OutboundPurgeRequest(url="http://10.0.0.5/foo/.*", host_header="example.com")


class TestHttpTransport:
    """Tests for HttpTransport."""

    def test_sends_ban_with_host_header(self, ban_requests):
        HttpTransport(timeout=3).send(BAN)

        ban_requests.assert_called_once_with(
            "BAN",
            "http://10.0.0.5/foo/.*",
            headers={"Host": "example.com"},
            timeout=3,
        )

    @override_settings(VARNISH_PURGE_TIMEOUT=7)
    def test_timeout_from_settings(self, ban_requests):
        HttpTransport().send(BAN)

        assert ban_requests.call_args[1]["timeout"] == 7

    def test_connection_error_is_swallowed(self, ban_requests):
        ban_requests.side_effect = requests.ConnectionError("Connection refused")

        assert HttpTransport().send(BAN) is None

    def test_timeout_is_swallowed(self, ban_requests):
        ban_requests.side_effect = requests.Timeout("Request timed out")

        assert HttpTransport().send(BAN) is None

    def test_error_status_is_not_inspected(self, ban_requests):
        ban_requests.return_value.status_code = 405

        response = HttpTransport().send(BAN)

        assert response is ban_requests.return_value
        response.raise_for_status.assert_not_called()


class TestGetTransport:
    @override_settings(VARNISH_PURGE_ASYNC=False)
    def test_sync_by_default(self):
        assert isinstance(get_transport(), HttpTransport)

    @override_settings(VARNISH_PURGE_ASYNC=True)
    def test_celery_when_async(self):
        assert isinstance(get_transport(), CeleryTransport)


class TestCeleryTransport:
    @patch("purge.tasks.send_purge_request.delay")
    def test_queues_task(self, mock_delay):
        CeleryTransport().send(BAN)

        mock_delay.assert_called_once_with("http://10.0.0.5/foo/.*", "example.com")

    def test_eager_task_sends_request(self, ban_requests):
        CeleryTransport().send(BAN)

        ban_requests.assert_called_once()
        assert ban_requests.call_args[0] == ("BAN", "http://10.0.0.5/foo/.*")

    @patch("purge.tasks.send_purge_request.delay")
    def test_unreachable_broker_is_swallowed(self, mock_delay, caplog):
        mock_delay.side_effect = OperationalError("broker down")

        assert CeleryTransport().send(BAN) is None
        assert "broker down" in caplog.text

    @pytest.mark.django_db
    @override_settings(VARNISH_PURGE_ASYNC=True)
    @patch("purge.tasks.send_purge_request.delay")
    def test_unreachable_broker_does_not_break_save(self, mock_delay):
        mock_delay.side_effect = OperationalError("broker down")
        author = User.objects.create_user("jane")

        post = Post.objects.create(title="Hello", slug="hello", status=Post.PUBLISH, author=author)

        assert Post.objects.filter(pk=post.pk).exists()
        assert mock_delay.called


class TestSendPurgeRequestTask:
    def test_returns_true_on_response(self, ban_requests):
        assert send_purge_request("http://example.com/", "example.com") is True

    def test_returns_false_on_failure(self, ban_requests):
        ban_requests.side_effect = requests.ConnectionError("down")

        assert send_purge_request("http://example.com/", "example.com") is False
