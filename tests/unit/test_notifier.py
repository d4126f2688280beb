"""
Unit tests for notifier.py
"""
import pytest
from unittest.mock import patch

from errors import NotificationError
from notifier import notify_on_desktop
from tests.mocks import MockNotification


class TestNotifyOnDesktop:
    """Test desktop notifications."""

    def test_sends_completion_message(self):
        mock_notification = MockNotification()
        with patch("notifier.notification", mock_notification):
            notify_on_desktop("deep-work")

        kwargs = mock_notification.notify.call_args.kwargs
        assert kwargs["title"] == "pomo"
        assert kwargs["message"] == "deep-work session completed!"

    def test_failure_raises_notification_error(self):
        mock_notification = MockNotification()
        mock_notification.notify.side_effect = NotImplementedError("no backend")

        with patch("notifier.notification", mock_notification):
            with pytest.raises(NotificationError) as exc:
                notify_on_desktop("deep-work")

        assert "no backend" in exc.value.message
