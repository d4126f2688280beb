import logging

from plyer import notification

from errors import NotificationError

logger = logging.getLogger(__name__)

APP_NAME = "pomo"


def notify_on_desktop(name: str) -> None:
    message = f"{name} session completed!"
    try:
        notification.notify(title=APP_NAME, message=message, app_name=APP_NAME, timeout=10)
    except Exception as e:
        logger.error(f"Desktop notification failed: {e}")
        raise NotificationError(f"Failed to send desktop notification: {e}") from e
