"""Error taxonomy shared by the pomo server and client."""

from typing import Optional


class PomoError(Exception):
    """Base class for pomo errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class SessionNotFoundError(PomoError):
    """Raised when a name or id lookup matches no session."""

    def __init__(self, message: str, name: Optional[str] = None, session_id: Optional[int] = None):
        self.name = name
        self.session_id = session_id
        super().__init__(message)


class InvalidSessionDataError(PomoError):
    """Raised for malformed dates, durations or request bodies."""
    pass


class SessionPersistenceError(PomoError):
    """Raised when a query or statement against the store fails."""
    pass


class ServerConnectionError(PomoError):
    """Raised by the client when pomo-server cannot be reached."""
    pass


class ServerResponseError(PomoError):
    """Raised by the client for an unexpected status or an undecodable body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class NotificationError(PomoError):
    """Raised when the desktop notification cannot be delivered."""
    pass


class ConfigurationError(PomoError):
    """Raised when an environment setting cannot be parsed."""
    pass
