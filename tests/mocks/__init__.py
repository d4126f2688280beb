"""
Mock implementations for external dependencies.
"""
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError


def db_error(statement="SELECT 1"):
    return OperationalError(statement, {}, Exception("database is locked"))


class MockFailingDB(MagicMock):
    """SQLAlchemy session whose statements always fail."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.execute = MagicMock(side_effect=db_error())
        self.commit = MagicMock(side_effect=db_error("COMMIT"))
        self.rollback = MagicMock(return_value=None)


class MockNotification(MagicMock):
    """Mock plyer notification facade."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.notify = MagicMock(return_value=None)
