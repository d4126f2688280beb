from datetime import date

from models import Session as SessionModel


class SessionFactory:
    """Factory for creating Session rows."""

    @staticmethod
    def create(db, name="deep-work", duration_in_minutes=25, on=None):
        session = SessionModel(name=name, duration_in_minutes=duration_in_minutes)
        if on is not None:
            session.date = on
        db.add(session)
        db.commit()
        db.refresh(session)
        return session

    @staticmethod
    def create_batch(db, rows):
        """Create sessions from (name, duration, date) tuples."""
        return [
            SessionFactory.create(db, name, duration, on)
            for name, duration, on in rows
        ]


SEPTEMBER_SESSIONS = [
    ("deep-work", 25, date(2022, 9, 19)),
    ("reading", 30, date(2022, 9, 20)),
    ("deep-work", 50, date(2022, 9, 25)),
    ("deep-work", 25, date(2022, 10, 2)),
]
