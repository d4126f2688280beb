"""Database models for pomo session records."""

from datetime import date
from sqlalchemy import Column, Integer, Text, Date, func
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Session(Base):
    """One recorded pomodoro work interval."""

    __tablename__ = "session"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, index=True)
    date = Column(
        Date,
        default=date.today,
        server_default=func.current_date(),
        nullable=False,
        index=True,
    )
    duration_in_minutes = Column(Integer)

    def __repr__(self):
        return f"<Session(id={self.id}, name={self.name}, date={self.date})>"
