import logging
from typing import List, Iterable
from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session as SQLSession

from models import Base, Session
from date_range import parse_date
from dto.session_dto import SessionDTO, SessionDataDTO
from errors import SessionNotFoundError, SessionPersistenceError

logger = logging.getLogger(__name__)


def calculate_total_duration(sessions: Iterable[SessionDTO]) -> int:
    return sum(session.duration_in_minutes or 0 for session in sessions)


class SessionService:
    """Queries and mutations over the session table.

    The SQLAlchemy session is injected once and shared by every operation of
    a request. Store failures surface as SessionPersistenceError and never
    produce partial results.
    """

    def __init__(self, db: SQLSession):
        self.db = db

    def _read_sessions(self, stmt) -> SessionDataDTO:
        try:
            rows = self.db.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"error during sql query: {e}")
            self.db.rollback()
            raise SessionPersistenceError("Failed to query sessions") from e

        sessions = [SessionDTO.model_validate(row) for row in rows]
        return SessionDataDTO(
            sessions=sessions,
            total_duration=calculate_total_duration(sessions),
        )

    def get_all_sessions(self, start_date: str, end_date: str) -> SessionDataDTO:
        start, end = parse_date(start_date), parse_date(end_date)
        stmt = (
            select(Session)
            .where(Session.date.between(start, end))
            .order_by(Session.id)
        )
        return self._read_sessions(stmt)

    def get_sessions_by_name(self, name: str, start_date: str, end_date: str) -> SessionDataDTO:
        start, end = parse_date(start_date), parse_date(end_date)
        stmt = (
            select(Session)
            .where(Session.name == name, Session.date.between(start, end))
            .order_by(Session.id)
        )
        data = self._read_sessions(stmt)
        if not data.sessions:
            logger.info(f"no sessions with name: {name}")
            raise SessionNotFoundError(f"There are no sessions with name: {name}", name=name)
        return data

    def get_session_names(self) -> List[str]:
        stmt = select(Session.name).distinct().order_by(Session.name)
        try:
            return list(self.db.execute(stmt).scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"error while querying session names: {e}")
            self.db.rollback()
            raise SessionPersistenceError("Failed to query session names") from e

    def create_session(self, name: str, duration_in_minutes: int) -> Session:
        session = Session(name=name, duration_in_minutes=duration_in_minutes)
        try:
            self.db.add(session)
            self.db.commit()
            self.db.refresh(session)
        except SQLAlchemyError as e:
            logger.error(f"error while inserting session: {e}")
            self.db.rollback()
            raise SessionPersistenceError("Failed to record session") from e

        logger.info(f"Created session {session.id} ({name}, {duration_in_minutes}M)")
        return session

    def delete_session(self, session_id: int) -> None:
        try:
            result = self.db.execute(delete(Session).where(Session.id == session_id))
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"error while deleting session with id {session_id}: {e}")
            self.db.rollback()
            raise SessionPersistenceError(f"Failed to delete session {session_id}") from e

        if result.rowcount == 0:
            logger.info(f"no session with id: {session_id}")
            raise SessionNotFoundError(
                f"There is no session with id: {session_id}", session_id=session_id
            )
        logger.info(f"Deleted session {session_id}")

    def reset(self) -> None:
        """Drop and recreate the session table. Irreversible."""
        tables = [Session.__table__]
        try:
            Base.metadata.drop_all(bind=self.db.connection(), tables=tables)
            self.db.commit()
        except SQLAlchemyError as e:
            # drop failures are not fatal, the create below decides the outcome
            logger.warning(f"error while dropping table: {e}")
            self.db.rollback()

        try:
            Base.metadata.create_all(bind=self.db.connection(), tables=tables)
            self.db.commit()
            # rows held in the identity map no longer exist
            self.db.expunge_all()
        except SQLAlchemyError as e:
            logger.error(f"error while creating table: {e}")
            self.db.rollback()
            raise SessionPersistenceError("Failed to recreate session table") from e

        logger.warning("Session table dropped and recreated")
