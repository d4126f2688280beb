from fastapi import Depends
from sqlalchemy.orm import Session as SQLSession
from database import get_db
from session_service import SessionService


def get_session_service(db: SQLSession = Depends(get_db)) -> SessionService:
    return SessionService(db)
