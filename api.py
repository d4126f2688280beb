import logging
from typing import List, Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, HTTPException, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from database import init_db
from date_range import resolve_date_range
from dependencies import get_session_service
from dto.session_dto import CreateSessionDTO, SessionDTO, SessionDataDTO
from errors import InvalidSessionDataError, SessionNotFoundError, SessionPersistenceError
from session_service import SessionService

logger = logging.getLogger(__name__)


# Startup and shutdown events
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Initializing pomo-server...")
    init_db()
    logger.info("Database initialized")

    yield

    logger.info("Shutting down pomo-server...")


app = FastAPI(
    title="pomo-server",
    description="Pomodoro session recorder",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"error while parsing request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request"},
    )


def _internal_error(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=detail,
    )


# ============================================================================
# SESSION ENDPOINTS
# ============================================================================


@app.get("/session", response_model=SessionDataDTO)
def list_sessions(
    start_date: Optional[str] = Query(None, alias="start-date"),
    end_date: Optional[str] = Query(None, alias="end-date"),
    service: SessionService = Depends(get_session_service),
):
    start_date, end_date = resolve_date_range(start_date, end_date)
    try:
        return service.get_all_sessions(start_date, end_date)
    except InvalidSessionDataError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except SessionPersistenceError as e:
        logger.error(f"Error listing sessions: {e}")
        raise _internal_error("Error while reading sessions")


# names may contain "/"
@app.get("/session/{name:path}", response_model=SessionDataDTO)
def list_sessions_by_name(
    name: str,
    start_date: Optional[str] = Query(None, alias="start-date"),
    end_date: Optional[str] = Query(None, alias="end-date"),
    service: SessionService = Depends(get_session_service),
):
    start_date, end_date = resolve_date_range(start_date, end_date)
    try:
        return service.get_sessions_by_name(name, start_date, end_date)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except InvalidSessionDataError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except SessionPersistenceError as e:
        logger.error(f"Error listing sessions for {name}: {e}")
        raise _internal_error("Error while reading sessions")


@app.post("/session", response_model=SessionDTO)
def record_session(
    req: CreateSessionDTO,
    service: SessionService = Depends(get_session_service),
):
    try:
        session = service.create_session(req.name, req.duration_in_minutes)
    except SessionPersistenceError as e:
        logger.error(f"Error recording session {req.name}: {e}")
        raise _internal_error("Error while recording session")

    return SessionDTO.model_validate(session)


@app.delete("/session/{session_id}")
def delete_session(
    session_id: int,
    service: SessionService = Depends(get_session_service),
):
    try:
        service.delete_session(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except SessionPersistenceError as e:
        logger.error(f"Error deleting session {session_id}: {e}")
        raise _internal_error("Error while deleting session")

    return {"status": "deleted", "session_id": session_id}


@app.get("/name", response_model=List[str])
def list_session_names(service: SessionService = Depends(get_session_service)):
    try:
        return service.get_session_names()
    except SessionPersistenceError as e:
        logger.error(f"Error listing session names: {e}")
        raise _internal_error("Error while reading session names")


# ============================================================================
# MAINTENANCE ENDPOINTS
# ============================================================================


@app.get("/maintainance/session")
def reset_sessions(service: SessionService = Depends(get_session_service)):
    try:
        service.reset()
    except SessionPersistenceError as e:
        logger.error(f"Error resetting session table: {e}")
        raise _internal_error("Error while recreating session table")

    return {"status": "reset"}
