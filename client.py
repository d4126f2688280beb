"""HTTP client used by the pomo CLI to talk to pomo-server."""

import logging
from typing import List, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from config import ClientConfig
from dto.session_dto import CreateSessionDTO, SessionDTO, SessionDataDTO
from errors import ServerConnectionError, ServerResponseError, SessionNotFoundError

logger = logging.getLogger(__name__)

SERVER_CONN_FAIL_MESSAGE = "Error: pomo failed to connect to pomo-server. Maybe it's not running?"
SERVER_GENERIC_ERR_MESSAGE = "Unable to perform command. Some issue occured."


def build_session_url(
    base_url: str,
    name: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> str:
    """Build the list URL, adding only the date bounds that were given."""
    url = base_url + "/session"
    if name:
        url += "/" + quote(name, safe="")
    params = {}
    if start_date:
        params["start-date"] = start_date
    if end_date:
        params["end-date"] = end_date
    if params:
        url += "?" + str(httpx.QueryParams(params))
    return url


class PomoClient:

    def __init__(self, config: ClientConfig, transport: Optional[httpx.BaseTransport] = None):
        self.config = config
        self._http = httpx.Client(timeout=config.timeout, transport=transport)

    def close(self) -> None:
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        logger.debug(f"{method} {url}")
        try:
            resp = self._http.request(method, url, **kwargs)
        except httpx.TransportError as e:
            logger.debug(f"Connection to {url} failed: {e}")
            raise ServerConnectionError(SERVER_CONN_FAIL_MESSAGE) from e

        if resp.status_code >= 500:
            raise ServerResponseError(SERVER_GENERIC_ERR_MESSAGE, status_code=resp.status_code)
        return resp

    def list_sessions(self, name: Optional[str] = None) -> SessionDataDTO:
        url = build_session_url(
            self.config.base_url, name, self.config.start_date, self.config.end_date
        )
        resp = self._request("GET", url)
        if resp.status_code == httpx.codes.NOT_FOUND:
            raise SessionNotFoundError(f"There are no sessions with name: {name}", name=name)
        self._raise_for_status(resp)

        try:
            return SessionDataDTO.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise ServerResponseError(f"Failed to decode session data: {e}") from e

    def list_session_names(self) -> List[str]:
        resp = self._request("GET", self.config.base_url + "/name")
        self._raise_for_status(resp)
        try:
            names = resp.json()
        except ValueError as e:
            raise ServerResponseError(f"Failed to decode session names: {e}") from e
        return list(names or [])

    def record_session(self, name: str, duration_in_minutes: int) -> SessionDTO:
        body = CreateSessionDTO(name=name, duration_in_minutes=duration_in_minutes)
        resp = self._request("POST", self.config.base_url + "/session", json=body.model_dump())
        self._raise_for_status(resp)
        try:
            return SessionDTO.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise ServerResponseError(f"Failed to decode recorded session: {e}") from e

    def delete_session(self, session_id: int) -> None:
        resp = self._request("DELETE", f"{self.config.base_url}/session/{session_id}")
        if resp.status_code == httpx.codes.NOT_FOUND:
            raise SessionNotFoundError(
                f"There is no session with id: {session_id}", session_id=session_id
            )
        self._raise_for_status(resp)

    @staticmethod
    def _raise_for_status(resp: httpx.Response) -> None:
        if resp.is_success:
            return
        try:
            detail = resp.json()["detail"]
        except (ValueError, KeyError, TypeError):
            detail = resp.text
        raise ServerResponseError(f"Error: {detail}", status_code=resp.status_code)
