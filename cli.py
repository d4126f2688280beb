"""pomo: pomodoro timer and session manager for hackers."""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from client import PomoClient
from config import ClientConfig
from date_range import format_date
from dto.session_dto import MAX_DURATION_IN_MINUTES, SessionDataDTO
from errors import InvalidSessionDataError, PomoError, SessionNotFoundError
from log import setup_logging
from notifier import notify_on_desktop
from progress import run_countdown

logger = logging.getLogger(__name__)

_theme = Theme({
    "ok": "bold green",
    "err": "bold red",
    "accent": "cyan",
})
console = Console(theme=_theme)

HEADER = ("#", "Name", "Date", "Duration (M)")

app = typer.Typer(
    help="pomo: pomodoro timer and session manager for hackers.",
    no_args_is_help=True,
    add_completion=False,
)


def _fail(message: str) -> typer.Exit:
    console.print(message, style="err", markup=False, highlight=False)
    return typer.Exit(code=1)


def build_table(data: SessionDataDTO) -> Table:
    table = Table(show_header=True, header_style="accent", show_footer=True)
    table.add_column(HEADER[0], justify="right")
    table.add_column(HEADER[1])
    table.add_column(HEADER[2], footer="Total")
    table.add_column(HEADER[3], justify="right", footer=str(data.total_duration))
    for session in data.sessions:
        table.add_row(
            str(session.id),
            session.name,
            format_date(session.date),
            str(session.duration_in_minutes),
        )
    return table


def parse_duration(value: str) -> int:
    try:
        duration = int(value)
    except ValueError:
        raise InvalidSessionDataError(f"Incorrect argument: {value} is not a number")
    if duration < 0:
        raise InvalidSessionDataError(f"Incorrect argument: {value} must not be negative")
    if duration > MAX_DURATION_IN_MINUTES:
        raise InvalidSessionDataError(f"Incorrect argument: {value} is too large")
    return duration


# ──────────────────────────────────────────────────────────────────────────────
# Command handlers
# ──────────────────────────────────────────────────────────────────────────────
def list_sessions(config: ClientConfig, name: Optional[str] = None) -> None:
    with PomoClient(config) as client:
        if config.name_only:
            for session_name in client.list_session_names():
                typer.echo(session_name)
            return

        try:
            data = client.list_sessions(name)
        except SessionNotFoundError:
            raise _fail(f"Error: There are no sessions with name: {name}")
    console.print(build_table(data))


def record_session(config: ClientConfig, name: str, duration: str) -> None:
    if not name.strip():
        raise InvalidSessionDataError("Incorrect argument: name must not be empty")
    duration_in_minutes = parse_duration(duration)

    run_countdown(duration_in_minutes)
    with PomoClient(config) as client:
        session = client.record_session(name, duration_in_minutes)
    logger.info(f"Recorded session {session.id} ({session.name})")
    notify_on_desktop(name)


def delete_session(config: ClientConfig, session_id: int) -> None:
    with PomoClient(config) as client:
        try:
            client.delete_session(session_id)
        except SessionNotFoundError:
            raise _fail(f"Error: There is no session with id: {session_id}")
    console.print(f"Deleted session {session_id}", style="ok")


# ──────────────────────────────────────────────────────────────────────────────
# Commands
# ──────────────────────────────────────────────────────────────────────────────
@app.callback()
def _init(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging.")
):
    setup_logging(logging.DEBUG if verbose else logging.WARNING)


@app.command("list")
def list_command(
    name: Optional[str] = typer.Argument(None, help="Only list sessions with this name."),
    start_date: Optional[str] = typer.Option(
        None, "--start-date", help="First day to include (ex: 2022-Sep-19)."
    ),
    end_date: Optional[str] = typer.Option(
        None, "--end-date", help="Last day to include (ex: 2022-Sep-30)."
    ),
    nameonly: bool = typer.Option(False, "--nameonly", help="List session names only."),
):
    """List pomo sessions, optionally by name and date range."""
    try:
        config = ClientConfig.from_env(start_date=start_date, end_date=end_date, name_only=nameonly)
        list_sessions(config, name)
    except PomoError as e:
        raise _fail(e.message)


@app.command("record")
def record_command(
    name: str = typer.Argument(..., help="Session name."),
    duration: str = typer.Argument(..., help="Duration in minutes."),
):
    """Run a pomo timer and record the session when it completes."""
    try:
        config = ClientConfig.from_env()
        record_session(config, name, duration)
    except PomoError as e:
        raise _fail(e.message)


@app.command("delete")
def delete_command(session_id: int = typer.Argument(..., metavar="ID", help="Session id.")):
    """Delete a pomo session by id."""
    try:
        config = ClientConfig.from_env()
        delete_session(config, session_id)
    except PomoError as e:
        raise _fail(e.message)


def main():
    app()


if __name__ == "__main__":
    main()
