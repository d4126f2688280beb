"""Blocking countdown shown while a pomodoro session runs."""

import time
from typing import Callable

import typer

SPIN_CHARS = "|/-\\"


def format_seconds(seconds: int) -> str:
    if seconds < 10:
        return f" {seconds} Sec/s"
    return f"{seconds} Sec/s"


def format_duration(elapsed: int) -> str:
    minutes, seconds = divmod(elapsed, 60)
    if minutes == 0:
        return format_seconds(elapsed)
    return f"{minutes} Min/s, " + format_seconds(seconds)


def percentage_done(elapsed: int, total: int) -> float:
    return (elapsed + 1) * 100 / total


def render_tick(elapsed: int, total: int) -> str:
    spin_char = SPIN_CHARS[elapsed % len(SPIN_CHARS)]
    return (
        f"\r {spin_char}\tTime Elapsed: {format_duration(elapsed)}"
        f"     Percentage Done: {percentage_done(elapsed, total):.0f}% "
    )


def run_countdown(
    duration_in_minutes: int,
    sleep: Callable[[float], None] = time.sleep,
    echo: Callable[..., None] = typer.echo,
) -> None:
    """Block for the whole session, redrawing the status line once a second."""
    total = duration_in_minutes * 60
    for elapsed in range(total):
        echo(render_tick(elapsed, total), nl=False)
        sleep(1)
    echo("\n")
