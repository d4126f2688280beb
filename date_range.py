"""Date-range resolution for session queries.

Dates travel as ``YYYY-Mon-DD`` strings (``2022-Sep-19``) in query parameters
and CLI flags. Missing bounds fall back to ``DEFAULT_START_DATE`` and today;
the resolved pair is used as a closed interval.
"""

from datetime import date, datetime
from typing import Optional, Tuple

from errors import InvalidSessionDataError

DATE_LAYOUT = "%Y-%b-%d"
DEFAULT_START_DATE = "2022-Sep-19"


def format_date(value: date) -> str:
    return value.strftime(DATE_LAYOUT)


def parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, DATE_LAYOUT).date()
    except (TypeError, ValueError):
        raise InvalidSessionDataError(
            f"Invalid date: {value!r}, expected format like {DEFAULT_START_DATE}"
        )


def resolve_date_range(
    start_date: Optional[str],
    end_date: Optional[str],
    today: Optional[date] = None,
) -> Tuple[str, str]:
    """Fill in missing bounds; supplied bounds are returned verbatim."""
    if not start_date:
        start_date = DEFAULT_START_DATE
    if not end_date:
        end_date = format_date(today or date.today())
    return start_date, end_date
