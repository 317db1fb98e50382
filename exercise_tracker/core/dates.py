"""Calendar Dates — parsing client date input and rendering stored dates.

Invariants:
    - Exercises carry date-only precision; times are discarded on input
    - render_calendar_date is locale-independent ("Mon Jan 15 2024")
    - parse_calendar_date returns None for blank input, raises ValueError on garbage

Design Decisions:
    - Month/weekday names from fixed tuples, not strftime %a/%b (locale-dependent)
    - Accepts the rendered form back as input so a logged date can be used as a bound
"""

from datetime import date, datetime

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def render_calendar_date(value: date) -> str:
    """Render a date as 'Www Mmm DD YYYY'."""
    return (
        f"{WEEKDAYS[value.weekday()]} {MONTHS[value.month - 1]} "
        f"{value.day:02d} {value.year:04d}"
    )


def parse_calendar_date(raw: str | date | None) -> date | None:
    """Parse a client-supplied date. Blank means 'not supplied'."""
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    text = raw.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        # Trailing "Z" is only understood by fromisoformat from 3.11 on
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    return _parse_rendered(text)


def _parse_rendered(text: str) -> date:
    parts = text.split()
    if len(parts) != 4 or parts[0] not in WEEKDAYS or parts[1] not in MONTHS:
        raise ValueError(f"unrecognised date: {text!r}")
    try:
        return date(int(parts[3]), MONTHS.index(parts[1]) + 1, int(parts[2]))
    except ValueError as e:
        raise ValueError(f"unrecognised date: {text!r}") from e
