"""Date helpers for picking and labelling the receipt day."""

from datetime import date, datetime, timedelta

DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def yesterday(today: date | None = None) -> date:
    """Return the local calendar day before *today* (default: now)."""
    today = today or date.today()
    return today - timedelta(days=1)


def parse_day(s: str) -> date:
    """Parse YYYY-MM-DD into a date. Raises ValueError on anything else."""
    return datetime.strptime(s, "%Y-%m-%d").date()


def day_name(d: date) -> str:
    """Three-letter English weekday, independent of locale."""
    return DAY_NAMES[d.weekday()]


def format_day(d: date) -> str:
    """Format as 'Feb 27, 2026'."""
    return f"{MONTH_NAMES[d.month - 1]} {d.day}, {d.year}"
