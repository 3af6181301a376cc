from __future__ import annotations

from datetime import date, datetime, timedelta

from ..core.constants import ISO_DATE_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def to_iso(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def today_iso() -> str:
    """Today's date as an ISO string.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return to_iso(date.today())


def days_before(value: str, days: int) -> str:
    return to_iso(parse_iso_date(value) - timedelta(days=days))


def week_days(week_of: date) -> list[date]:
    """Monday to Friday of the week containing ``week_of``."""
    monday = week_of - timedelta(days=week_of.weekday())
    return [monday + timedelta(days=i) for i in range(5)]
