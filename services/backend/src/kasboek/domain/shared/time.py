"""Time utilities for the domain layer."""

from datetime import date, datetime, timezone

from dateutil.relativedelta import relativedelta


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


def today_utc() -> date:
    """Return current date in UTC (timezone-aware)."""
    return datetime.now(tz=timezone.utc).date()


def months_before(reference: date, months: int) -> date:
    """Return the date `months` calendar months before `reference`.

    Days past the end of the target month are clamped, so 31 May minus
    three months is 28/29 February.
    """
    return reference - relativedelta(months=months)
