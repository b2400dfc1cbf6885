"""Date manipulation utilities"""

from datetime import datetime, timedelta, timezone

from dateutil.relativedelta import relativedelta


def add_months(moment: datetime, months: int) -> datetime:
    """
    Advance by calendar months, normalizing day overflow into the next month.

    Jan 31 + 1 month -> Mar 3 (Mar 2 in a leap year), not Feb 28.
    """
    first_of_month = moment.replace(day=1) + relativedelta(months=months)
    return first_of_month + timedelta(days=moment.day - 1)


def to_rfc3339(moment: datetime) -> str:
    """Format as RFC 3339, treating naive datetimes as UTC"""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = moment.isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text
