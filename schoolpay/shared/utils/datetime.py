"""UTC datetime helper.

Every stored timestamp (createdAt, updatedAt) is timezone-aware UTC.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current UTC datetime with timezone info.

    Use this instead of datetime.now() (naive, local time) or
    datetime.utcnow() (naive, deprecated in Python 3.12).
    """
    return datetime.now(UTC)
