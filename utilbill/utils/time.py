"""Time Utilities for UTC management"""

from datetime import datetime, timezone


def get_utc_now() -> datetime:
    """
    Returns a naive UTC datetime.
    Columns are TIMESTAMP WITHOUT TIME ZONE, matching SQLite's CURRENT_TIMESTAMP.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)
