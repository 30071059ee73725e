from datetime import datetime, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from ideabank.config import APP_TIMEZONE

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DAY_FORMAT = "%Y-%m-%d"


def server_timezone() -> Optional[tzinfo]:
    # None makes datetime.astimezone() use the host's local zone
    return ZoneInfo(APP_TIMEZONE) if APP_TIMEZONE else None


def normalize_datetime(value: Optional[datetime], tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """
    Bring an idea date to its persisted form: naive, server-local, whole seconds.

    Aware values are converted to ``tz`` (default: the configured server zone)
    before the offset is dropped. Naive values are taken as already local.
    """
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(tz or server_timezone()).replace(tzinfo=None)
    return value.replace(microsecond=0)


def format_datetime(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.strftime(DATETIME_FORMAT)
