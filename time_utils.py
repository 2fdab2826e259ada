from datetime import datetime
import os
import time

import pytz

TZ = os.getenv("TIMEZONE", "UTC")

_STARTED = time.monotonic()


def local_now():
    return datetime.now(pytz.timezone(TZ))


def iso_timestamp() -> str:
    return local_now().isoformat()


def uptime_seconds() -> float:
    """Seconds since this process imported the module."""
    return round(time.monotonic() - _STARTED, 3)
