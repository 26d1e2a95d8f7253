import re
from datetime import datetime

import pytz

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'

# SQLite INTEGER is a signed 64-bit value
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1

LEADING_INT_RE = re.compile(r'\s*([+-]?\d+)')


def utc_now():
    """Naive UTC datetime, the form stored in the database"""
    return datetime.now(pytz.utc).replace(tzinfo=None)


def format_timestamp(dt, tz_name='UTC', format=TIMESTAMP_FORMAT):
    """Render a stored UTC datetime in the given timezone"""
    if dt is None:
        return ''
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    return dt.astimezone(pytz.timezone(tz_name)).strftime(format)


def _in_range(value):
    return value if INT_MIN <= value <= INT_MAX else None


def as_int(value):
    """Coerce a path/body id to int; None when it is not an integer that fits a column."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return _in_range(value)
    if isinstance(value, float) and value.is_integer():
        return _in_range(int(value))
    if isinstance(value, str):
        try:
            return _in_range(int(value.strip()))
        except ValueError:
            return None
    return None


def parse_leading_int(value):
    """Leading integer of a string ('1.5' -> 1, '2abc' -> 2), None without one."""
    match = LEADING_INT_RE.match(value or '')
    if match is None:
        return None
    return _in_range(int(match.group(1)))
