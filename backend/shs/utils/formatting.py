"""Display formatting for listing rows."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

NS_PER_SECOND = 1_000_000_000
SIZE_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def format_size(num_bytes: int) -> str:
    """Human-readable decimal size: ``0 B``, ``10 B``, ``1.23 MB``."""
    value = float(num_bytes)
    for unit in SIZE_UNITS:
        if value < 1000 or unit == SIZE_UNITS[-1]:
            break
        value /= 1000
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {unit}"


def split_epoch_ns(timestamp_ns: int) -> tuple[int, int]:
    """Split signed epoch nanoseconds into (seconds, nanoseconds).

    Seconds round toward negative infinity so the nanosecond part is always
    in ``[0, 1e9)``; -1ns is (-1, 999999999), not (0, -1).
    """
    return divmod(timestamp_ns, NS_PER_SECOND)


def to_local_datetime(timestamp_ns: int) -> datetime:
    seconds, nanos = split_epoch_ns(timestamp_ns)
    utc = _EPOCH + timedelta(seconds=seconds, microseconds=nanos // 1000)
    return utc.astimezone()


def _civil_from_days(days: int) -> tuple[int, int, int]:
    """Proleptic Gregorian (year, month, day) for a day count from 1970-01-01.

    Works for any integer, including years outside datetime's 1..9999.
    """
    z = days + 719468
    era = z // 146097
    doe = z - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def format_utc_seconds(seconds: int) -> str:
    """``YYYY-MM-DD HH:MM:SS`` in UTC for any signed epoch second."""
    days, rem = divmod(seconds, 86400)
    year, month, day = _civil_from_days(days)
    hour, rem = divmod(rem, 3600)
    minute, second = divmod(rem, 60)
    return f"{year:04d}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}:{second:02d}"


def format_mtime(timestamp_ns: int) -> str:
    """``YYYY-MM-DD HH:MM:SS`` in local time.

    Timestamps outside the range datetime can represent are rendered in UTC
    from the exact signed second instead.
    """
    try:
        return to_local_datetime(timestamp_ns).strftime(TIMESTAMP_FORMAT)
    except (OverflowError, ValueError, OSError):
        seconds, _ = split_epoch_ns(timestamp_ns)
        return format_utc_seconds(seconds)
