"""Conversion between wire timestamps and datetimes."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from firefluent.errors import DeserializeError

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_NANOS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True)
class Timestamp:
    """Seconds and nanoseconds since the Unix epoch."""

    seconds: int
    nanos: int = 0

    def __str__(self) -> str:
        return f"{self.seconds}s+{self.nanos}ns"


def from_timestamp(ts: Timestamp) -> datetime:
    """Return the UTC datetime for ts; sub-microsecond precision is dropped."""
    message = f"Invalid or out-of-range datetime: {ts}"
    if not 0 <= ts.nanos < _NANOS_PER_SECOND:
        raise DeserializeError(message)
    try:
        return _EPOCH + timedelta(seconds=ts.seconds, microseconds=ts.nanos // 1000)
    except OverflowError:
        raise DeserializeError(message) from None


def to_timestamp(dt: datetime) -> Timestamp:
    """Return the timestamp for dt; a naive datetime is taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    delta = dt - _EPOCH
    return Timestamp(
        seconds=delta.days * 86400 + delta.seconds,
        nanos=delta.microseconds * 1000,
    )