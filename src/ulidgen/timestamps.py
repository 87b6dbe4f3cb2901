"""Resolve ``--timestamp`` / ``--datetime`` input into Unix milliseconds."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)

# RFC 3339 date-time: extended form only, offset optional here so a missing
# one gets its own error message.
_RFC3339 = re.compile(
    r"(?P<date>\d{4}-\d{2}-\d{2})[Tt ]"
    r"(?P<time>\d{2}:\d{2}:\d{2})(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})?",
    re.ASCII,
)


class TimestampResolutionError(ValueError):
    """Raised when a pinned timestamp cannot be turned into Unix milliseconds."""


def parse_datetime_ms(text: str) -> int:
    """Parse an RFC 3339 datetime into Unix milliseconds.

    The offset is mandatory. Sub-millisecond digits are truncated.
    """
    match = _RFC3339.fullmatch(text.strip())
    if match is None:
        raise TimestampResolutionError(
            f"could not parse `{text}` as an RFC 3339 datetime"
        )
    if match["offset"] is None:
        raise TimestampResolutionError(
            f"datetime `{text}` has no UTC offset (use `Z` or `+HH:MM`)"
        )

    fraction = (match["fraction"] or "")[:6]
    offset = "+00:00" if match["offset"] in ("Z", "z") else match["offset"]
    normalized = f"{match['date']}T{match['time']}"
    if fraction:
        normalized += f".{fraction.ljust(6, '0')}"
    try:
        moment = datetime.fromisoformat(normalized + offset)
    except ValueError as exc:
        raise TimestampResolutionError(
            f"could not parse `{text}` as an RFC 3339 datetime"
        ) from exc

    millis = (moment - _EPOCH) // _ONE_MS
    if millis < 0:
        raise TimestampResolutionError(
            f"datetime `{text}` is before the Unix epoch, which ULIDs cannot represent"
        )
    return millis


def resolve_timestamp(
    timestamp_ms: int | None = None,
    datetime_text: str | None = None,
) -> int | None:
    """Return the pinned timestamp, or ``None`` to use the wall clock."""
    if timestamp_ms is not None and datetime_text is not None:
        raise TimestampResolutionError("pin either a timestamp or a datetime, not both")
    if timestamp_ms is not None:
        if timestamp_ms < 0:
            raise TimestampResolutionError(
                f"timestamp {timestamp_ms} is before the Unix epoch"
            )
        return timestamp_ms
    if datetime_text is not None:
        return parse_datetime_ms(datetime_text)
    return None
