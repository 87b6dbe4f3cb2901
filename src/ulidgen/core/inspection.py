"""Decode a ULID string into a human-readable report."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ulidgen.core import codec
from ulidgen.core.models import Ulid

_RANDOM_HEX_DIGITS = codec.RANDOM_BITS // 4


def _rfc3339(moment: datetime) -> str:
    # Whole seconds carry no fraction, otherwise milliseconds.
    timespec = "milliseconds" if moment.microsecond else "seconds"
    return moment.isoformat(timespec=timespec)


@dataclass(frozen=True, slots=True)
class UlidReport:
    """Components of a decoded ULID."""

    ulid: str
    timestamp_ms: int
    datetime: str | None
    random: int
    random_hex: str
    bytes_hex: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "ulid": self.ulid,
            "timestamp_ms": self.timestamp_ms,
            "datetime": self.datetime,
            "random": self.random_hex,
            "bytes": self.bytes_hex,
        }


def inspect_ulid(text: str) -> UlidReport:
    """Decode ``text`` (any case) and describe its fields.

    ``datetime`` is RFC 3339 (milliseconds only when non-zero), or ``None`` when the
    timestamp lies beyond year 9999. Decode errors propagate unchanged.
    """
    ulid = Ulid.from_str(text)
    moment = ulid.datetime
    return UlidReport(
        ulid=str(ulid),
        timestamp_ms=ulid.timestamp_ms,
        datetime=_rfc3339(moment) if moment else None,
        random=ulid.random,
        random_hex=f"0x{ulid.random:0{_RANDOM_HEX_DIGITS}x}",
        bytes_hex=ulid.hex,
    )
