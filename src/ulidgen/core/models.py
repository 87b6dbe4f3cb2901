"""Immutable ULID value type."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from ulidgen.core import codec
from ulidgen.core.errors import UlidOverflowError

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True, order=True, slots=True)
class Ulid:
    """A 128-bit ULID, ordered by its integer value.

    Ordering by value is the same as ordering by canonical text, so sorting
    ``Ulid`` objects sorts them by timestamp first.
    """

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= codec.MAX_VALUE:
            raise UlidOverflowError(f"value {self.value} does not fit in 128 bits")

    @classmethod
    def from_str(cls, text: str) -> "Ulid":
        return cls(codec.decode(text))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Ulid":
        return cls(codec.from_bytes(data))

    @classmethod
    def from_parts(cls, timestamp_ms: int, random: int) -> "Ulid":
        return cls(codec.join(timestamp_ms, random))

    @property
    def timestamp_ms(self) -> int:
        return codec.split(self.value)[0]

    @property
    def random(self) -> int:
        return codec.split(self.value)[1]

    @property
    def bytes(self) -> bytes:
        return codec.to_bytes(self.value)

    @property
    def hex(self) -> str:
        return self.bytes.hex()

    @property
    def datetime(self) -> datetime | None:
        """UTC datetime of the timestamp, or ``None`` past ``datetime.max``."""
        try:
            return _EPOCH + timedelta(milliseconds=self.timestamp_ms)
        except OverflowError:
            return None

    def to_str(self, lowercase: bool = False) -> str:
        return codec.encode(self.value, lowercase=lowercase)

    def __str__(self) -> str:
        return codec.encode(self.value)

    def __int__(self) -> int:
        return self.value
