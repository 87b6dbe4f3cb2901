"""Monotonic ULID generation.

A :class:`MonotonicGenerator` guarantees that every ULID it returns is
strictly greater than the one before it, including when several are
requested within the same millisecond. Same-millisecond values reuse the
previous random payload incremented by one.

Generators hold their own state. Nothing here is process-global, so two
generators produce two independent monotonic streams.
"""

from __future__ import annotations

import logging
import secrets
import threading
import time
from typing import Callable, Literal

from ulidgen.core import codec
from ulidgen.core.errors import (
    ClockRegressionError,
    RandomOverflowError,
    TimestampOverflowError,
)
from ulidgen.core.models import Ulid

logger = logging.getLogger(__name__)

RegressionPolicy = Literal["clamp", "reject"]
REGRESSION_POLICIES: tuple[str, ...] = ("clamp", "reject")

Clock = Callable[[], int]
RandomSource = Callable[[int], bytes]

_RANDOM_BYTES = codec.RANDOM_BITS // 8


def wall_clock_ms() -> int:
    """Current Unix time in milliseconds."""
    return time.time_ns() // 1_000_000


class MonotonicGenerator:
    """Produce a strictly increasing sequence of ULIDs.

    Args:
        clock: Zero-argument callable returning Unix milliseconds. Used when
            :meth:`generate` is called without a timestamp.
        random_source: Callable returning ``n`` random bytes.
        on_regression: What to do when the requested timestamp is earlier
            than the previous ULID's. ``"clamp"`` keeps the previous
            timestamp and increments its random payload; ``"reject"`` raises
            :class:`ClockRegressionError`.

    Not thread-safe; see :class:`SynchronizedGenerator`.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        random_source: RandomSource | None = None,
        on_regression: RegressionPolicy = "clamp",
    ) -> None:
        if on_regression not in REGRESSION_POLICIES:
            raise ValueError(
                f"on_regression must be one of {', '.join(REGRESSION_POLICIES)}, "
                f"got {on_regression!r}"
            )
        self._clock = clock or wall_clock_ms
        self._random_source = random_source or secrets.token_bytes
        self.on_regression = on_regression
        self.previous: Ulid | None = None

    def generate(self, timestamp_ms: int | None = None) -> Ulid:
        """Return the next ULID, pinned to ``timestamp_ms`` when given.

        Raises:
            TimestampOverflowError: ``timestamp_ms`` does not fit in 48 bits.
            RandomOverflowError: the random payload for this millisecond is
                exhausted. State is left unchanged.
            ClockRegressionError: ``timestamp_ms`` is earlier than the
                previous ULID and the policy is ``"reject"``.
        """
        if timestamp_ms is None:
            timestamp_ms = self._clock()
        if not 0 <= timestamp_ms <= codec.MAX_TIMESTAMP:
            raise TimestampOverflowError(timestamp_ms)

        previous = self.previous
        if previous is None or timestamp_ms > previous.timestamp_ms:
            ulid = Ulid.from_parts(timestamp_ms, self._fresh_random())
        elif timestamp_ms == previous.timestamp_ms:
            ulid = self._increment(previous)
        elif self.on_regression == "reject":
            logger.debug(
                "Rejecting timestamp %d earlier than previous %d",
                timestamp_ms,
                previous.timestamp_ms,
            )
            raise ClockRegressionError(timestamp_ms, previous.timestamp_ms)
        else:
            logger.debug(
                "Clamping timestamp %d to previous %d",
                timestamp_ms,
                previous.timestamp_ms,
            )
            ulid = self._increment(previous)

        self.previous = ulid
        return ulid

    def _fresh_random(self) -> int:
        data = self._random_source(_RANDOM_BYTES)
        if len(data) != _RANDOM_BYTES:
            raise ValueError(
                f"random source returned {len(data)} bytes, expected {_RANDOM_BYTES}"
            )
        return int.from_bytes(data, "big")

    @staticmethod
    def _increment(previous: Ulid) -> Ulid:
        timestamp_ms, random = codec.split(previous.value)
        if random == codec.MAX_RANDOM:
            raise RandomOverflowError(timestamp_ms)
        return Ulid.from_parts(timestamp_ms, random + 1)


class SynchronizedGenerator:
    """Share one monotonic stream between threads.

    Every call to :meth:`generate` runs under a single lock, so values are
    strictly increasing across all threads, not only within each one.
    """

    def __init__(self, generator: MonotonicGenerator | None = None) -> None:
        self._generator = generator or MonotonicGenerator()
        self._lock = threading.Lock()

    @property
    def previous(self) -> Ulid | None:
        with self._lock:
            return self._generator.previous

    def generate(self, timestamp_ms: int | None = None) -> Ulid:
        with self._lock:
            return self._generator.generate(timestamp_ms)
