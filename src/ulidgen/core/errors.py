"""Error taxonomy for ULID encoding and generation."""

from __future__ import annotations


class UlidError(ValueError):
    """Base class for every error raised by the ULID core."""


class InvalidLengthError(UlidError):
    """Raised when text or binary input has the wrong length."""

    def __init__(self, actual: int, expected: int) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(f"invalid length: expected {expected}, got {actual}")


class InvalidCharacterError(UlidError):
    """Raised when text contains a character outside the Crockford alphabet."""

    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position
        super().__init__(f"invalid character {char!r} at position {position}")


class UlidOverflowError(UlidError):
    """Raised when a value does not fit in 128 bits."""


class TimestampOverflowError(UlidError):
    """Raised when a timestamp does not fit in the 48-bit field."""

    def __init__(self, timestamp_ms: int) -> None:
        self.timestamp_ms = timestamp_ms
        super().__init__(
            f"timestamp {timestamp_ms} is outside the 48-bit millisecond range"
        )


class RandomOverflowError(UlidError):
    """Raised when incrementing the 80-bit random field would wrap around."""

    def __init__(self, timestamp_ms: int) -> None:
        self.timestamp_ms = timestamp_ms
        super().__init__(
            f"random component overflow: no ULIDs left for millisecond {timestamp_ms}"
        )


class ClockRegressionError(UlidError):
    """Raised when a requested timestamp is earlier than the previous ULID."""

    def __init__(self, requested_ms: int, previous_ms: int) -> None:
        self.requested_ms = requested_ms
        self.previous_ms = previous_ms
        super().__init__(
            f"timestamp {requested_ms} is earlier than previously issued {previous_ms}"
        )
