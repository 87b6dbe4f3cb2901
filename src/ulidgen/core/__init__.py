"""ULID core: codec, value type, monotonic generator and inspection.

Nothing in this package reads the environment, parses dates or prints.
The only impure inputs are the clock and random source of
:class:`MonotonicGenerator`, both of which can be injected.
"""

from ulidgen.core.codec import decode, encode, join, split
from ulidgen.core.errors import (
    ClockRegressionError,
    InvalidCharacterError,
    InvalidLengthError,
    RandomOverflowError,
    TimestampOverflowError,
    UlidError,
    UlidOverflowError,
)
from ulidgen.core.generator import MonotonicGenerator, SynchronizedGenerator
from ulidgen.core.inspection import UlidReport, inspect_ulid
from ulidgen.core.models import Ulid

__all__ = [
    "Ulid",
    "encode",
    "decode",
    "split",
    "join",
    "MonotonicGenerator",
    "SynchronizedGenerator",
    "UlidReport",
    "inspect_ulid",
    "UlidError",
    "InvalidLengthError",
    "InvalidCharacterError",
    "UlidOverflowError",
    "TimestampOverflowError",
    "RandomOverflowError",
    "ClockRegressionError",
]
