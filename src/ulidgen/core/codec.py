"""Crockford base-32 codec for 128-bit ULID values.

A ULID is a 128-bit unsigned integer::

    value = (timestamp_ms << 80) | random

The text form is 26 characters, five bits each, most significant first.
26 x 5 = 130 bits, so the leading character only carries the top three bits of
the value and can never exceed ``7``.

All functions here are pure and safe to call from any thread.
"""

from __future__ import annotations

from ulidgen.core.errors import (
    InvalidCharacterError,
    InvalidLengthError,
    TimestampOverflowError,
    UlidOverflowError,
)

ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"

TEXT_LENGTH = 26
BINARY_LENGTH = 16

TIMESTAMP_BITS = 48
RANDOM_BITS = 80

MAX_TIMESTAMP = (1 << TIMESTAMP_BITS) - 1
MAX_RANDOM = (1 << RANDOM_BITS) - 1
MAX_VALUE = (1 << (TIMESTAMP_BITS + RANDOM_BITS)) - 1

# Largest value the leading character may encode (3 significant bits).
_MAX_LEADING = 7

_DECODE_TABLE: dict[str, int] = {}
for _index, _char in enumerate(ALPHABET):
    _DECODE_TABLE[_char] = _index
    _DECODE_TABLE[_char.lower()] = _index
del _index, _char


def encode(value: int, lowercase: bool = False) -> str:
    """Encode a 128-bit integer as 26 Crockford base-32 characters."""
    if not 0 <= value <= MAX_VALUE:
        raise UlidOverflowError(f"value {value} does not fit in 128 bits")

    chars = []
    for _ in range(TEXT_LENGTH):
        chars.append(ALPHABET[value & 0x1F])
        value >>= 5
    text = "".join(reversed(chars))
    return text.lower() if lowercase else text


def decode(text: str) -> int:
    """Decode 26 Crockford base-32 characters (any case) into an integer.

    Raises:
        InvalidLengthError: ``text`` is not exactly 26 characters.
        InvalidCharacterError: a character is outside the alphabet.
        UlidOverflowError: the leading character encodes more than 3 bits.
    """
    if len(text) != TEXT_LENGTH:
        raise InvalidLengthError(len(text), TEXT_LENGTH)

    value = 0
    for position, char in enumerate(text):
        digit = _DECODE_TABLE.get(char)
        if digit is None:
            raise InvalidCharacterError(char, position)
        value = (value << 5) | digit

    if value > MAX_VALUE:
        raise UlidOverflowError(
            f"{text!r} exceeds 128 bits: leading character must be 0-{_MAX_LEADING}"
        )
    return value


def split(value: int) -> tuple[int, int]:
    """Return ``(timestamp_ms, random)`` for a 128-bit value."""
    return value >> RANDOM_BITS, value & MAX_RANDOM


def join(timestamp_ms: int, random: int) -> int:
    """Compose a 128-bit value from its timestamp and random fields."""
    if not 0 <= timestamp_ms <= MAX_TIMESTAMP:
        raise TimestampOverflowError(timestamp_ms)
    if not 0 <= random <= MAX_RANDOM:
        raise ValueError(f"random component {random} does not fit in 80 bits")
    return (timestamp_ms << RANDOM_BITS) | random


def to_bytes(value: int) -> bytes:
    """Return the 16-byte big-endian form of a 128-bit value."""
    if not 0 <= value <= MAX_VALUE:
        raise UlidOverflowError(f"value {value} does not fit in 128 bits")
    return value.to_bytes(BINARY_LENGTH, "big")


def from_bytes(data: bytes) -> int:
    """Decode a 16-byte big-endian buffer."""
    if len(data) != BINARY_LENGTH:
        raise InvalidLengthError(len(data), BINARY_LENGTH)
    return int.from_bytes(data, "big")
