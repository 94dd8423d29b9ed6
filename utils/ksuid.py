"""
KSUID - K-Sortable Unique Identifier.

Time-sortable, globally unique IDs without coordination.
Format: 4 bytes timestamp + 16 bytes random = 27 char base62 string.
"""

import os
import struct

from core.errors import InvalidCharacterError, InvalidFormatError, KsuidParseError, ValueTooLargeError
from utils import base62
from utils.timestamp import format_timestamp, from_unix_seconds, now_seconds, to_unix_seconds

# KSUID epoch: 2014-05-13
KSUID_EPOCH = 1400000000

TIMESTAMP_LENGTH = 4
PAYLOAD_LENGTH = 16
RAW_LENGTH = TIMESTAMP_LENGTH + PAYLOAD_LENGTH
ENCODED_LENGTH = 27

# Encodings of 0 and 2^160 - 1
MIN_ENCODED = "0" * ENCODED_LENGTH
MAX_ENCODED = "aWgEPTl1tmebfsQzFP4bxwgy80V"


class ParsedKsuid:
    """Timestamp and random payload recovered from an encoded KSUID."""

    __slots__ = ("ksuid", "timestamp", "random")

    def __init__(self, ksuid, timestamp, random):
        self.ksuid = ksuid
        self.timestamp = timestamp
        self.random = random

    @property
    def unix_seconds(self):
        return int(self.timestamp.timestamp())

    def __iter__(self):
        return iter((self.timestamp, self.random))

    def __eq__(self, other):
        if not isinstance(other, ParsedKsuid):
            return NotImplemented
        return (self.ksuid, self.timestamp, self.random) == (other.ksuid, other.timestamp, other.random)

    def __hash__(self):
        return hash(self.ksuid)

    def __repr__(self):
        return f"ParsedKsuid({self.ksuid!r}, timestamp={self.timestamp.isoformat()})"

    def to_dict(self):
        return {
            "ksuid": self.ksuid,
            "timestamp": format_timestamp(self.unix_seconds * 1_000_000),
            "unix_seconds": self.unix_seconds,
            "random": self.random.hex(),
        }


def ksuid_from_parts(now, payload):
    """Encode a KSUID from a unix time and a 16-byte payload.

    Times outside the 32-bit window after the epoch wrap around.
    """
    if now is None:
        now = now_seconds()
    if len(payload) != PAYLOAD_LENGTH:
        raise ValueError(f"Payload must be {PAYLOAD_LENGTH} bytes, got {len(payload)}")

    # 4 bytes: seconds since KSUID epoch
    offset = (to_unix_seconds(now) - KSUID_EPOCH) & 0xFFFFFFFF
    raw = struct.pack(">I", offset) + bytes(payload)

    return base62.encode(raw).rjust(ENCODED_LENGTH, "0")


def generate_ksuid(now=None, random_source=None):
    """Generate a 27-character sortable unique ID.

    now: unix seconds (int/float) or datetime, defaults to the current time.
    random_source: callable returning n random bytes, defaults to os.urandom.
    """
    random_source = random_source or os.urandom
    return ksuid_from_parts(now, random_source(PAYLOAD_LENGTH))


def raw_ksuid(value):
    """The 20 raw bytes behind an encoded KSUID."""
    if not isinstance(value, str) or len(value) != ENCODED_LENGTH:
        raise InvalidFormatError(f"KSUID must be a {ENCODED_LENGTH}-character string", value=value)

    try:
        decoded = base62.decode(value)
    except InvalidCharacterError as exc:
        raise InvalidFormatError(f"Invalid KSUID: {exc}", value=value, cause=exc) from exc

    if len(decoded) > RAW_LENGTH:
        raise ValueTooLargeError("Value is larger than the maximum possible KSUID", value=value)

    return decoded.rjust(RAW_LENGTH, b"\x00")


def parse_ksuid(value):
    """Split an encoded KSUID into its UTC timestamp and random payload.

    Raises InvalidFormatError or ValueTooLargeError.
    """
    raw = raw_ksuid(value)
    (offset,) = struct.unpack(">I", raw[:TIMESTAMP_LENGTH])

    try:
        timestamp = from_unix_seconds(offset + KSUID_EPOCH)
    except (OverflowError, OSError, ValueError) as exc:
        raise InvalidFormatError("KSUID timestamp is out of range", value=value, cause=exc) from exc

    return ParsedKsuid(value, timestamp, raw[TIMESTAMP_LENGTH:])


def is_valid_ksuid(value):
    try:
        raw_ksuid(value)
    except KsuidParseError:
        return False
    return True
