"""
Base62 encoding over the radix codec.

Alphabet 0-9, A-Z, a-z, in ASCII order, so encoded strings of equal length
sort the same way as the integers they hold. No padding is applied here.
"""

from core.errors import InvalidCharacterError
from utils.radix import (
    bytes_to_integer,
    digits_to_integer,
    integer_to_bytes,
    integer_to_digits,
)

BASE62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
RADIX = len(BASE62)

_BASE62_CHAR_TO_INT = {char: i for i, char in enumerate(BASE62)}


def encode_integer(num):
    """Encode a non-negative integer. Zero encodes to ''."""
    return "".join(BASE62[digit] for digit in integer_to_digits(num, RADIX))


def decode_integer(encoded):
    """Decode a base62 string to an integer.

    Raises InvalidCharacterError on a symbol outside the alphabet.
    """
    digits = []
    for position, char in enumerate(encoded):
        try:
            digits.append(_BASE62_CHAR_TO_INT[char])
        except KeyError:
            raise InvalidCharacterError(
                f"Invalid base62 character {char!r} at position {position}",
                char=char,
                position=position,
            ) from None
    return digits_to_integer(digits, RADIX)


def encode(data):
    """Encode bytes as base62. Empty input gives ''."""
    return encode_integer(bytes_to_integer(data))


def decode(encoded):
    """Decode base62 to minimal big-endian bytes. '' gives b''."""
    return integer_to_bytes(decode_integer(encoded))
