"""
Radix conversion between big-endian bytes, integers and digit lists.

Bytes are read as base-256 digits, most significant first. Digit lists are
also most significant first and carry no leading zeros, so zero is [].
"""


def bytes_to_integer(data):
    """Interpret bytes as a big-endian unsigned integer. Empty input is 0."""
    return int.from_bytes(data, byteorder="big")


def integer_to_digits(n, radix):
    """Digits of n in the given radix, most significant first."""
    if n < 0:
        raise ValueError(f"Cannot convert negative integer: {n}")
    if radix < 2:
        raise ValueError(f"Radix must be at least 2, got {radix}")

    digits = []
    while n > 0:
        n, remainder = divmod(n, radix)
        digits.append(remainder)

    digits.reverse()
    return digits


def digits_to_integer(digits, radix):
    """Rebuild an integer from its digits. An empty list is 0."""
    if radix < 2:
        raise ValueError(f"Radix must be at least 2, got {radix}")

    n = 0
    for digit in digits:
        if not 0 <= digit < radix:
            raise ValueError(f"Digit {digit} out of range for radix {radix}")
        n = n * radix + digit
    return n


def integer_to_bytes(n):
    """Minimal big-endian bytes for n.

    Zero digits inside the number are real byte values and are kept; only
    the leading zeros that integer_to_digits never produces are absent.
    """
    return bytes(integer_to_digits(n, 256))
