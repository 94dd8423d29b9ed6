from utils.ksuid import generate_ksuid, parse_ksuid, is_valid_ksuid, ParsedKsuid
from utils.timestamp import now_micros, format_timestamp
from core.errors import CodecError, KsuidParseError, InvalidFormatError, ValueTooLargeError

__all__ = [
    "generate_ksuid",
    "parse_ksuid",
    "is_valid_ksuid",
    "ParsedKsuid",
    "now_micros",
    "format_timestamp",
    "CodecError",
    "KsuidParseError",
    "InvalidFormatError",
    "ValueTooLargeError",
]
