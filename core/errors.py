"""Codec errors with context and timestamps for tracking."""

from utils.timestamp import format_timestamp


class CodecError(Exception):
    """Base error carrying context and the time it was raised."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause


class InvalidCharacterError(CodecError):
    """A symbol outside the encoding alphabet."""

    def __init__(self, message, char=None, position=None, **kwargs):
        context = kwargs.pop("context", {})
        if char is not None:
            context["char"] = char
        if position is not None:
            context["position"] = position
        super().__init__(message, context=context, **kwargs)
        self.char = char
        self.position = position


class KsuidParseError(CodecError):
    """Base for KSUID parse failures. Never worth retrying."""

    code = "parse_error"

    def __init__(self, message, value=None, **kwargs):
        context = kwargs.pop("context", {})
        if value is not None:
            context["value"] = value
        super().__init__(message, context=context, **kwargs)
        self.value = value

    def to_dict(self):
        return {"code": self.code, "message": str(self), "value": self.value}


class InvalidFormatError(KsuidParseError):
    """Wrong length, bad characters or an unrepresentable timestamp."""

    code = "invalid_format"


class ValueTooLargeError(KsuidParseError):
    """Decodes to more than the 20 raw bytes of a KSUID."""

    code = "value_too_large"


class KsuidCastError(CodecError):
    """Strict cast of a primary key value failed."""

    def __init__(self, message, value=None, **kwargs):
        context = kwargs.pop("context", {})
        context["value_type"] = type(value).__name__
        super().__init__(message, context=context, **kwargs)
        self.value = value
