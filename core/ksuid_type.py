"""
Primary key type for KSUIDs, stored as plain strings.

A persistence layer asks for a new key through autogenerate() and otherwise
just passes the string through. Example::

    class Order:
        id_type = KsuidType

        def __init__(self, id=None):
            self.id = id or KsuidType.autogenerate()

        @property
        def inserted_at(self):
            return KsuidType.inserted_at(self.id)
"""

from core.errors import KsuidCastError
from utils.ksuid import generate_ksuid, parse_ksuid


class KsuidType:
    storage_type = "string"

    @staticmethod
    def type():
        return KsuidType.storage_type

    @staticmethod
    def cast(value):
        """The value itself if it is a string, else None. No format check."""
        return value if isinstance(value, str) else None

    @staticmethod
    def cast_strict(value):
        """Same as cast() but raises KsuidCastError on non-string input."""
        ksuid = KsuidType.cast(value)
        if ksuid is None:
            raise KsuidCastError(f"Cannot cast {type(value).__name__} to KSUID", value=value)
        return ksuid

    @staticmethod
    def load(value):
        return value

    @staticmethod
    def dump(value):
        return value if isinstance(value, str) else None

    @staticmethod
    def autogenerate():
        return generate_ksuid()

    @staticmethod
    def inserted_at(value):
        """Creation time of a row, read from its KSUID key."""
        return parse_ksuid(value).timestamp
