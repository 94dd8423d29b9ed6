import json
import sys
import threading
from enum import IntEnum
from utils.timestamp import format_timestamp

class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @classmethod
    def parse(cls, name, default=None):
        try:
            return cls[str(name).upper()]
        except KeyError:
            return default if default is not None else cls.INFO

_logger = None
_logger_lock = threading.Lock()

class StructuredLogger:
    """JSON-lines logger. One record per call, written to stderr unless a stream is given."""

    def __init__(self, level=LogLevel.INFO, stream=None, component=None):
        self.level = level
        self.stream = stream
        self.component = component

    def child(self, component):
        return StructuredLogger(self.level, self.stream, component)

    def _emit(self, level, message, error=None, **kwargs):
        if level < self.level:
            return
        try:
            record = {"timestamp": format_timestamp(), "level": level.name, "msg": message}
            if self.component:
                record["component"] = self.component
            record.update(kwargs)
            if error:
                record["err"] = str(error)
                code = getattr(error, "code", None)
                if code:
                    record["err_code"] = code
            print(json.dumps(record, default=str), file=self.stream or sys.stderr, flush=True)
        except Exception:
            pass

    def debug(self, message, **kwargs):
        self._emit(LogLevel.DEBUG, message, **kwargs)

    def info(self, message, error=None, **kwargs):
        self._emit(LogLevel.INFO, message, error, **kwargs)

    def warn(self, message, error=None, **kwargs):
        self._emit(LogLevel.WARN, message, error, **kwargs)

    def error(self, message, error=None, **kwargs):
        self._emit(LogLevel.ERROR, message, error, **kwargs)

    @classmethod
    def configure(cls, min_level=LogLevel.INFO, stream=None):
        global _logger
        with _logger_lock:
            _logger = cls(min_level, stream)

def get_logger(component=None):
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                _logger = StructuredLogger()
    return _logger.child(component) if component else _logger
