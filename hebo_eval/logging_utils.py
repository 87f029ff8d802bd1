"""
JSON logging for hebo-eval.

Every record is one JSON object on stderr, so stdout carries nothing but the
evaluation report. StructuredLogger.log_event() emits LogEntry records keyed
by a trace id (test case id or run id).
"""

import hashlib
import json
import logging
import sys
import time
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

from .models import ComponentType, EventType, LogEntry

LOG_FORMAT = "%(timestamp)s %(level)s %(name)s %(message)s"
SNIPPET_LENGTH = 200

_level = logging.INFO
_loggers: Dict[str, logging.Logger] = {}


class EvalJSONFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record.setdefault("timestamp", time.time())
        log_record["level"] = record.levelname


class StderrHandler(logging.StreamHandler):
    """Stream handler bound to the current sys.stderr rather than the one at creation."""

    def __init__(self):
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def get_logger(name: str) -> logging.Logger:
    """Logger with a single JSON stderr handler; repeated calls return the same logger."""
    if name in _loggers:
        return _loggers[name]

    handler = StderrHandler()
    handler.setFormatter(EvalJSONFormatter(LOG_FORMAT))

    logger = logging.getLogger(name)
    logger.handlers = [handler]
    logger.setLevel(_level)
    logger.propagate = False
    _loggers[name] = logger
    return logger


def configure_logging(verbose: bool = False) -> None:
    """Set the level of every logger handed out by get_logger()."""
    global _level
    _level = logging.DEBUG if verbose else logging.INFO
    for logger in _loggers.values():
        logger.setLevel(_level)


class StructuredLogger:
    """Component-scoped logger for evaluation events."""

    def __init__(self, component: ComponentType):
        self.component = component
        self.logger = get_logger(f"hebo_eval.{component.value}")

    def hash_payload(self, payload: Any) -> str:
        """Short digest of a payload, stable across key order."""
        dumped = json.dumps(payload, sort_keys=True, default=str)
        return hashlib.md5(dumped.encode()).hexdigest()[:16]

    def log_event(
        self,
        trace_id: str,
        event_type: EventType,
        payload: Any,
        metrics: Optional[Dict[str, Any]] = None,
        level: int = logging.INFO,
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return

        entry = LogEntry(
            trace_id=trace_id,
            component=self.component,
            event_type=event_type,
            payload_hash=self.hash_payload(payload),
            metrics=metrics or {},
            message=str(payload)[:SNIPPET_LENGTH],
        )
        fields = entry.model_dump(mode="json")
        # "message" is reserved on LogRecord
        fields["snippet"] = fields.pop("message")
        self.logger.log(level, event_type.value, extra=fields)

    def _log(self, level: int, message: str, fields: Dict[str, Any]) -> None:
        self.logger.log(level, message, extra={"component": self.component.value, **fields})

    def debug(self, message: str, **fields: Any) -> None:
        self._log(logging.DEBUG, message, fields)

    def info(self, message: str, **fields: Any) -> None:
        self._log(logging.INFO, message, fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._log(logging.WARNING, message, fields)

    def error(self, message: str, **fields: Any) -> None:
        self._log(logging.ERROR, message, fields)
