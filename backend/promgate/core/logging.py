"""Logging setup.

Every module logs through a ``ContextualLogger``: a ``LoggerAdapter`` that
carries a dict of dimensions which is merged into each record and rendered
by the formatter.  ``with_context`` returns a new adapter so the parent
logger is never mutated.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Optional

from promgate.core.config import settings

_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys() | {"message", "asctime"}
)


class _JSONFormatter(logging.Formatter):
    """One JSON object per line, dimensions flattened into the payload."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class _PlainFormatter(logging.Formatter):
    """Readable single-line output for local development."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)-8s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        dims = {
            k: v
            for k, v in record.__dict__.items()
            if k not in _STANDARD_ATTRS and not k.startswith("_")
        }
        if dims:
            line += " " + " ".join(f"{k}={v}" for k, v in sorted(dims.items()))
        return line


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that attaches a fixed set of dimensions to every record."""

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        extra = dict(self.extra or {})
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = extra
        return msg, kwargs

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a child logger carrying the current plus the given dimensions."""
        merged = dict(self.extra or {})
        merged.update(dimensions)
        return ContextualLogger(self.logger, merged)


class LoggerConfigurator:
    """Builds loggers that share a single stdout handler."""

    _handler: Optional[logging.Handler] = None

    @classmethod
    def _get_handler(cls) -> logging.Handler:
        if cls._handler is None:
            handler = logging.StreamHandler(sys.stdout)
            if settings.LOCAL_DEVELOPMENT:
                handler.setFormatter(_PlainFormatter())
            else:
                handler.setFormatter(_JSONFormatter())
            cls._handler = handler
        return cls._handler

    @classmethod
    def configure_logger(
        cls, name: str, dimensions: Optional[dict[str, Any]] = None
    ) -> ContextualLogger:
        """Configure and return a contextual logger.

        Args:
            name (str): Logger name, usually ``__name__``.
            dimensions (Optional[dict[str, Any]]): Dimensions attached to every record.

        Returns:
            ContextualLogger: The configured logger.
        """
        base = logging.getLogger(name)
        base.setLevel(settings.LOG_LEVEL.upper())
        handler = cls._get_handler()
        if handler not in base.handlers:
            base.addHandler(handler)
        base.propagate = False
        return ContextualLogger(base, dimensions or {})


logger = LoggerConfigurator.configure_logger("promgate")
