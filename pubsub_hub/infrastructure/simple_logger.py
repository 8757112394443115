"""Logger adapter backed by Python's standard logging."""

import logging
from typing import Any

from ..ports.logger import LoggerPort

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ContextFormatter(logging.Formatter):
    """Formatter that appends a record's structured context as ``key=value`` pairs.

    Example output::

        2024-01-01 12:00:00,000 - pubsub_hub - INFO - Sent ET1 event with id 'e1'
        to channel folio.t1.ET1 [event_id=e1 tenant_id=t1 channel=folio.t1.ET1]
    """

    def formatMessage(self, record: logging.LogRecord) -> str:  # noqa: N802
        text = super().formatMessage(record)
        context = getattr(record, "context", None)
        if not context:
            return text
        pairs = " ".join(f"{key}={value}" for key, value in context.items() if value is not None)
        return f"{text} [{pairs}]" if pairs else text


class SimpleLogger(LoggerPort):
    """LoggerPort implementation using Python's standard logging.

    Keyword context is attached to each record as a ``context`` dict, so
    caller keys can never clash with reserved ``LogRecord`` attributes.
    """

    def __init__(self, name: str = "pubsub_hub", level: int | str = logging.INFO):
        """Initialize the logger.

        Args:
            name: Logger name (default: "pubsub_hub")
            level: Logging level as int or level name (default: INFO)
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)

        # Add console handler if not already present
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(ContextFormatter(_FORMAT))
            self._logger.addHandler(handler)

    def _log(
        self,
        level: int,
        message: str,
        context: dict[str, Any],
        exc_info: BaseException | bool | None = None,
    ) -> None:
        self._logger.log(level, message, exc_info=exc_info, extra={"context": context})

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def exception(self, message: str, exc_info: BaseException | None = None, **kwargs: Any) -> None:
        """Log at ERROR with a traceback, of ``exc_info`` or else the exception being handled."""
        self._log(logging.ERROR, message, kwargs, exc_info=exc_info or True)
