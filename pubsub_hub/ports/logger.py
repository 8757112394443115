"""Logger port for infrastructure logging."""

from abc import ABC, abstractmethod
from typing import Any


class LoggerPort(ABC):
    """Abstract interface for logging operations.

    Keyword arguments carry structured context such as ``event_id``,
    ``tenant_id`` or ``channel``. Implementations must accept any keys and
    must not raise because of them.
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None: ...

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log one outcome line, e.g. a successful send."""
        ...

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None: ...

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log a failed operation without a traceback."""
        ...

    @abstractmethod
    def exception(self, message: str, exc_info: BaseException | None = None, **kwargs: Any) -> None:
        """Log a failure with its traceback.

        Args:
            message: Log message
            exc_info: Exception whose traceback to attach. When None, the
                exception currently being handled is used.
            **kwargs: Structured context
        """
        ...
