import logging
import json
import time
from typing import Dict, Any, Optional
from contextvars import ContextVar
from pageloader.core.config import settings

correlation_context_var: ContextVar[Optional[Dict[str, Any]]] = ContextVar(
    "correlation_context", default=None
)


def add_correlation_id(key: str, value: Any) -> None:
    """
    Add a key-value pair to the correlation context
    """
    ctx = dict(correlation_context_var.get() or {})
    ctx[key] = value
    correlation_context_var.set(ctx)


def get_correlation_context() -> Dict[str, Any]:
    """
    Get the current correlation context
    """
    return dict(correlation_context_var.get() or {})


def reset_correlation_context() -> None:
    """
    Reset the correlation context
    """
    correlation_context_var.set({})


class LogContext:
    """
    Helper class to manage logging context and create structured logs
    """

    def __init__(self, logger_name: str | None = None):
        self.logger = (
            logging.getLogger(logger_name) if logger_name else logging.getLogger()
        )

    def info(self, message: str, extra: Dict[str, Any] | None = None) -> None:
        self._log(logging.INFO, message, extra)

    def warning(self, message: str, extra: Dict[str, Any] | None = None) -> None:
        self._log(logging.WARNING, message, extra)

    def error(
        self, message: str, extra: Dict[str, Any] | None = None, exc_info: bool = False
    ) -> None:
        self._log(logging.ERROR, message, extra, exc_info)

    def debug(self, message: str, extra: Dict[str, Any] | None = None) -> None:
        self._log(logging.DEBUG, message, extra)

    def exception(self, message: str, extra: Dict[str, Any] | None = None) -> None:
        """
        Log an error message with correlation context and stack trace
        """
        self._log(logging.ERROR, message, extra, exc_info=True)

    def _log(
        self,
        level: int,
        message: str,
        extra: Dict[str, Any] | None = None,
        exc_info: bool = False,
    ) -> None:
        """
        Combine correlation context with extra data and log
        """
        if extra is None:
            extra = {}

        log_extra = {**get_correlation_context(), **extra}

        self.logger.log(level, message, extra=log_extra, exc_info=exc_info)


class CustomFormatter(logging.Formatter):
    """
    Custom formatter for structured logging that outputs JSON
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "path": f"{record.pathname}:{record.lineno}",
        }

        if hasattr(settings, "PROJECT_NAME"):
            log_entry["service"] = settings.PROJECT_NAME

        duration_ms = getattr(record, "duration_ms", None)
        if duration_ms is not None:
            log_entry["duration_ms"] = duration_ms

        for key, value in record.__dict__.items():
            if (
                key != "duration_ms"
                and not key.startswith("_")
                and key not in _RESERVED_RECORD_KEYS
            ):
                log_entry[key] = value

        if record.exc_info and isinstance(record.exc_info, tuple):
            exc_type, exc_value, *_ = record.exc_info
            if exc_type and exc_value:
                log_entry["error"] = {
                    "type": exc_type.__name__,
                    "message": str(exc_value),
                }

        return json.dumps(log_entry, default=repr)


_RESERVED_RECORD_KEYS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}


class PerformanceLogger:
    """
    Utility class for timing operations and logging performance metrics
    """

    def __init__(
        self,
        logger: LogContext,
        operation_name: str,
        slow_threshold_ms: float | None = None,
        extra: Dict[str, Any] | None = None,
    ):
        self.logger = logger
        self.operation_name = operation_name
        self.slow_threshold_ms = slow_threshold_ms
        self.extra = extra or {}
        self.start_time = None
        self.duration_ms = None

    def __enter__(self):
        self.start_time = time.time()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration_ms = (time.time() - self.start_time) * 1000
        extra = {**self.extra, "duration_ms": round(self.duration_ms, 2)}

        if exc_type and not issubclass(exc_type, Exception):
            self.logger.debug(
                f"Operation {self.operation_name} interrupted after {self.duration_ms:.2f}ms",
                extra={**extra, "error_type": exc_type.__name__},
            )
        elif exc_type:
            self.logger.warning(
                f"Operation {self.operation_name} failed after {self.duration_ms:.2f}ms",
                extra={
                    **extra,
                    "error": str(exc_val),
                    "error_type": exc_type.__name__,
                },
            )
        elif (
            self.slow_threshold_ms is not None
            and self.duration_ms > self.slow_threshold_ms
        ):
            self.logger.warning(
                f"Slow operation {self.operation_name} took {self.duration_ms:.2f}ms",
                extra=extra,
            )
        else:
            self.logger.debug(
                f"Operation {self.operation_name} completed in {self.duration_ms:.2f}ms",
                extra=extra,
            )


def setup_logging() -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.LOG_LEVEL)
    root_logger.handlers = []

    formatter = CustomFormatter(datefmt=settings.LOG_DATE_FORMAT)

    if settings.LOG_FILE:
        file_handler = logging.FileHandler(settings.LOG_FILE)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.WARNING)
    root_logger.addHandler(console_handler)

    reset_correlation_context()
