from .exceptions import (
    PageLoaderError,
    NoLoadResultError,
    EventLoopRequiredError,
    InvalidLoadResultError,
    InvalidPageSizeError,
)
from .logging import setup_logging

__all__ = [
    "PageLoaderError",
    "NoLoadResultError",
    "EventLoopRequiredError",
    "InvalidLoadResultError",
    "InvalidPageSizeError",
    "setup_logging",
]
