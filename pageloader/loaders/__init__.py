from .base import PageLoader
from .subscription import LoaderSubscription, MappedSubscription
from .info_strategy import (
    InfoStrategyPageLoader,
    append_elements,
    prepend_elements,
)
from .strategy import StrategyPageLoader
from .result import ResultPageLoader
from .static import StaticPageLoader
from .slice import SlicePageLoader
from .any_loader import AnyPageLoader

__all__ = [
    "PageLoader",
    "LoaderSubscription",
    "MappedSubscription",
    "InfoStrategyPageLoader",
    "append_elements",
    "prepend_elements",
    "StrategyPageLoader",
    "ResultPageLoader",
    "StaticPageLoader",
    "SlicePageLoader",
    "AnyPageLoader",
]
