from .loaders import (
    PageLoader,
    InfoStrategyPageLoader,
    StrategyPageLoader,
    ResultPageLoader,
    StaticPageLoader,
    SlicePageLoader,
    AnyPageLoader,
)
from .models import (
    Direction,
    LoaderState,
    LoadRequest,
    InfoLoadRequest,
    LoadResult,
    Replace,
    DoNotReplace,
    HasMore,
    Completed,
    Loading,
    Failed,
)

__version__ = "1.0.0"

__all__ = [
    "PageLoader",
    "InfoStrategyPageLoader",
    "StrategyPageLoader",
    "ResultPageLoader",
    "StaticPageLoader",
    "SlicePageLoader",
    "AnyPageLoader",
    "Direction",
    "LoaderState",
    "LoadRequest",
    "InfoLoadRequest",
    "LoadResult",
    "Replace",
    "DoNotReplace",
    "HasMore",
    "Completed",
    "Loading",
    "Failed",
]
