from .page_state import (
    PageState,
    HasMore,
    Completed,
    Loading,
    Failed,
    HAS_MORE,
    COMPLETED,
    LOADING,
    page_state_for_has_more,
)
from .mutation import Mutation, Replace, DoNotReplace, DO_NOT_REPLACE, mutation_value_or
from .loader_state import Direction, LoaderState
from .load_request import LoadRequest, InfoLoadRequest
from .load_result import LoadResult
from .loader_event import (
    LoaderEvent,
    CurrentEvent,
    NextPageLoadingEvent,
    PreviousPageLoadingEvent,
    NextPageLoadedEvent,
    PreviousPageLoadedEvent,
    NextPageFailedEvent,
    PreviousPageFailedEvent,
)

__all__ = [
    "PageState",
    "HasMore",
    "Completed",
    "Loading",
    "Failed",
    "HAS_MORE",
    "COMPLETED",
    "LOADING",
    "page_state_for_has_more",
    "Mutation",
    "Replace",
    "DoNotReplace",
    "DO_NOT_REPLACE",
    "mutation_value_or",
    "Direction",
    "LoaderState",
    "LoadRequest",
    "InfoLoadRequest",
    "LoadResult",
    "LoaderEvent",
    "CurrentEvent",
    "NextPageLoadingEvent",
    "PreviousPageLoadingEvent",
    "NextPageLoadedEvent",
    "PreviousPageLoadedEvent",
    "NextPageFailedEvent",
    "PreviousPageFailedEvent",
]
