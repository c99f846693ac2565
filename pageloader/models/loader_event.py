from typing import Any, Callable, ClassVar, Literal, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict

from pageloader.models.loader_state import Direction, LoaderState


class _LoaderEventBase(BaseModel):
    """
    A state transition of a page loader
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    direction: ClassVar[Optional[Direction]] = None

    state: LoaderState

    @property
    def is_current(self) -> bool:
        return isinstance(self, CurrentEvent)

    @property
    def is_next_page_loading(self) -> bool:
        return isinstance(self, NextPageLoadingEvent)

    @property
    def is_previous_page_loading(self) -> bool:
        return isinstance(self, PreviousPageLoadingEvent)

    @property
    def is_next_page_loaded(self) -> bool:
        return isinstance(self, NextPageLoadedEvent)

    @property
    def is_previous_page_loaded(self) -> bool:
        return isinstance(self, PreviousPageLoadedEvent)

    @property
    def is_next_page_failed(self) -> bool:
        return isinstance(self, NextPageFailedEvent)

    @property
    def is_previous_page_failed(self) -> bool:
        return isinstance(self, PreviousPageFailedEvent)

    def map_elements(self, transform: Callable[[Any], Any]) -> "LoaderEvent":
        update = {"state": self.state.map_elements(transform)}
        if self.previous_state is not None:
            update["previous_state"] = self.previous_state.map_elements(transform)
        if self.new_elements is not None:
            update["new_elements"] = tuple(transform(e) for e in self.new_elements)
        return self.model_copy(update=update)

    def map_error(self, transform: Callable[[Any], Any]) -> "LoaderEvent":
        update = {"state": self.state.map_error(transform)}
        if self.previous_state is not None:
            update["previous_state"] = self.previous_state.map_error(transform)
        return self.model_copy(update=update)


class _WithoutNewElements:
    @property
    def new_elements(self) -> None:
        return None


class CurrentEvent(_WithoutNewElements, _LoaderEventBase):
    """The loader's state when an observer attached"""

    kind: Literal["current"] = "current"

    @property
    def previous_state(self) -> None:
        return None


class NextPageLoadingEvent(_WithoutNewElements, _LoaderEventBase):
    direction: ClassVar[Optional[Direction]] = Direction.NEXT

    kind: Literal["next_page_loading"] = "next_page_loading"
    previous_state: LoaderState


class PreviousPageLoadingEvent(_WithoutNewElements, _LoaderEventBase):
    direction: ClassVar[Optional[Direction]] = Direction.PREVIOUS

    kind: Literal["previous_page_loading"] = "previous_page_loading"
    previous_state: LoaderState


class NextPageLoadedEvent(_LoaderEventBase):
    """
    `new_elements` is the page as returned by the load function, not the
    merged element sequence
    """

    direction: ClassVar[Optional[Direction]] = Direction.NEXT

    kind: Literal["next_page_loaded"] = "next_page_loaded"
    previous_state: LoaderState
    new_elements: Tuple[Any, ...]


class PreviousPageLoadedEvent(_LoaderEventBase):
    direction: ClassVar[Optional[Direction]] = Direction.PREVIOUS

    kind: Literal["previous_page_loaded"] = "previous_page_loaded"
    previous_state: LoaderState
    new_elements: Tuple[Any, ...]


class NextPageFailedEvent(_WithoutNewElements, _LoaderEventBase):
    direction: ClassVar[Optional[Direction]] = Direction.NEXT

    kind: Literal["next_page_failed"] = "next_page_failed"
    previous_state: LoaderState


class PreviousPageFailedEvent(_WithoutNewElements, _LoaderEventBase):
    direction: ClassVar[Optional[Direction]] = Direction.PREVIOUS

    kind: Literal["previous_page_failed"] = "previous_page_failed"
    previous_state: LoaderState


LoaderEvent = Union[
    CurrentEvent,
    NextPageLoadingEvent,
    PreviousPageLoadingEvent,
    NextPageLoadedEvent,
    PreviousPageLoadedEvent,
    NextPageFailedEvent,
    PreviousPageFailedEvent,
]

LOADING_EVENTS = {
    Direction.NEXT: NextPageLoadingEvent,
    Direction.PREVIOUS: PreviousPageLoadingEvent,
}
LOADED_EVENTS = {
    Direction.NEXT: NextPageLoadedEvent,
    Direction.PREVIOUS: PreviousPageLoadedEvent,
}
FAILED_EVENTS = {
    Direction.NEXT: NextPageFailedEvent,
    Direction.PREVIOUS: PreviousPageFailedEvent,
}
