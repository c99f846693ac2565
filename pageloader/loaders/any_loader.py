from typing import Any, Callable, Optional

from pageloader.loaders.base import PageLoader
from pageloader.loaders.subscription import MappedSubscription
from pageloader.models.loader_event import LoaderEvent
from pageloader.models.loader_state import LoaderState


class AnyPageLoader(PageLoader):
    """
    Wraps any page loader behind the `PageLoader` interface, optionally mapping
    every observed state and event.

    Load commands are forwarded to the wrapped loader unchanged.

    Args:
        loader: Object exposing `state`, `events()`, `load_next_page()` and
            `load_previous_page()`
        transform_state: Applied to every state read through this wrapper
        transform_event: Applied to every event. When omitted and
            `transform_state` is given, the event's states are mapped with
            `transform_state` and its new elements are left as they are.
    """

    def __init__(
        self,
        loader: Any,
        transform_state: Optional[Callable[[LoaderState], LoaderState]] = None,
        transform_event: Optional[Callable[[LoaderEvent], LoaderEvent]] = None,
    ):
        self._loader = loader
        self._transform_state = transform_state
        if transform_event is None and transform_state is not None:
            transform_event = self._map_event_states
        self._transform_event = transform_event

    @property
    def state(self) -> LoaderState:
        state = self._loader.state
        if self._transform_state is None:
            return state
        return self._transform_state(state)

    def events(self) -> Any:
        subscription = self._loader.events()
        if self._transform_event is None:
            return subscription
        return MappedSubscription(subscription, self._transform_event)

    def load_next_page(self) -> None:
        self._loader.load_next_page()

    def load_previous_page(self) -> None:
        self._loader.load_previous_page()

    def close(self) -> None:
        close = getattr(self._loader, "close", None)
        if close is not None:
            close()

    def _map_event_states(self, event: LoaderEvent) -> LoaderEvent:
        update = {"state": self._transform_state(event.state)}
        if event.previous_state is not None:
            update["previous_state"] = self._transform_state(event.previous_state)
        return event.model_copy(update=update)
