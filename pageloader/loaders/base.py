from abc import ABC, abstractmethod
from typing import Any, Callable, Tuple

from pageloader.models.loader_state import LoaderState
from pageloader.models.page_state import PageState


class PageLoader(ABC):
    """
    Incrementally loads a sequence of elements in pages, in either direction
    """

    @property
    @abstractmethod
    def state(self) -> LoaderState:
        pass

    @abstractmethod
    def events(self) -> Any:
        """
        Subscribe to the loader's events.

        The returned subscription first yields a `CurrentEvent` for the state at
        subscription time, then every later transition in order.
        """

    @abstractmethod
    def load_next_page(self) -> None:
        pass

    @abstractmethod
    def load_previous_page(self) -> None:
        pass

    def close(self) -> None:
        pass

    @property
    def elements(self) -> Tuple[Any, ...]:
        return self.state.elements

    @property
    def next_page_state(self) -> PageState:
        return self.state.next_page_state

    @property
    def previous_page_state(self) -> PageState:
        return self.state.previous_page_state

    def map_elements(self, transform: Callable[[Any], Any]) -> "PageLoader":
        from pageloader.loaders.any_loader import AnyPageLoader

        return AnyPageLoader(
            self,
            transform_state=lambda state: state.map_elements(transform),
            transform_event=lambda event: event.map_elements(transform),
        )

    def map_errors(self, transform: Callable[[Any], Any]) -> "PageLoader":
        from pageloader.loaders.any_loader import AnyPageLoader

        return AnyPageLoader(
            self,
            transform_state=lambda state: state.map_error(transform),
            transform_event=lambda event: event.map_error(transform),
        )
