from enum import Enum
from typing import Any, Callable, Generic, Tuple, TypeVar
from pydantic import BaseModel, ConfigDict

from pageloader.models.page_state import HAS_MORE, PageState

T = TypeVar("T")


class Direction(str, Enum):
    """Pagination axes"""

    NEXT = "next"
    PREVIOUS = "previous"

    @property
    def opposite(self) -> "Direction":
        return Direction.PREVIOUS if self is Direction.NEXT else Direction.NEXT


class LoaderState(BaseModel, Generic[T]):
    """
    Externally observable snapshot of a page loader

    Attributes:
        elements: The elements loaded so far, in order
        next_page_state: State of the next (append) direction
        previous_page_state: State of the previous (prepend) direction
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    elements: Tuple[T, ...] = ()
    next_page_state: PageState = HAS_MORE
    previous_page_state: PageState = HAS_MORE

    def page_state(self, direction: Direction) -> PageState:
        if direction is Direction.NEXT:
            return self.next_page_state
        return self.previous_page_state

    def with_page_state(self, direction: Direction, page_state: PageState) -> "LoaderState":
        if direction is Direction.NEXT:
            return self.with_next_page_state(page_state)
        return self.with_previous_page_state(page_state)

    def with_next_page_state(self, page_state: PageState) -> "LoaderState":
        return self.model_copy(update={"next_page_state": page_state})

    def with_previous_page_state(self, page_state: PageState) -> "LoaderState":
        return self.model_copy(update={"previous_page_state": page_state})

    def map_elements(self, transform: Callable[[T], Any]) -> "LoaderState":
        return LoaderState(
            elements=tuple(transform(element) for element in self.elements),
            next_page_state=self.next_page_state,
            previous_page_state=self.previous_page_state,
        )

    def map_error(self, transform: Callable[[Any], Any]) -> "LoaderState":
        return LoaderState(
            elements=self.elements,
            next_page_state=self.next_page_state.map_error(transform),
            previous_page_state=self.previous_page_state.map_error(transform),
        )
