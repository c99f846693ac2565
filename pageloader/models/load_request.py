from typing import Any, Sequence, Tuple
from pydantic import BaseModel, ConfigDict

from pageloader.models.loader_state import Direction


class LoadRequest(BaseModel):
    """
    Request passed to a load function

    Attributes:
        direction: The direction being loaded
        current: The loader's elements at the moment the request was issued
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    direction: Direction
    current: Tuple[Any, ...] = ()

    @classmethod
    def next_page(cls, current: Sequence[Any] = ()) -> "LoadRequest":
        return cls(direction=Direction.NEXT, current=tuple(current))

    @classmethod
    def previous_page(cls, current: Sequence[Any] = ()) -> "LoadRequest":
        return cls(direction=Direction.PREVIOUS, current=tuple(current))

    @property
    def is_next(self) -> bool:
        return self.direction is Direction.NEXT

    @property
    def is_previous(self) -> bool:
        return not self.is_next


class InfoLoadRequest(LoadRequest):
    """
    Load request that also carries the direction's info value

    Attributes:
        info: The loader's info value for `direction` when the request was issued
    """

    info: Any = None

    @classmethod
    def next_page(cls, current: Sequence[Any] = (), info: Any = None) -> "InfoLoadRequest":
        return cls(direction=Direction.NEXT, current=tuple(current), info=info)

    @classmethod
    def previous_page(
        cls, current: Sequence[Any] = (), info: Any = None
    ) -> "InfoLoadRequest":
        return cls(direction=Direction.PREVIOUS, current=tuple(current), info=info)

    @property
    def load_request(self) -> LoadRequest:
        """
        The same request without its info value
        """
        return LoadRequest(direction=self.direction, current=self.current)
