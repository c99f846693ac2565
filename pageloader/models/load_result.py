from typing import Any, Tuple
from pydantic import BaseModel, ConfigDict

from pageloader.models.loader_state import Direction
from pageloader.models.mutation import DO_NOT_REPLACE, Mutation


class LoadResult(BaseModel):
    """
    Result produced by a load function

    Every mutation defaults to `DoNotReplace`. A result may override either
    direction's values, so an initial next page load can seed the info the
    previous direction needs later.

    Attributes:
        elements: The newly loaded page, not yet merged
        next_page_has_more: Whether the next direction has more pages
        previous_page_has_more: Whether the previous direction has more pages
        next_page_info: Replacement info value for the next direction
        previous_page_info: Replacement info value for the previous direction
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    elements: Tuple[Any, ...]
    next_page_has_more: Mutation = DO_NOT_REPLACE
    previous_page_has_more: Mutation = DO_NOT_REPLACE
    next_page_info: Mutation = DO_NOT_REPLACE
    previous_page_info: Mutation = DO_NOT_REPLACE

    def has_more_for(self, direction: Direction) -> Mutation:
        if direction is Direction.NEXT:
            return self.next_page_has_more
        return self.previous_page_has_more

    def info_for(self, direction: Direction) -> Mutation:
        if direction is Direction.NEXT:
            return self.next_page_info
        return self.previous_page_info

    def without_info(self) -> "LoadResult":
        return self.model_copy(
            update={
                "next_page_info": DO_NOT_REPLACE,
                "previous_page_info": DO_NOT_REPLACE,
            }
        )
