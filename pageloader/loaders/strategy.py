from typing import Any, Callable, Optional, Sequence

from pageloader.loaders.info_strategy import (
    CombineFunction,
    InfoStrategyPageLoader,
    LoadOutcome,
)
from pageloader.models.load_request import LoadRequest
from pageloader.models.load_result import LoadResult
from pageloader.models.loader_state import Direction, LoaderState


class StrategyPageLoader(InfoStrategyPageLoader):
    """
    Page loader for collections that need no info value per direction.

    The load function receives a plain `LoadRequest`; info mutations in the
    results it produces are discarded.
    """

    def __init__(
        self,
        load: Callable[[LoadRequest], LoadOutcome],
        *,
        initial_state: Optional[LoaderState] = None,
        combine_next: Optional[CombineFunction] = None,
        combine_previous: Optional[CombineFunction] = None,
        name: Optional[str] = None,
    ):
        super().__init__(
            load,
            initial_state=initial_state,
            combine_next=combine_next,
            combine_previous=combine_previous,
            name=name,
        )

    def _make_request(
        self, direction: Direction, current: Sequence[Any], info: Any
    ) -> LoadRequest:
        return LoadRequest(direction=direction, current=current)

    def _prepare_result(self, result: LoadResult) -> LoadResult:
        return result.without_info()
