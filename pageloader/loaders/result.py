from typing import Any, Dict, List, Optional, Sequence, Union

from pageloader.loaders.info_strategy import InfoStrategyPageLoader
from pageloader.models.load_request import LoadRequest
from pageloader.models.load_result import LoadResult
from pageloader.models.loader_state import Direction, LoaderState
from pageloader.models.mutation import Replace
from pageloader.models.page_state import COMPLETED, HAS_MORE

CannedResult = Union[Sequence[Any], Exception]


class ResultPageLoader(InfoStrategyPageLoader):
    """
    Page loader that replays canned results, for tests and previews.

    Each load consumes the next canned result for its direction: a sequence of
    elements is loaded as a page, an exception fails the load. A direction
    completes with its last successful canned result, and starts completed
    when it has none. Loads are synchronous.

    Args:
        next_results: Results for `load_next_page()` calls, in order
        previous_results: Results for `load_previous_page()` calls, in order
    """

    def __init__(
        self,
        next_results: Sequence[CannedResult] = (),
        previous_results: Sequence[CannedResult] = (),
        *,
        name: Optional[str] = None,
    ):
        self._results: Dict[Direction, List[CannedResult]] = {
            Direction.NEXT: list(next_results),
            Direction.PREVIOUS: list(previous_results),
        }
        self._offsets: Dict[Direction, int] = {
            Direction.NEXT: 0,
            Direction.PREVIOUS: 0,
        }
        super().__init__(
            self._replay,
            initial_state=LoaderState(
                next_page_state=HAS_MORE if next_results else COMPLETED,
                previous_page_state=HAS_MORE if previous_results else COMPLETED,
            ),
            name=name,
        )

    def _replay(self, request: LoadRequest) -> LoadResult:
        direction = request.direction
        results = self._results[direction]
        offset = self._offsets[direction]
        self._offsets[direction] = offset + 1

        # retrying a failure after the last canned result
        if offset >= len(results):
            return _result_for(direction, (), has_more=False)

        canned = results[offset]
        if isinstance(canned, Exception):
            raise canned

        return _result_for(direction, canned, has_more=offset + 1 < len(results))


def _result_for(direction: Direction, elements: Sequence[Any], has_more: bool) -> LoadResult:
    has_more_field = (
        "next_page_has_more" if direction is Direction.NEXT else "previous_page_has_more"
    )
    return LoadResult(elements=tuple(elements), **{has_more_field: Replace(value=has_more)})
