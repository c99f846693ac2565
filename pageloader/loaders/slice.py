from typing import Any, Optional, Sequence

from pageloader.core.exceptions import InvalidPageSizeError
from pageloader.loaders.info_strategy import InfoStrategyPageLoader
from pageloader.models.load_request import LoadRequest
from pageloader.models.load_result import LoadResult
from pageloader.models.loader_state import LoaderState
from pageloader.models.mutation import Replace
from pageloader.models.page_state import COMPLETED, HAS_MORE


class SlicePageLoader(InfoStrategyPageLoader):
    """
    Pages forward through an in-memory sequence, `page_size` elements at a time.

    The previous direction is always completed. Loads are synchronous.
    """

    def __init__(
        self,
        backing: Sequence[Any],
        page_size: int,
        *,
        name: Optional[str] = None,
    ):
        if page_size < 1:
            raise InvalidPageSizeError(page_size)

        self.backing = tuple(backing)
        self.page_size = page_size
        super().__init__(
            self._slice,
            initial_state=LoaderState(
                next_page_state=HAS_MORE,
                previous_page_state=COMPLETED,
            ),
            name=name,
        )

    def _slice(self, request: LoadRequest) -> LoadResult:
        start = len(request.current)
        end = start + self.page_size
        return LoadResult(
            elements=self.backing[start:end],
            next_page_has_more=Replace(value=end < len(self.backing)),
        )
