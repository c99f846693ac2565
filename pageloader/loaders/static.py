from typing import Any, Optional, Sequence

from pageloader.loaders.info_strategy import InfoStrategyPageLoader
from pageloader.models.load_request import LoadRequest
from pageloader.models.load_result import LoadResult
from pageloader.models.loader_state import LoaderState
from pageloader.models.mutation import Replace
from pageloader.models.page_state import COMPLETED


def _no_more_pages(request: LoadRequest) -> LoadResult:
    return LoadResult(
        elements=(),
        next_page_has_more=Replace(value=False),
        previous_page_has_more=Replace(value=False),
    )


class StaticPageLoader(InfoStrategyPageLoader):
    """
    A single, complete page of elements. Load commands are no-ops.
    """

    def __init__(self, elements: Sequence[Any] = (), *, name: Optional[str] = None):
        super().__init__(
            _no_more_pages,
            initial_state=LoaderState(
                elements=tuple(elements),
                next_page_state=COMPLETED,
                previous_page_state=COMPLETED,
            ),
            name=name,
        )

    @classmethod
    def empty(cls) -> "StaticPageLoader":
        return cls(())
