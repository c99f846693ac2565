import pytest

from pageloader.loaders import StrategyPageLoader
from pageloader.models import (
    COMPLETED,
    LoadRequest,
    LoaderState,
    LoadResult,
    Replace,
)
from tests.helpers import RecordingLoad


def test_load_function_receives_plain_requests():
    load = RecordingLoad(LoadResult(elements=(1,)))
    loader = StrategyPageLoader(load)

    loader.load_next_page()
    loader.load_previous_page()

    assert load.requests == [
        LoadRequest.next_page(()),
        LoadRequest.previous_page((1,)),
    ]
    assert all(type(request) is LoadRequest for request in load.requests)


def test_info_mutations_are_discarded():
    loader = StrategyPageLoader(
        RecordingLoad(
            LoadResult(
                elements=(1,),
                next_page_has_more=Replace(value=False),
                next_page_info=Replace(value="after-1"),
            )
        )
    )

    loader.load_next_page()

    assert loader.state == LoaderState(elements=(1,), next_page_state=COMPLETED)
    assert loader.next_info is None


@pytest.mark.asyncio
async def test_async_strategy(controlled_load):
    loader = StrategyPageLoader(controlled_load)

    loader.load_previous_page()
    controlled_load.succeed(0, LoadResult(elements=("a",)))
    await loader.wait()

    assert controlled_load.requests == [LoadRequest.previous_page(())]
    assert loader.elements == ("a",)
