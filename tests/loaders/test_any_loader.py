import pytest

from pageloader.loaders import AnyPageLoader, ResultPageLoader, SlicePageLoader
from pageloader.models import (
    COMPLETED,
    CurrentEvent,
    Failed,
    LoaderState,
    NextPageLoadedEvent,
    NextPageLoadingEvent,
)
from tests.helpers import LoadError


def test_forwards_state_and_commands():
    wrapped = SlicePageLoader([1, 2, 3], page_size=2)
    loader = AnyPageLoader(wrapped)

    loader.load_next_page()

    assert loader.state == wrapped.state
    assert loader.elements == (1, 2)

    loader.load_previous_page()
    assert wrapped.previous_page_state == COMPLETED


def test_map_elements_maps_state_and_events():
    wrapped = SlicePageLoader([1, 2, 3], page_size=2)
    loader = wrapped.map_elements(lambda element: element * 10)
    subscription = loader.events()

    loader.load_next_page()

    assert loader.elements == (10, 20)
    assert wrapped.elements == (1, 2)

    current, loading, loaded = subscription.drain()
    assert current == CurrentEvent(state=LoaderState(previous_page_state=COMPLETED))
    assert isinstance(loading, NextPageLoadingEvent)
    assert isinstance(loaded, NextPageLoadedEvent)
    assert loaded.new_elements == (10, 20)
    assert loaded.state.elements == (10, 20)


def test_map_errors():
    wrapped = ResultPageLoader(next_results=[LoadError("offline")])
    loader = wrapped.map_errors(lambda error: f"mapped: {error}")
    subscription = loader.events()

    loader.load_next_page()

    assert loader.next_page_state == Failed(error="mapped: offline")
    assert subscription.drain()[-1].state.next_page_state == Failed(
        error="mapped: offline"
    )
    assert wrapped.next_page_state == Failed(error=LoadError("offline"))


def test_state_transform_alone_maps_event_states():
    wrapped = SlicePageLoader([1, 2], page_size=1)
    loader = AnyPageLoader(
        wrapped, transform_state=lambda state: state.map_elements(str)
    )
    subscription = loader.events()

    loader.load_next_page()

    loaded = subscription.drain()[-1]
    assert loaded.state.elements == ("1",)
    assert loaded.previous_state.elements == ()
    assert loaded.new_elements == (1,)


def test_wrapping_composes():
    loader = (
        SlicePageLoader([1, 2], page_size=2)
        .map_elements(lambda element: element + 1)
        .map_elements(str)
    )

    loader.load_next_page()

    assert loader.elements == ("2", "3")


@pytest.mark.asyncio
async def test_close_is_forwarded():
    wrapped = SlicePageLoader([1], page_size=1)
    loader = wrapped.map_elements(str)
    subscription = loader.events()

    loader.close()

    assert wrapped.closed
    assert [event async for event in subscription] == [
        CurrentEvent(state=LoaderState(previous_page_state=COMPLETED))
    ]
