import pytest

from pageloader.models import (
    COMPLETED,
    LOADING,
    CurrentEvent,
    Direction,
    Failed,
    LoaderState,
    NextPageFailedEvent,
    NextPageLoadedEvent,
    NextPageLoadingEvent,
    PreviousPageFailedEvent,
    PreviousPageLoadedEvent,
    PreviousPageLoadingEvent,
)
from tests.helpers import LoadError

BEFORE = LoaderState(elements=(1,))
AFTER = LoaderState(elements=(1, 2))


def all_events():
    return [
        CurrentEvent(state=AFTER),
        NextPageLoadingEvent(state=AFTER, previous_state=BEFORE),
        PreviousPageLoadingEvent(state=AFTER, previous_state=BEFORE),
        NextPageLoadedEvent(state=AFTER, previous_state=BEFORE, new_elements=(2,)),
        PreviousPageLoadedEvent(state=AFTER, previous_state=BEFORE, new_elements=(2,)),
        NextPageFailedEvent(state=AFTER, previous_state=BEFORE),
        PreviousPageFailedEvent(state=AFTER, previous_state=BEFORE),
    ]


PREDICATES = [
    "is_current",
    "is_next_page_loading",
    "is_previous_page_loading",
    "is_next_page_loaded",
    "is_previous_page_loaded",
    "is_next_page_failed",
    "is_previous_page_failed",
]


@pytest.mark.parametrize("index", range(len(PREDICATES)))
def test_exactly_one_predicate_holds(index):
    event = all_events()[index]

    holding = [name for name in PREDICATES if getattr(event, name)]

    assert holding == [PREDICATES[index]]


def test_accessors():
    current, next_loading, _, next_loaded, previous_loaded, *_ = all_events()

    assert current.state == AFTER
    assert current.previous_state is None
    assert current.new_elements is None
    assert next_loading.previous_state == BEFORE
    assert next_loading.new_elements is None
    assert next_loaded.new_elements == (2,)
    assert previous_loaded.new_elements == (2,)


def test_direction():
    directions = [type(event).direction for event in all_events()]

    assert directions == [
        None,
        Direction.NEXT,
        Direction.PREVIOUS,
        Direction.NEXT,
        Direction.PREVIOUS,
        Direction.NEXT,
        Direction.PREVIOUS,
    ]


def test_map_elements_maps_states_and_new_elements():
    event = PreviousPageLoadedEvent(state=AFTER, previous_state=BEFORE, new_elements=(2,))

    mapped = event.map_elements(str)

    assert isinstance(mapped, PreviousPageLoadedEvent)
    assert mapped.state.elements == ("1", "2")
    assert mapped.previous_state.elements == ("1",)
    assert mapped.new_elements == ("2",)


def test_map_elements_on_current():
    mapped = CurrentEvent(state=AFTER).map_elements(lambda element: -element)

    assert mapped == CurrentEvent(state=LoaderState(elements=(-1, -2)))


def test_map_error_leaves_new_elements():
    failed = LoaderState(elements=(1,), next_page_state=Failed(error=LoadError("boom")))
    event = NextPageFailedEvent(state=failed, previous_state=BEFORE.with_next_page_state(LOADING))

    mapped = event.map_error(lambda error: f"wrapped: {error}")

    assert mapped.state.next_page_state == Failed(error="wrapped: boom")
    assert mapped.previous_state.next_page_state == LOADING

    loaded = NextPageLoadedEvent(
        state=AFTER.with_previous_page_state(COMPLETED),
        previous_state=BEFORE,
        new_elements=(2,),
    )
    assert loaded.map_error(str).new_elements == (2,)
