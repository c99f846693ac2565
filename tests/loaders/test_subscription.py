import asyncio

import pytest

from pageloader.loaders import LoaderSubscription, MappedSubscription
from pageloader.models import CurrentEvent, LoaderState

FIRST = CurrentEvent(state=LoaderState(elements=(1,)))
SECOND = CurrentEvent(state=LoaderState(elements=(2,)))


def test_get_nowait_returns_none_when_empty():
    subscription = LoaderSubscription()

    assert subscription.get_nowait() is None

    subscription.publish(FIRST)
    assert subscription.get_nowait() == FIRST
    assert subscription.get_nowait() is None


def test_events_published_after_close_are_dropped():
    closed = []
    subscription = LoaderSubscription(on_close=closed.append)
    subscription.publish(FIRST)

    subscription.close()
    subscription.close()
    subscription.publish(SECOND)

    assert closed == [subscription]
    assert subscription.drain() == [FIRST]


@pytest.mark.asyncio
async def test_iteration_waits_for_events():
    subscription = LoaderSubscription()

    async def publish_later():
        await asyncio.sleep(0)
        subscription.publish(FIRST)
        subscription.publish(SECOND)
        subscription.close()

    publisher = asyncio.create_task(publish_later())
    received = [event async for event in subscription]
    await publisher

    assert received == [FIRST, SECOND]


@pytest.mark.asyncio
async def test_mapped_subscription():
    subscription = LoaderSubscription()
    mapped = MappedSubscription(subscription, lambda event: event.state.elements)

    subscription.publish(FIRST)
    assert mapped.get_nowait() == (1,)

    subscription.publish(SECOND)
    assert await mapped.__anext__() == (2,)

    subscription.publish(FIRST)
    mapped.close()

    assert mapped.closed
    assert mapped.drain() == [(1,)]
