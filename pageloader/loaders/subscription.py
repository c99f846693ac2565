import asyncio
from typing import Any, Callable, List, Optional

from pageloader.models.loader_event import LoaderEvent

_CLOSED = object()


class LoaderSubscription:
    """
    Ordered, unbounded stream of loader events for one observer.

    Iterate with `async for`; iteration ends once the subscription (or the
    loader that owns it) is closed and every buffered event was delivered.
    Events must be published from the thread running the event loop.
    """

    def __init__(self, on_close: Optional[Callable[["LoaderSubscription"], None]] = None):
        self._queue: asyncio.Queue = asyncio.Queue()
        self._on_close = on_close
        self.closed = False

    def publish(self, event: LoaderEvent) -> None:
        if not self.closed:
            self._queue.put_nowait(event)

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self._queue.put_nowait(_CLOSED)
        if self._on_close is not None:
            self._on_close(self)

    def get_nowait(self) -> Optional[LoaderEvent]:
        """
        Return the next buffered event, or None when nothing is buffered
        """
        while True:
            try:
                item = self._queue.get_nowait()
            except asyncio.QueueEmpty:
                return None
            if item is not _CLOSED:
                return item

    def drain(self) -> List[LoaderEvent]:
        """
        Return every buffered event without waiting
        """
        events = []
        event = self.get_nowait()
        while event is not None:
            events.append(event)
            event = self.get_nowait()
        return events

    def __aiter__(self) -> "LoaderSubscription":
        return self

    async def __anext__(self) -> LoaderEvent:
        if self.closed and self._queue.empty():
            raise StopAsyncIteration
        item = await self._queue.get()
        if item is _CLOSED:
            raise StopAsyncIteration
        return item


class MappedSubscription:
    """
    Applies `transform` to every event of a wrapped subscription
    """

    def __init__(self, wrapped: Any, transform: Callable[[LoaderEvent], Any]):
        self._wrapped = wrapped
        self._transform = transform

    @property
    def closed(self) -> bool:
        return self._wrapped.closed

    def close(self) -> None:
        self._wrapped.close()

    def get_nowait(self) -> Optional[Any]:
        event = self._wrapped.get_nowait()
        return None if event is None else self._transform(event)

    def drain(self) -> List[Any]:
        return [self._transform(event) for event in self._wrapped.drain()]

    def __aiter__(self) -> "MappedSubscription":
        return self

    async def __anext__(self) -> Any:
        return self._transform(await self._wrapped.__anext__())
