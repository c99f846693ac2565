import asyncio
import inspect
import itertools
import threading
import weakref
from typing import (
    Any,
    AsyncIterator,
    Awaitable,
    Callable,
    Dict,
    Optional,
    Sequence,
    Tuple,
    Union,
)
from pydantic import BaseModel, ConfigDict

from pageloader.core.config import settings
from pageloader.core.exceptions import (
    EventLoopRequiredError,
    InvalidLoadResultError,
    NoLoadResultError,
)
from pageloader.core.logging import LogContext, PerformanceLogger, add_correlation_id
from pageloader.loaders.base import PageLoader
from pageloader.loaders.subscription import LoaderSubscription
from pageloader.models.load_request import InfoLoadRequest, LoadRequest
from pageloader.models.load_result import LoadResult
from pageloader.models.loader_event import (
    CurrentEvent,
    FAILED_EVENTS,
    LOADED_EVENTS,
    LOADING_EVENTS,
    LoaderEvent,
)
from pageloader.models.loader_state import Direction, LoaderState
from pageloader.models.mutation import mutation_value_or
from pageloader.models.page_state import (
    HAS_MORE,
    LOADING,
    Failed,
    PageState,
    page_state_for_has_more,
)

logger = LogContext(__name__)

LoadOutcome = Union[LoadResult, Awaitable[LoadResult], AsyncIterator[LoadResult]]
LoadFunction = Callable[[InfoLoadRequest], LoadOutcome]
CombineFunction = Callable[[Sequence[Any], Sequence[Any]], Sequence[Any]]


def append_elements(current: Sequence[Any], new: Sequence[Any]) -> Tuple[Any, ...]:
    return tuple(current) + tuple(new)


def prepend_elements(current: Sequence[Any], new: Sequence[Any]) -> Tuple[Any, ...]:
    return tuple(new) + tuple(current)


class InfoLoaderState(BaseModel):
    """
    Loader state together with each direction's info value
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    loader_state: LoaderState
    next_info: Any = None
    previous_info: Any = None

    def info_for(self, direction: Direction) -> Any:
        if direction is Direction.NEXT:
            return self.next_info
        return self.previous_info


class InfoStrategyPageLoader(PageLoader):
    """
    Page loader driven by a load function, with an info value per direction.

    The load function receives an `InfoLoadRequest` and returns a `LoadResult`,
    an awaitable of one, or an async iterator whose first item is used.
    Exceptions raised by the load function are stored in the direction's
    `Failed` page state. Awaitable and async iterator results are consumed in
    an asyncio task, so the load commands never block.
    """

    _id_counter = itertools.count(1)

    def __init__(
        self,
        load: LoadFunction,
        next_info: Any = None,
        previous_info: Any = None,
        *,
        initial_state: Optional[LoaderState] = None,
        combine_next: Optional[CombineFunction] = None,
        combine_previous: Optional[CombineFunction] = None,
        name: Optional[str] = None,
    ):
        self.id = next(self._id_counter)
        self.name = name or f"{type(self).__name__}-{self.id}"
        self._load = load
        self._combine: Dict[Direction, CombineFunction] = {
            Direction.NEXT: combine_next or append_elements,
            Direction.PREVIOUS: combine_previous or prepend_elements,
        }
        self._info_state = InfoLoaderState(
            loader_state=initial_state if initial_state is not None else LoaderState(),
            next_info=next_info,
            previous_info=previous_info,
        )
        self._lock = threading.RLock()
        # observers that drop their subscription stop receiving events
        self._subscriptions: "weakref.WeakSet[LoaderSubscription]" = weakref.WeakSet()
        self._tasks: Dict[Direction, asyncio.Task] = {}
        self._closed = False

        logger.debug(
            "Page loader created",
            extra={
                "loader": self.name,
                "next_page_state": str(self.state.next_page_state),
                "previous_page_state": str(self.state.previous_page_state),
            },
        )

    @property
    def state(self) -> LoaderState:
        return self._info_state.loader_state

    @property
    def next_info(self) -> Any:
        return self._info_state.next_info

    @property
    def previous_info(self) -> Any:
        return self._info_state.previous_info

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> Dict[Direction, asyncio.Task]:
        """
        In-flight asynchronous loads, by direction
        """
        return dict(self._tasks)

    def events(self) -> LoaderSubscription:
        with self._lock:
            subscription = LoaderSubscription(on_close=self._unsubscribe)
            subscription.publish(CurrentEvent(state=self.state))
            if self._closed:
                subscription.close()
            else:
                self._subscriptions.add(subscription)
        return subscription

    def load_next_page(self) -> None:
        self._load_page(Direction.NEXT)

    def load_previous_page(self) -> None:
        self._load_page(Direction.PREVIOUS)

    async def wait(self) -> None:
        """
        Wait until no asynchronous load is in flight
        """
        while True:
            tasks = [task for task in self._tasks.values() if not task.done()]
            if not tasks:
                return
            await asyncio.gather(*tasks, return_exceptions=True)

    def close(self) -> None:
        """
        Cancel in-flight loads and end every subscription.

        Load commands issued after closing are ignored.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            tasks = list(self._tasks.values())
            subscriptions = list(self._subscriptions)

        for task in tasks:
            task.cancel()
        for subscription in subscriptions:
            subscription.close()

        logger.debug(
            "Page loader closed",
            extra={"loader": self.name, "cancelled_loads": len(tasks)},
        )

    async def aclose(self) -> None:
        tasks = list(self._tasks.values())
        self.close()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    async def __aenter__(self) -> "InfoStrategyPageLoader":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def _make_request(
        self, direction: Direction, current: Sequence[Any], info: Any
    ) -> LoadRequest:
        return InfoLoadRequest(direction=direction, current=current, info=info)

    def _prepare_result(self, result: LoadResult) -> LoadResult:
        return result

    def _load_page(self, direction: Direction) -> None:
        with self._lock:
            page_state = self.state.page_state(direction)
            if self._closed or not page_state.can_load:
                logger.debug(
                    "Ignoring page load",
                    extra={
                        "loader": self.name,
                        "direction": direction.value,
                        "page_state": str(page_state),
                        "closed": self._closed,
                    },
                )
                return

            previous, _ = self._modify(
                lambda current: current.model_copy(
                    update={
                        "loader_state": current.loader_state.with_page_state(
                            direction, LOADING
                        )
                    }
                ),
                lambda state, previous_state: LOADING_EVENTS[direction](
                    state=state, previous_state=previous_state
                ),
            )

        request = self._make_request(
            direction,
            previous.loader_state.elements,
            previous.info_for(direction),
        )
        self._start(direction, request)

    def _start(self, direction: Direction, request: LoadRequest) -> None:
        try:
            outcome = self._load(request)
        except Exception as e:
            self._fail(direction, e)
            return

        if isinstance(outcome, LoadResult):
            self._succeed(direction, outcome)
            return

        if hasattr(outcome, "__aiter__") and not hasattr(outcome, "__anext__"):
            outcome = outcome.__aiter__()

        if not (inspect.isawaitable(outcome) or hasattr(outcome, "__anext__")):
            self._fail(
                direction,
                InvalidLoadResultError(
                    direction.value, type(outcome).__name__, self.name
                ),
            )
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            if inspect.iscoroutine(outcome):
                outcome.close()
            error = EventLoopRequiredError(direction.value, self.name)
            logger.error(
                error.detail,
                extra={"loader": self.name, "direction": direction.value},
            )
            self._fail(direction, error)
            return

        task = loop.create_task(
            self._run(direction, outcome), name=f"{self.name}:{direction.value}"
        )
        with self._lock:
            self._tasks[direction] = task
        task.add_done_callback(lambda done: self._task_done(direction, done, outcome))

    async def _run(self, direction: Direction, outcome: Any) -> None:
        add_correlation_id("loader", self.name)
        add_correlation_id("direction", direction.value)

        try:
            with PerformanceLogger(
                logger,
                f"load_{direction.value}_page",
                slow_threshold_ms=settings.SLOW_LOAD_THRESHOLD_MS,
            ):
                result = await self._first_result(direction, outcome)
        except asyncio.CancelledError:
            logger.debug("Page load cancelled")
            raise
        except Exception as e:
            self._fail(direction, e)
            return

        self._succeed(direction, result)

    async def _first_result(self, direction: Direction, outcome: Any) -> LoadResult:
        if hasattr(outcome, "__anext__"):
            try:
                result = await outcome.__anext__()
            except StopAsyncIteration:
                raise NoLoadResultError(direction.value, self.name) from None
            finally:
                aclose = getattr(outcome, "aclose", None)
                if aclose is not None:
                    await aclose()
        else:
            result = await outcome

        if not isinstance(result, LoadResult):
            raise InvalidLoadResultError(
                direction.value, type(result).__name__, self.name
            )
        return result

    def _task_done(self, direction: Direction, task: asyncio.Task, outcome: Any) -> None:
        with self._lock:
            if self._tasks.get(direction) is task:
                del self._tasks[direction]

        # a task cancelled before its first step never awaited the fetch
        if task.cancelled() and inspect.iscoroutine(outcome):
            outcome.close()

        if not task.cancelled() and task.exception() is not None:
            logger.error(
                "Page load task crashed",
                extra={
                    "loader": self.name,
                    "direction": direction.value,
                    "error": str(task.exception()),
                    "error_type": task.exception().__class__.__name__,
                },
            )

    def _succeed(self, direction: Direction, result: LoadResult) -> None:
        result = self._prepare_result(result)
        opposite = direction.opposite

        def transform(current: InfoLoaderState) -> InfoLoaderState:
            loader_state = current.loader_state
            page_states = {
                direction: _page_state_for(result.has_more_for(direction), HAS_MORE),
                opposite: _page_state_for(
                    result.has_more_for(opposite), loader_state.page_state(opposite)
                ),
            }
            return InfoLoaderState(
                loader_state=LoaderState(
                    elements=tuple(
                        self._combine[direction](loader_state.elements, result.elements)
                    ),
                    next_page_state=page_states[Direction.NEXT],
                    previous_page_state=page_states[Direction.PREVIOUS],
                ),
                next_info=mutation_value_or(result.next_page_info, current.next_info),
                previous_info=mutation_value_or(
                    result.previous_page_info, current.previous_info
                ),
            )

        try:
            _, new = self._modify(
                transform,
                lambda state, previous_state: LOADED_EVENTS[direction](
                    state=state,
                    previous_state=previous_state,
                    new_elements=result.elements,
                ),
            )
        except Exception as e:
            logger.exception(
                "Failed to merge loaded page",
                extra={"loader": self.name, "direction": direction.value},
            )
            self._fail(direction, e)
            return

        logger.info(
            "Page loaded",
            extra={
                "loader": self.name,
                "direction": direction.value,
                "new_elements": len(result.elements),
                "total_elements": len(new.loader_state.elements),
                "page_state": str(new.loader_state.page_state(direction)),
            },
        )

    def _fail(self, direction: Direction, error: Exception) -> None:
        self._modify(
            lambda current: current.model_copy(
                update={
                    "loader_state": current.loader_state.with_page_state(
                        direction, Failed(error=error)
                    )
                }
            ),
            lambda state, previous_state: FAILED_EVENTS[direction](
                state=state, previous_state=previous_state
            ),
        )

        logger.warning(
            "Page load failed",
            extra={
                "loader": self.name,
                "direction": direction.value,
                "error": str(error),
                "error_type": error.__class__.__name__,
            },
        )

    def _modify(
        self,
        transform: Callable[[InfoLoaderState], InfoLoaderState],
        make_event: Callable[[LoaderState, LoaderState], LoaderEvent],
    ) -> Tuple[InfoLoaderState, InfoLoaderState]:
        """
        Replace the current state with `transform(current)` and publish the
        resulting event, atomically. Returns the (old, new) pair.
        """
        with self._lock:
            old = self._info_state
            new = transform(old)
            self._info_state = new
            event = make_event(new.loader_state, old.loader_state)
            for subscription in list(self._subscriptions):
                subscription.publish(event)
        return old, new

    def _unsubscribe(self, subscription: LoaderSubscription) -> None:
        with self._lock:
            self._subscriptions.discard(subscription)


def _page_state_for(mutation: Any, default: PageState) -> PageState:
    if mutation.is_replace:
        return page_state_for_has_more(bool(mutation.value))
    return default
