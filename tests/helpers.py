import asyncio

from pageloader.models import LoadRequest, LoadResult


class ControlledLoad:
    """
    Load function whose results are resolved by the test
    """

    def __init__(self):
        self.requests = []
        self.futures = []

    def __call__(self, request: LoadRequest) -> "asyncio.Future[LoadResult]":
        future = asyncio.get_running_loop().create_future()
        self.requests.append(request)
        self.futures.append(future)
        return future

    def succeed(self, index: int, result: LoadResult) -> None:
        self.futures[index].set_result(result)

    def fail(self, index: int, error: Exception) -> None:
        self.futures[index].set_exception(error)


class RecordingLoad:
    """
    Synchronous load function returning the same result for every request
    """

    def __init__(self, result: LoadResult):
        self.result = result
        self.requests = []

    def __call__(self, request: LoadRequest) -> LoadResult:
        self.requests.append(request)
        return self.result


class LoadError(Exception):
    """Error raised by test load functions"""

    pass
