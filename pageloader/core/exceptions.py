from typing import Dict, Any


class PageLoaderError(Exception):
    """Base exception class for page loader errors"""

    def __init__(
        self,
        detail: str,
        error_code: str,
        additional_info: Dict[str, Any] | None = None,
    ):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code
        self.additional_info = additional_info or {}


class NoLoadResultError(PageLoaderError):
    """Raised when a load function finishes without producing a result"""

    def __init__(self, direction: str, loader: str | None = None):
        super().__init__(
            detail=f"Load function produced no result for the {direction} page",
            error_code="NO_LOAD_RESULT",
            additional_info={"direction": direction, "loader": loader},
        )


class EventLoopRequiredError(PageLoaderError):
    """Raised when an asynchronous load is started outside a running event loop"""

    def __init__(self, direction: str, loader: str | None = None):
        super().__init__(
            detail=(
                f"Asynchronous load of the {direction} page requires a running event loop"
            ),
            error_code="EVENT_LOOP_REQUIRED",
            additional_info={"direction": direction, "loader": loader},
        )


class InvalidPageSizeError(PageLoaderError):
    """Raised when a page size is not a positive integer"""

    def __init__(self, page_size: int):
        super().__init__(
            detail=f"Invalid page size: {page_size}",
            error_code="INVALID_PAGE_SIZE",
            additional_info={"page_size": page_size},
        )


class InvalidLoadResultError(PageLoaderError):
    """Raised when a load function produces something other than a LoadResult"""

    def __init__(self, direction: str, received: str, loader: str | None = None):
        super().__init__(
            detail=f"Load function for the {direction} page produced {received}",
            error_code="INVALID_LOAD_RESULT",
            additional_info={
                "direction": direction,
                "received": received,
                "loader": loader,
            },
        )
