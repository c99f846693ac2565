from typing import Annotated, Any, Callable, Literal, Union
from pydantic import BaseModel, ConfigDict, Field


class _PageStateBase(BaseModel):
    """
    Lifecycle of one direction's pagination cursor
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def is_has_more(self) -> bool:
        return isinstance(self, HasMore)

    @property
    def is_completed(self) -> bool:
        return isinstance(self, Completed)

    @property
    def is_loading(self) -> bool:
        return isinstance(self, Loading)

    @property
    def is_failed(self) -> bool:
        return isinstance(self, Failed)

    @property
    def can_load(self) -> bool:
        """
        Whether a load may be started from this state
        """
        return self.is_has_more or self.is_failed

    def map_error(self, transform: Callable[[Any], Any]) -> "PageState":
        return self


class _NoError:
    @property
    def error(self) -> None:
        return None


class HasMore(_NoError, _PageStateBase):
    kind: Literal["has_more"] = "has_more"

    def __str__(self) -> str:
        return "Has More"


class Completed(_NoError, _PageStateBase):
    kind: Literal["completed"] = "completed"

    def __str__(self) -> str:
        return "Completed"


class Loading(_NoError, _PageStateBase):
    kind: Literal["loading"] = "loading"

    def __str__(self) -> str:
        return "Loading"


class Failed(_PageStateBase):
    """
    The last load for this direction failed with `error`

    Two failed states are equal when their errors are equal, or when both
    errors are exceptions of the same type with the same arguments.
    """

    kind: Literal["failed"] = "failed"
    error: Any

    def map_error(self, transform: Callable[[Any], Any]) -> "Failed":
        return Failed(error=transform(self.error))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Failed):
            return NotImplemented
        return errors_equal(self.error, other.error)

    def __hash__(self) -> int:
        return hash((self.kind, type(self.error).__name__))

    def __str__(self) -> str:
        return f"Error: {self.error}"


PageState = Annotated[
    Union[HasMore, Completed, Loading, Failed], Field(discriminator="kind")
]

HAS_MORE = HasMore()
COMPLETED = Completed()
LOADING = Loading()


def errors_equal(lhs: Any, rhs: Any) -> bool:
    if lhs is rhs:
        return True
    if isinstance(lhs, BaseException) and isinstance(rhs, BaseException):
        return type(lhs) is type(rhs) and lhs.args == rhs.args
    return lhs == rhs


def page_state_for_has_more(has_more: bool) -> Union[HasMore, Completed]:
    return HAS_MORE if has_more else COMPLETED
