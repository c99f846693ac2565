from typing import Annotated, Any, Literal, Union
from pydantic import BaseModel, ConfigDict, Field


class _MutationBase(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def is_replace(self) -> bool:
        return isinstance(self, Replace)


class Replace(_MutationBase):
    """
    Overwrite the loader-owned value with `value`
    """

    kind: Literal["replace"] = "replace"
    value: Any


class DoNotReplace(_MutationBase):
    """
    Leave the loader-owned value to the loader's default for that field
    """

    kind: Literal["do_not_replace"] = "do_not_replace"

    @property
    def value(self) -> None:
        return None


Mutation = Annotated[Union[Replace, DoNotReplace], Field(discriminator="kind")]

DO_NOT_REPLACE = DoNotReplace()


def mutation_value_or(mutation: Union[Replace, DoNotReplace], default: Any) -> Any:
    """
    Return the replacement value of `mutation`, or `default` when it does not replace.

    `Replace(value=None)` replaces with `None`.
    """
    if mutation.is_replace:
        return mutation.value
    return default
