from typing import Any, Callable, Generic, Protocol, TypeVar, Union, runtime_checkable


A = TypeVar("A")
S = TypeVar("S")


__all__ = (
    "FunctionReducer",
    "Reduce",
    "Reducer",
    "ReducerFunction",

    "as_reducer",
)


ReducerFunction = Callable[[S, A], S]


@runtime_checkable
class Reduce(Protocol):
    """State that knows how to advance itself for an action."""

    def reduce(self, action: Any) -> Any:
        ...


class Reducer(Generic[S, A]):
    def apply(self, state: S, action: A) -> S:
        return state.reduce(action)  # type: ignore[attr-defined]

    def __call__(self, state: S, action: A) -> S:
        return self.apply(state, action)


class FunctionReducer(Reducer[S, A]):
    def __init__(self, function: ReducerFunction) -> None:
        self.function = function

    def apply(self, state: S, action: A) -> S:
        return self.function(state, action)


def as_reducer(
    value: Union[None, Reducer[S, A], ReducerFunction]
) -> Reducer[S, A]:
    if value is None:
        return Reducer()

    if isinstance(value, Reducer):
        return value

    if callable(value):
        return FunctionReducer(value)

    raise TypeError(f"Cannot use {type(value).__qualname__} as a reducer")
