import copy

from inspect import signature
from typing import (
    Callable,
    Generic,
    Iterable,
    Optional,
    Type,
    TypeVar,
    Union,
    get_type_hints
)

from pydantic import BaseModel

from ._middleware import Middleware, MiddlewareContext
from ._reducer import Reduce, Reducer, ReducerFunction, as_reducer


A = TypeVar("A")
S = TypeVar("S")
T = TypeVar("T")


__all__ = (
    "StateFactory",
    "Store",

    "create_store",
)


StateFactory = Callable[[], S]


def _clone(value: T) -> T:
    if isinstance(value, BaseModel):
        return value.model_copy(deep=True)

    return copy.deepcopy(value)


class Store(Generic[S, A]):
    """Holds one state value and advances it only through ``dispatch``."""

    _state: S
    _reducer: Reducer[S, A]
    _middleware: list[Middleware]

    def __init__(
        self,
        state: S,
        reducer: Union[None, Reducer[S, A], ReducerFunction] = None
    ) -> None:
        if reducer is None and not isinstance(state, Reduce):
            raise TypeError(
                f"{type(state).__qualname__} has no reduce method "
                "and no reducer was given"
            )

        self._state = _clone(state)
        self._reducer = as_reducer(reducer)
        self._middleware = []

    @classmethod
    def default(
        cls,
        state_type: Type[S],
        reducer: Union[None, Reducer[S, A], ReducerFunction] = None
    ) -> "Store[S, A]":
        return cls(state_type(), reducer)

    @property
    def middleware(self) -> tuple[Middleware, ...]:
        return tuple(self._middleware)

    def add_middleware(self, middleware: Middleware) -> "Store[S, A]":
        self._middleware.append(middleware)

        return self

    def dispatch(self, action: A) -> None:
        # Middleware registered mid-dispatch only run from the next dispatch.
        # Each middleware gets its own copy of the action; the reducer gets
        # the original.
        for middleware in tuple(self._middleware):
            middleware(
                MiddlewareContext(
                    action=_clone(action),
                    get_state=self.get_state
                )
            )

        self._state = self._reducer.apply(self._state, action)

    def get_state(self) -> S:
        return _clone(self._state)


def _get_reducer_state_type(reducer: ReducerFunction) -> Type[S]:
    try:
        hints = get_type_hints(reducer)
        parameters = list(signature(reducer).parameters)
    except (NameError, TypeError, ValueError):
        hints, parameters = {}, []

    state_type = hints.get(parameters[0]) if parameters else None

    if state_type is None:
        raise TypeError("Reducer must have type annotations")

    return state_type


def create_store(
    reducer: ReducerFunction,
    initial_state_factory: Optional[StateFactory] = None,
    middleware: Iterable[Middleware] = ()
) -> Store[S, A]:
    if initial_state_factory is None:
        initial_state_factory = _get_reducer_state_type(reducer)

    store: Store[S, A] = Store(initial_state_factory(), reducer)

    for callable in middleware:
        store.add_middleware(callable)

    return store
