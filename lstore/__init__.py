from ._middleware import Middleware, MiddlewareContext, logging_middleware
from ._reducer import (
    FunctionReducer,
    Reduce,
    Reducer,
    ReducerFunction,
    as_reducer
)
from ._store import StateFactory, Store, create_store


__all__ = (
    "FunctionReducer",
    "Middleware",
    "MiddlewareContext",
    "Reduce",
    "Reducer",
    "ReducerFunction",
    "StateFactory",
    "Store",

    "as_reducer",
    "create_store",
    "logging_middleware"
)
