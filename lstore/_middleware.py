import logging

from typing import Callable, Generic, TypeVar

from pydantic import BaseModel, ConfigDict


A = TypeVar("A")
S = TypeVar("S")


logger = logging.getLogger("lstore")


__all__ = (
    "Middleware",
    "MiddlewareContext",

    "logging_middleware",
)


class MiddlewareContext(BaseModel, Generic[S, A]):
    """What a middleware sees of a single dispatch.

    ``action`` is a private copy of the action being dispatched, so
    changing it has no effect on the reduction. ``get_state`` returns a fresh
    copy of the store's state every time it is called; during dispatch that
    is always the state from before this action is reduced. Neither is valid
    once the middleware call returns.
    """

    model_config = ConfigDict(frozen=True)

    action: A
    get_state: Callable[[], S]


Middleware = Callable[[MiddlewareContext[S, A]], None]


def logging_middleware(
    logger: logging.Logger = logger,
    level: int = logging.DEBUG
) -> Middleware:
    def middleware(context: MiddlewareContext[S, A]) -> None:
        if not logger.isEnabledFor(level):
            return

        logger.log(
            level,
            "Dispatching %r on state %r",
            context.action,
            context.get_state()
        )

    return middleware
