from dataclasses import dataclass

import pytest

from pydantic import BaseModel

from lstore import MiddlewareContext, Store, create_store


class Inventory(BaseModel):
    count: int = 0


@dataclass
class Restock:
    amount: int


def inventory(state: Inventory, action: Restock) -> Inventory:
    return Inventory(count=state.count + action.amount)


def test_state_type_is_read_from_annotations():
    store = create_store(inventory)

    assert isinstance(store, Store)
    assert store.get_state() == Inventory()

    store.dispatch(Restock(amount=3))

    assert store.get_state() == Inventory(count=3)


def test_initial_state_factory():
    store = create_store(inventory, lambda: Inventory(count=10))
    store.dispatch(Restock(amount=1))

    assert store.get_state().count == 11


def test_unannotated_reducer_needs_factory():
    with pytest.raises(TypeError, match="type annotations"):
        create_store(lambda state, action: state)

    store = create_store(lambda state, action: state + action, lambda: 0)
    store.dispatch(2)

    assert store.get_state() == 2


def test_middleware_registered_in_order():
    log = []

    def first(context: MiddlewareContext) -> None:
        log.append(("first", context.get_state().count))

    def second(context: MiddlewareContext) -> None:
        log.append(("second", context.get_state().count))

    store = create_store(inventory, middleware=[first, second])

    assert store.middleware == (first, second)

    store.dispatch(Restock(amount=2))
    store.dispatch(Restock(amount=2))

    assert log == [("first", 0), ("second", 0), ("first", 2), ("second", 2)]
