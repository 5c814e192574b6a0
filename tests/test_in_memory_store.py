"""Tests for the in-memory entity store."""

from datetime import date

from burger_tracker.adapters.in_memory_store import InMemoryEntityStore
from burger_tracker.domain.entities import BurgerDefinition
from tests.conftest import home_log


def test_prepend_log_puts_newest_first() -> None:
    store = InMemoryEntityStore()
    first = store.prepend_log(home_log("a", date(2024, 1, 1), 1))
    second = store.prepend_log(home_log("b", date(2023, 1, 1), 1))

    assert store.list_logs() == [second, first]


def test_snapshots_are_independent_of_later_writes() -> None:
    store = InMemoryEntityStore()
    store.create_place(name="A", color=0xFF000000, icon="x", icon_ref=None)
    snapshot = store.list_places()

    store.create_place(name="B", color=0xFF000000, icon="x", icon_ref=None)

    assert [place.name for place in snapshot] == ["A"]
    assert [place.name for place in store.list_places()] == ["A", "B"]


def test_create_generates_unique_ids() -> None:
    store = InMemoryEntityStore()
    first = store.create_burger_definition(place_id="p", name="A", rating=0)
    second = store.create_burger_definition(place_id="p", name="A", rating=0)

    assert first.id != second.id
    assert store.get_burger_definition(first.id) == first


def test_update_burger_definition_keeps_position() -> None:
    store = InMemoryEntityStore(
        burger_definitions=[
            BurgerDefinition(id="x", place_id="p", name="X", rating=1),
            BurgerDefinition(id="y", place_id="p", name="Y", rating=2),
        ]
    )

    store.update_burger_definition(
        BurgerDefinition(id="x", place_id="p", name="X", rating=5)
    )

    assert [(item.id, item.rating) for item in store.list_burger_definitions()] == [
        ("x", 5),
        ("y", 2),
    ]


def test_delete_place_does_not_cascade() -> None:
    store = InMemoryEntityStore()
    place = store.create_place(name="A", color=0xFF000000, icon="x", icon_ref=None)
    definition = store.create_burger_definition(place.id, "Burger", 3)

    store.delete_place(place.id)

    assert store.get_place(place.id) is None
    assert store.get_burger_definition(definition.id) == definition
