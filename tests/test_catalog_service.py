"""Tests for place and burger management."""

import pytest

from burger_tracker.adapters.in_memory_store import InMemoryEntityStore
from burger_tracker.domain.entities import DEFAULT_PLACE_ICON
from burger_tracker.domain.errors import EntityNotFoundError, ValidationError
from burger_tracker.domain.palette import NEW_PLACE_COLOR
from burger_tracker.services.catalog import CatalogService


def test_add_place_uses_defaults(catalog: CatalogService) -> None:
    place = catalog.add_place("  Burger King ")

    assert place.name == "Burger King"
    assert place.color == NEW_PLACE_COLOR
    assert place.icon == DEFAULT_PLACE_ICON
    assert catalog.list_places()[-1] == place


def test_add_place_rejects_blank_name(catalog: CatalogService) -> None:
    with pytest.raises(ValidationError):
        catalog.add_place("   ")


def test_add_place_rejects_out_of_range_color(catalog: CatalogService) -> None:
    with pytest.raises(ValidationError):
        catalog.add_place("Too Bright", color=0x1FFFFFFFF)


def test_update_place_keeps_id_and_edits_in_place(catalog: CatalogService) -> None:
    updated = catalog.update_place("p2", name="McDonald's", color=0xFF00FF00)

    assert updated.id == "p2"
    assert updated.name == "McDonald's"
    assert updated.color == 0xFF00FF00
    assert [place.id for place in catalog.list_places()] == ["p1", "p2"]
    assert catalog.get_place("p2") == updated


def test_update_place_rejects_blank_name(catalog: CatalogService) -> None:
    with pytest.raises(ValidationError):
        catalog.update_place("p1", name="")

    assert catalog.get_place("p1").name == "Carl's Jr."


def test_update_unknown_place(catalog: CatalogService) -> None:
    with pytest.raises(EntityNotFoundError):
        catalog.update_place("missing", name="X")


def test_delete_place_orphans_its_burgers(
    catalog: CatalogService, store: InMemoryEntityStore
) -> None:
    catalog.delete_place("p1")

    assert store.get_place("p1") is None
    assert [item.id for item in catalog.list_burger_definitions("p1")] == ["b1", "b3"]
    assert len(store.list_logs()) == 3


def test_add_burger_definition_requires_known_place(catalog: CatalogService) -> None:
    with pytest.raises(EntityNotFoundError):
        catalog.add_burger_definition("missing", "Whopper", 3)


def test_add_burger_definition_validates_input(catalog: CatalogService) -> None:
    with pytest.raises(ValidationError):
        catalog.add_burger_definition("p1", " ", 3)
    with pytest.raises(ValidationError):
        catalog.add_burger_definition("p1", "Whopper", 6)


def test_add_burger_definition_allows_unrated(catalog: CatalogService) -> None:
    definition = catalog.add_burger_definition("p2", "McFlurry Burger")

    assert definition.rating == 0
    assert definition in catalog.list_burger_definitions("p2")


def test_rate_burger_definition_overwrites(catalog: CatalogService) -> None:
    catalog.rate_burger_definition("b2", 5)
    rated = catalog.rate_burger_definition("b2", 1)

    assert rated.rating == 1
    assert catalog.get_burger_definition("b2").rating == 1


@pytest.mark.parametrize("rating", [0, 6, -1])
def test_rate_burger_definition_rejects_out_of_range(
    catalog: CatalogService, rating: int
) -> None:
    with pytest.raises(ValidationError):
        catalog.rate_burger_definition("b1", rating)


def test_rename_burger_definition(catalog: CatalogService) -> None:
    renamed = catalog.rename_burger_definition("b1", "Western Bacon")

    assert renamed.name == "Western Bacon"
    assert renamed.rating == 5


def test_delete_burger_definition_keeps_logs(
    catalog: CatalogService, store: InMemoryEntityStore
) -> None:
    catalog.delete_burger_definition("b2")

    assert store.get_burger_definition("b2") is None
    assert store.get_log("l2") is not None
    with pytest.raises(EntityNotFoundError):
        catalog.delete_burger_definition("b2")
