"""Entity store interface and management of places and burgers."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol

from burger_tracker.domain.entities import (
    DEFAULT_PLACE_ICON,
    MAX_RATING,
    BurgerDefinition,
    BurgerLog,
    Place,
)
from burger_tracker.domain.errors import EntityNotFoundError, ValidationError
from burger_tracker.domain.palette import NEW_PLACE_COLOR, is_valid_argb

_logger = logging.getLogger(__name__)


class EntityStore(Protocol):
    """Single source of truth for places, burger definitions and logs."""

    def list_places(self) -> list[Place]:
        """Return a snapshot of all places in insertion order."""

    def list_burger_definitions(self) -> list[BurgerDefinition]:
        """Return a snapshot of all burger definitions in insertion order."""

    def list_logs(self) -> list[BurgerLog]:
        """Return a snapshot of all logs, newest entry first."""

    def get_place(self, place_id: str) -> Place | None:
        """Return a place by id, if present."""

    def get_burger_definition(self, burger_def_id: str) -> BurgerDefinition | None:
        """Return a burger definition by id, if present."""

    def get_log(self, log_id: str) -> BurgerLog | None:
        """Return a log by id, if present."""

    def create_place(
        self, name: str, color: int, icon: str, icon_ref: str | None
    ) -> Place:
        """Create a place and return it."""

    def update_place(self, place: Place) -> None:
        """Replace the stored place with the same id."""

    def delete_place(self, place_id: str) -> None:
        """Remove a place without touching what references it."""

    def create_burger_definition(
        self, place_id: str, name: str, rating: int
    ) -> BurgerDefinition:
        """Create a burger definition and return it."""

    def update_burger_definition(self, definition: BurgerDefinition) -> None:
        """Replace the stored definition with the same id."""

    def delete_burger_definition(self, burger_def_id: str) -> None:
        """Remove a definition without touching logs that reference it."""

    def prepend_log(self, log: BurgerLog) -> BurgerLog:
        """Store a log in front of the existing ones and return it."""

    def delete_log(self, log_id: str) -> None:
        """Remove a log."""


def clean_name(value: str, kind: str) -> str:
    """Return the stripped name or raise when it is blank."""
    cleaned = value.strip()
    if not cleaned:
        raise ValidationError(f"{kind} name must not be blank")
    return cleaned


def check_rating(rating: int, *, allow_unrated: bool) -> int:
    """Return the rating when it is within the accepted range."""
    lowest = 0 if allow_unrated else 1
    if not lowest <= rating <= MAX_RATING:
        raise ValidationError(f"rating must be between {lowest} and {MAX_RATING}")
    return rating


def _check_color(color: int) -> int:
    if not is_valid_argb(color):
        raise ValidationError(f"color must be a 32-bit ARGB value, got {color}")
    return color


@dataclass
class CatalogService:
    """Service for managing places and burger definitions."""

    store: EntityStore

    def list_places(self) -> list[Place]:
        """Return all places."""
        return self.store.list_places()

    def list_burger_definitions(
        self, place_id: str | None = None
    ) -> list[BurgerDefinition]:
        """Return burger definitions, optionally only those of one place."""
        definitions = self.store.list_burger_definitions()
        if place_id is None:
            return definitions
        return [item for item in definitions if item.place_id == place_id]

    def add_place(
        self,
        name: str,
        color: int | None = None,
        icon: str | None = None,
        icon_ref: str | None = None,
    ) -> Place:
        """Create a new place."""
        place = self.store.create_place(
            name=clean_name(name, "Place"),
            color=_check_color(NEW_PLACE_COLOR if color is None else color),
            icon=icon or DEFAULT_PLACE_ICON,
            icon_ref=icon_ref,
        )
        _logger.info("Place created: id=%s name=%s", place.id, place.name)
        return place

    def update_place(
        self,
        place_id: str,
        *,
        name: str | None = None,
        color: int | None = None,
        icon: str | None = None,
        icon_ref: str | None = None,
    ) -> Place:
        """Edit the name, colour or icon of a place in place."""
        place = self.get_place(place_id)
        updated = replace(
            place,
            name=place.name if name is None else clean_name(name, "Place"),
            color=place.color if color is None else _check_color(color),
            icon=icon or place.icon,
            icon_ref=place.icon_ref if icon_ref is None else icon_ref,
        )
        self.store.update_place(updated)
        _logger.info("Place updated: id=%s", place_id)
        return updated

    def delete_place(self, place_id: str) -> None:
        """Delete a place; burgers and logs that reference it become orphans."""
        self.get_place(place_id)
        self.store.delete_place(place_id)
        orphans = self.list_burger_definitions(place_id)
        _logger.info(
            "Place deleted: id=%s orphaned_burgers=%s", place_id, len(orphans)
        )

    def get_place(self, place_id: str) -> Place:
        """Return a place or raise when it does not exist."""
        place = self.store.get_place(place_id)
        if place is None:
            raise EntityNotFoundError("Place", place_id)
        return place

    def add_burger_definition(
        self, place_id: str, name: str, rating: int = 0
    ) -> BurgerDefinition:
        """Create a burger definition at an existing place."""
        self.get_place(place_id)
        definition = self.store.create_burger_definition(
            place_id=place_id,
            name=clean_name(name, "Burger"),
            rating=check_rating(rating, allow_unrated=True),
        )
        _logger.info(
            "Burger created: id=%s place_id=%s rating=%s",
            definition.id,
            place_id,
            definition.rating,
        )
        return definition

    def rename_burger_definition(
        self, burger_def_id: str, name: str
    ) -> BurgerDefinition:
        """Change the name of a burger definition."""
        definition = self.get_burger_definition(burger_def_id)
        updated = replace(definition, name=clean_name(name, "Burger"))
        self.store.update_burger_definition(updated)
        return updated

    def rate_burger_definition(
        self, burger_def_id: str, rating: int
    ) -> BurgerDefinition:
        """Overwrite the current rating of a burger definition."""
        definition = self.get_burger_definition(burger_def_id)
        updated = replace(
            definition, rating=check_rating(rating, allow_unrated=False)
        )
        if updated != definition:
            self.store.update_burger_definition(updated)
            _logger.info(
                "Burger rated: id=%s rating=%s->%s",
                burger_def_id,
                definition.rating,
                updated.rating,
            )
        return updated

    def delete_burger_definition(self, burger_def_id: str) -> None:
        """Delete a burger definition; logs that reference it become orphans."""
        self.get_burger_definition(burger_def_id)
        self.store.delete_burger_definition(burger_def_id)
        _logger.info("Burger deleted: id=%s", burger_def_id)

    def get_burger_definition(self, burger_def_id: str) -> BurgerDefinition:
        """Return a burger definition or raise when it does not exist."""
        definition = self.store.get_burger_definition(burger_def_id)
        if definition is None:
            raise EntityNotFoundError("Burger", burger_def_id)
        return definition
