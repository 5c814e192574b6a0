"""Logbook service for recording and removing burger logs."""

import logging
from dataclasses import dataclass
from datetime import date
from uuid import uuid4

from burger_tracker.domain.entities import (
    BurgerDefinition,
    BurgerLog,
    HomeEntry,
    Place,
    StreetEntry,
)
from burger_tracker.domain.errors import (
    EntityNotFoundError,
    LogValidationError,
    ValidationError,
)
from burger_tracker.domain.palette import NEW_PLACE_COLOR
from burger_tracker.services.catalog import CatalogService, check_rating, clean_name

_logger = logging.getLogger(__name__)


@dataclass
class LogbookService:
    """Service that validates and stores new burger logs."""

    catalog: CatalogService

    def list_logs(self) -> list[BurgerLog]:
        """Return every log, newest entry first."""
        return self.catalog.store.list_logs()

    def record_home(
        self,
        day: date,
        quantity: int,
        note: str = "",
        photo_ref: str | None = None,
    ) -> BurgerLog:
        """Record home-made burgers eaten on a day."""
        if quantity <= 0:
            raise LogValidationError("quantity must be a positive integer")
        log = self.catalog.store.prepend_log(
            BurgerLog(
                id=uuid4().hex,
                day=day,
                entry=HomeEntry(quantity=quantity),
                note=note.strip(),
                photo_ref=photo_ref,
            )
        )
        _logger.info("Home log saved: id=%s day=%s quantity=%s", log.id, day, quantity)
        return log

    def record_street(  # noqa: PLR0913
        self,
        day: date,
        *,
        place_id: str | None = None,
        new_place_name: str | None = None,
        burger_def_id: str | None = None,
        new_burger_name: str | None = None,
        rating: int = 0,
        note: str = "",
        photo_ref: str | None = None,
    ) -> BurgerLog:
        """Record a burger bought at a place.

        A new place always comes with a new burger, and a new burger needs a
        rating. Logging a known burger with a different rating overwrites its
        current rating.
        """
        creates_burger = new_place_name is not None or new_burger_name is not None
        self._check_street(
            place_id=place_id,
            new_place_name=new_place_name,
            burger_def_id=burger_def_id,
            new_burger_name=new_burger_name,
            rating=rating,
            creates_burger=creates_burger,
        )

        if creates_burger:
            place = self._resolve_place(place_id, new_place_name)
            definition = self.catalog.add_burger_definition(
                place.id, new_burger_name or "", rating
            )
        else:
            definition = self._existing_burger(place_id, burger_def_id, rating)

        log = self.catalog.store.prepend_log(
            BurgerLog(
                id=uuid4().hex,
                day=day,
                entry=StreetEntry(burger_def_id=definition.id),
                note=note.strip(),
                photo_ref=photo_ref,
            )
        )
        _logger.info(
            "Street log saved: id=%s day=%s burger_id=%s", log.id, day, definition.id
        )
        return log

    def delete_log(self, log_id: str) -> None:
        """Remove a log from the logbook."""
        if self.catalog.store.get_log(log_id) is None:
            raise EntityNotFoundError("Log", log_id)
        self.catalog.store.delete_log(log_id)
        _logger.info("Log deleted: id=%s", log_id)

    def _check_street(  # noqa: PLR0913
        self,
        *,
        place_id: str | None,
        new_place_name: str | None,
        burger_def_id: str | None,
        new_burger_name: str | None,
        rating: int,
        creates_burger: bool,
    ) -> None:
        """Run every add-log check before anything is written."""
        try:
            if (place_id is None) == (new_place_name is None):
                raise LogValidationError("choose an existing place or name a new one")
            if new_place_name is not None:
                clean_name(new_place_name, "Place")
            elif self.catalog.store.get_place(place_id or "") is None:
                raise LogValidationError(f"unknown place: {place_id}")

            if creates_burger:
                if burger_def_id is not None:
                    raise LogValidationError(
                        "choose an existing burger or name a new one, not both"
                    )
                if new_burger_name is None:
                    raise LogValidationError("a new place needs a new burger name")
                clean_name(new_burger_name, "Burger")
                check_rating(rating, allow_unrated=False)
            elif burger_def_id is None:
                raise LogValidationError("choose an existing burger or name a new one")
            elif rating:
                check_rating(rating, allow_unrated=False)
        except LogValidationError:
            raise
        except ValidationError as exc:
            raise LogValidationError(str(exc)) from exc

    def _resolve_place(self, place_id: str | None, new_place_name: str | None) -> Place:
        if new_place_name is not None:
            return self.catalog.add_place(new_place_name, color=NEW_PLACE_COLOR)
        return self.catalog.get_place(place_id or "")

    def _existing_burger(
        self, place_id: str | None, burger_def_id: str | None, rating: int
    ) -> BurgerDefinition:
        definition = self.catalog.store.get_burger_definition(burger_def_id or "")
        if definition is None:
            raise LogValidationError(f"unknown burger: {burger_def_id}")
        if definition.place_id != place_id:
            raise LogValidationError(
                f"burger {definition.id} is not sold at place {place_id}"
            )
        if rating and rating != definition.rating:
            return self.catalog.rate_burger_definition(definition.id, rating)
        return definition
