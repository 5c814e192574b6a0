"""In-memory implementation of the entity store."""

from dataclasses import dataclass, field
from uuid import uuid4

from burger_tracker.domain.entities import BurgerDefinition, BurgerLog, Place
from burger_tracker.services.catalog import EntityStore


@dataclass
class InMemoryEntityStore(EntityStore):
    """Process-local store holding the three entity collections.

    Places and burgers keep creation order; logs are kept newest first.
    Deletes never cascade.
    """

    places: list[Place] = field(default_factory=list)
    burger_definitions: list[BurgerDefinition] = field(default_factory=list)
    logs: list[BurgerLog] = field(default_factory=list)

    def list_places(self) -> list[Place]:
        """Return a snapshot of all places."""
        return list(self.places)

    def list_burger_definitions(self) -> list[BurgerDefinition]:
        """Return a snapshot of all burger definitions."""
        return list(self.burger_definitions)

    def list_logs(self) -> list[BurgerLog]:
        """Return a snapshot of all logs, newest entry first."""
        return list(self.logs)

    def get_place(self, place_id: str) -> Place | None:
        """Return a place by id, if present."""
        return next((item for item in self.places if item.id == place_id), None)

    def get_burger_definition(self, burger_def_id: str) -> BurgerDefinition | None:
        """Return a burger definition by id, if present."""
        return next(
            (item for item in self.burger_definitions if item.id == burger_def_id),
            None,
        )

    def get_log(self, log_id: str) -> BurgerLog | None:
        """Return a log by id, if present."""
        return next((item for item in self.logs if item.id == log_id), None)

    def create_place(
        self, name: str, color: int, icon: str, icon_ref: str | None
    ) -> Place:
        """Create a place and return it."""
        place = Place(
            id=uuid4().hex, name=name, color=color, icon=icon, icon_ref=icon_ref
        )
        self.places = [*self.places, place]
        return place

    def update_place(self, place: Place) -> None:
        """Replace the stored place with the same id."""
        self.places = [place if item.id == place.id else item for item in self.places]

    def delete_place(self, place_id: str) -> None:
        """Remove a place."""
        self.places = [item for item in self.places if item.id != place_id]

    def create_burger_definition(
        self, place_id: str, name: str, rating: int
    ) -> BurgerDefinition:
        """Create a burger definition and return it."""
        definition = BurgerDefinition(
            id=uuid4().hex, place_id=place_id, name=name, rating=rating
        )
        self.burger_definitions = [*self.burger_definitions, definition]
        return definition

    def update_burger_definition(self, definition: BurgerDefinition) -> None:
        """Replace the stored definition with the same id."""
        self.burger_definitions = [
            definition if item.id == definition.id else item
            for item in self.burger_definitions
        ]

    def delete_burger_definition(self, burger_def_id: str) -> None:
        """Remove a burger definition."""
        self.burger_definitions = [
            item for item in self.burger_definitions if item.id != burger_def_id
        ]

    def prepend_log(self, log: BurgerLog) -> BurgerLog:
        """Store a log in front of the existing ones."""
        self.logs = [log, *self.logs]
        return log

    def delete_log(self, log_id: str) -> None:
        """Remove a log."""
        self.logs = [item for item in self.logs if item.id != log_id]
