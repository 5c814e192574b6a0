"""Domain models for places, burgers and consumption logs."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

DEFAULT_PLACE_ICON = "🍔"
MAX_RATING = 5


class LogType(StrEnum):
    """Where the burgers of a log entry came from."""

    HOME = "HOME"
    STREET = "STREET"


@dataclass(frozen=True)
class Place:
    """A restaurant or other source of street-bought burgers."""

    id: str
    name: str
    color: int
    icon: str = DEFAULT_PLACE_ICON
    icon_ref: str | None = None


@dataclass(frozen=True)
class BurgerDefinition:
    """A named, ratable burger sold at one place."""

    id: str
    place_id: str
    name: str
    rating: int = 0


@dataclass(frozen=True)
class HomeEntry:
    """A batch of home-made burgers eaten on one day."""

    quantity: int


@dataclass(frozen=True)
class StreetEntry:
    """A single burger bought at a place."""

    burger_def_id: str


LogEntry = HomeEntry | StreetEntry


@dataclass(frozen=True)
class BurgerLog:
    """One dated consumption event."""

    id: str
    day: date
    entry: LogEntry
    note: str = ""
    photo_ref: str | None = None

    @property
    def type(self) -> LogType:
        """Return the log type implied by the entry variant."""
        if isinstance(self.entry, HomeEntry):
            return LogType.HOME
        return LogType.STREET

    @property
    def burger_def_id(self) -> str | None:
        """Return the referenced definition id for street logs."""
        if isinstance(self.entry, StreetEntry):
            return self.entry.burger_def_id
        return None
