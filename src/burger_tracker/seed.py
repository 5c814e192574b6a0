"""First-run sample data."""

from datetime import date, timedelta

from burger_tracker.adapters.in_memory_store import InMemoryEntityStore
from burger_tracker.domain.entities import (
    BurgerDefinition,
    BurgerLog,
    HomeEntry,
    Place,
    StreetEntry,
)

INITIAL_PLACES = (
    Place(id="p1", name="Carl's Jr.", color=0xFFFFD700),
    Place(id="p2", name="McDonalds", color=0xFFDA291C),
    Place(id="p3", name="La Burguesía", color=0xFF2E4053),
)

INITIAL_BURGER_DEFINITIONS = (
    BurgerDefinition(id="b1", place_id="p1", name="Double Western", rating=5),
    BurgerDefinition(id="b2", place_id="p2", name="Big Mac", rating=3),
    BurgerDefinition(id="b3", place_id="p3", name="La Trufada", rating=4),
)


def initial_logs(today: date) -> list[BurgerLog]:
    """Return the sample logs relative to today, newest first."""
    return [
        BurgerLog(
            id="l4",
            day=today,
            entry=HomeEntry(quantity=2),
            note="Hamburguesas de hoy",
        ),
        BurgerLog(
            id="l3",
            day=today - timedelta(days=2),
            entry=StreetEntry(burger_def_id="b2"),
            note="Rápida y barata",
        ),
        BurgerLog(
            id="l2",
            day=today - timedelta(days=10),
            entry=HomeEntry(quantity=3),
            note="Asado con los amigos",
        ),
        BurgerLog(
            id="l1",
            day=today - timedelta(days=15),
            entry=StreetEntry(burger_def_id="b1"),
            note="Clásica e insuperable",
        ),
    ]


def build_seeded_store(today: date | None = None) -> InMemoryEntityStore:
    """Return a store filled with the sample places, burgers and logs."""
    return InMemoryEntityStore(
        places=list(INITIAL_PLACES),
        burger_definitions=list(INITIAL_BURGER_DEFINITIONS),
        logs=initial_logs(today or date.today()),
    )
