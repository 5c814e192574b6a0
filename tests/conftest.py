"""Shared test fixtures."""

from dataclasses import dataclass
from datetime import date

import pytest
from fastapi.testclient import TestClient

from burger_tracker.adapters.in_memory_store import InMemoryEntityStore
from burger_tracker.api.app import create_app
from burger_tracker.config import Settings
from burger_tracker.containers import AppContainer, build_container
from burger_tracker.domain.entities import (
    BurgerDefinition,
    BurgerLog,
    HomeEntry,
    Place,
    StreetEntry,
)
from burger_tracker.services.catalog import CatalogService
from burger_tracker.services.logbook import LogbookService
from burger_tracker.services.stats import StatsService

ANCHOR = date(2024, 3, 6)


def home_log(log_id: str, day: date, quantity: int, note: str = "") -> BurgerLog:
    return BurgerLog(id=log_id, day=day, entry=HomeEntry(quantity=quantity), note=note)


def street_log(log_id: str, day: date, burger_def_id: str) -> BurgerLog:
    return BurgerLog(id=log_id, day=day, entry=StreetEntry(burger_def_id=burger_def_id))


def sample_places() -> list[Place]:
    return [
        Place(id="p1", name="Carl's Jr.", color=0xFFFFD700),
        Place(id="p2", name="McDonalds", color=0xFFDA291C),
    ]


def sample_definitions() -> list[BurgerDefinition]:
    return [
        BurgerDefinition(id="b1", place_id="p1", name="Double Western", rating=5),
        BurgerDefinition(id="b2", place_id="p2", name="Big Mac", rating=3),
        BurgerDefinition(id="b3", place_id="p1", name="Famous Star", rating=0),
    ]


@dataclass
class CountingEntityStore(InMemoryEntityStore):
    """In-memory store that counts reads of the definition table."""

    definition_reads: int = 0

    def list_burger_definitions(self) -> list[BurgerDefinition]:
        self.definition_reads += 1
        return super().list_burger_definitions()


@pytest.fixture
def store() -> InMemoryEntityStore:
    return InMemoryEntityStore(
        places=sample_places(),
        burger_definitions=sample_definitions(),
        logs=[
            home_log("l3", date(2024, 3, 6), 2),
            street_log("l2", date(2024, 3, 4), "b2"),
            street_log("l1", date(2024, 2, 20), "b1"),
        ],
    )


@pytest.fixture
def catalog(store: InMemoryEntityStore) -> CatalogService:
    return CatalogService(store)


@pytest.fixture
def logbook(catalog: CatalogService) -> LogbookService:
    return LogbookService(catalog)


@pytest.fixture
def stats_service(store: InMemoryEntityStore) -> StatsService:
    return StatsService(store)


@pytest.fixture
def settings() -> Settings:
    return Settings(locale="es", seed_initial_data=False)


@pytest.fixture
def container(settings: Settings, store: InMemoryEntityStore) -> AppContainer:
    return build_container(settings, store=store)


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
