"""Dependency container wiring for the application."""

from dataclasses import dataclass

from burger_tracker.adapters.in_memory_store import InMemoryEntityStore
from burger_tracker.config import Settings
from burger_tracker.seed import build_seeded_store
from burger_tracker.services.catalog import CatalogService, EntityStore
from burger_tracker.services.localization import get_localization
from burger_tracker.services.logbook import LogbookService
from burger_tracker.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: EntityStore
    catalog_service: CatalogService
    logbook_service: LogbookService
    stats_service: StatsService


def build_container(
    settings: Settings | None = None, store: EntityStore | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    if store is None:
        store = (
            build_seeded_store()
            if resolved_settings.seed_initial_data
            else InMemoryEntityStore()
        )
    catalog_service = CatalogService(store)
    logbook_service = LogbookService(catalog_service)
    stats_service = StatsService(
        store=store,
        localization=get_localization(resolved_settings.locale),
        home_color=resolved_settings.home_color,
        unresolved_place_color=resolved_settings.unresolved_place_color,
    )
    return AppContainer(
        settings=resolved_settings,
        store=store,
        catalog_service=catalog_service,
        logbook_service=logbook_service,
        stats_service=stats_service,
    )
