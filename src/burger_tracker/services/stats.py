"""Statistics over burger logs: period filtering, totals, pie slices and tiers."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date

from burger_tracker.domain.entities import (
    BurgerDefinition,
    BurgerLog,
    HomeEntry,
    Place,
    StreetEntry,
)
from burger_tracker.domain.palette import HOME_COLOR, UNRESOLVED_PLACE_COLOR
from burger_tracker.domain.stats import (
    DateRange,
    DistributionSlice,
    PeriodStats,
    Tier,
    TierRow,
    TimeFilter,
)
from burger_tracker.services.catalog import EntityStore
from burger_tracker.services.date_ranges import resolve_range
from burger_tracker.services.localization import SPANISH, Localization

FULL_CIRCLE = 360.0
CHART_ORIGIN = -90.0

_TIERS_BY_RATING = {5: Tier.S, 4: Tier.A, 3: Tier.B}

_logger = logging.getLogger(__name__)


def filter_logs(logs: Iterable[BurgerLog], date_range: DateRange) -> list[BurgerLog]:
    """Return the logs inside the range, newest day first.

    Logs sharing a day keep their relative input order.
    """
    selected = [log for log in logs if date_range.contains(log.day)]
    return sorted(selected, key=lambda log: log.day, reverse=True)


def total_count(logs: Iterable[BurgerLog]) -> int:
    """Count burgers: the quantity of home logs plus one per street log."""
    total = 0
    for log in logs:
        if isinstance(log.entry, HomeEntry):
            total += log.entry.quantity
        else:
            total += 1
    return total


def distribution(
    logs: Iterable[BurgerLog],
    definitions: Iterable[BurgerDefinition],
    places: Iterable[Place],
    *,
    home_label: str = SPANISH.home_label,
    home_color: int = HOME_COLOR,
) -> list[DistributionSlice]:
    """Split consumption into home-made and per-place pie slices.

    Street logs are grouped by the place of their burger, looked up in the full
    definition table. Logs whose burger or place no longer exists are skipped.
    Returns no slices when nothing is countable.
    """
    definitions_by_id = {item.id: item for item in definitions}
    places_by_id = {item.id: item for item in places}

    home_total = 0
    street_counts: dict[str, int] = {}
    for log in logs:
        if isinstance(log.entry, HomeEntry):
            home_total += log.entry.quantity
            continue
        place_id = _resolve_place_id(log.entry, definitions_by_id, places_by_id)
        if place_id is None:
            _logger.debug("Skipping street log with unresolved place: id=%s", log.id)
            continue
        street_counts[place_id] = street_counts.get(place_id, 0) + 1

    grand_total = home_total + sum(street_counts.values())
    if grand_total == 0:
        return []

    slices = []
    if home_total > 0:
        slices.append(
            DistributionSlice(
                sweep_degrees=home_total / grand_total * FULL_CIRCLE,
                color=home_color,
                label=home_label,
            )
        )
    for place_id, count in street_counts.items():
        place = places_by_id[place_id]
        slices.append(
            DistributionSlice(
                sweep_degrees=count / grand_total * FULL_CIRCLE,
                color=place.color,
                label=place.name,
            )
        )
    return slices


def _resolve_place_id(
    entry: StreetEntry,
    definitions_by_id: dict[str, BurgerDefinition],
    places_by_id: dict[str, Place],
) -> str | None:
    definition = definitions_by_id.get(entry.burger_def_id)
    if definition is None or definition.place_id not in places_by_id:
        return None
    return definition.place_id


def arc_angles(
    slices: Sequence[DistributionSlice], origin: float = CHART_ORIGIN
) -> list[tuple[float, float]]:
    """Return (start, sweep) pairs laying the slices out clockwise from origin."""
    arcs = []
    start = origin
    for item in slices:
        arcs.append((start, item.sweep_degrees))
        start += item.sweep_degrees
    return arcs


def tier_for_rating(rating: int) -> Tier:
    """Return the tier of a rating; anything at 2 or below, unrated included, is C."""
    return _TIERS_BY_RATING.get(rating, Tier.C)


def tier_classification(
    definitions: Iterable[BurgerDefinition],
) -> dict[Tier, list[BurgerDefinition]]:
    """Bucket every definition by its current rating, always in S, A, B, C order."""
    tiers: dict[Tier, list[BurgerDefinition]] = {tier: [] for tier in Tier}
    for definition in definitions:
        tiers[tier_for_rating(definition.rating)].append(definition)
    return tiers


def tier_rows(
    tiers: dict[Tier, list[BurgerDefinition]],
    places: Iterable[Place],
    unresolved_label: str = SPANISH.unresolved_place_label,
) -> dict[Tier, list[TierRow]]:
    """Attach place names to classified burgers for the tier list."""
    names = {place.id: place.name for place in places}
    return {
        tier: [
            TierRow(
                definition=item,
                place_name=names.get(item.place_id, unresolved_label),
            )
            for item in items
        ]
        for tier, items in tiers.items()
    }


@dataclass
class StatsService:
    """Service computing statistics from the current store snapshot."""

    store: EntityStore
    localization: Localization = SPANISH
    home_color: int = HOME_COLOR
    unresolved_place_color: int = UNRESOLVED_PLACE_COLOR

    def resolve(self, time_filter: TimeFilter, anchor: date) -> DateRange:
        """Return the localized range for a filter and anchor."""
        return resolve_range(time_filter, anchor, self.localization)

    def get_logs(self, time_filter: TimeFilter, anchor: date) -> list[BurgerLog]:
        """Return the logs of the period, newest first."""
        return filter_logs(self.store.list_logs(), self.resolve(time_filter, anchor))

    def get_period(self, time_filter: TimeFilter, anchor: date) -> PeriodStats:
        """Return totals, distribution and tiers for the period."""
        date_range = self.resolve(time_filter, anchor)
        logs = filter_logs(self.store.list_logs(), date_range)
        definitions = self.store.list_burger_definitions()
        return PeriodStats(
            range=date_range,
            logs=logs,
            total=total_count(logs),
            slices=distribution(
                logs,
                definitions,
                self.store.list_places(),
                home_label=self.localization.home_label,
                home_color=self.home_color,
            ),
            tiers=tier_classification(definitions),
        )

    def get_tiers(self) -> dict[Tier, list[BurgerDefinition]]:
        """Return the tier classification of all burgers."""
        return tier_classification(self.store.list_burger_definitions())

    def get_tier_rows(
        self, tiers: dict[Tier, list[BurgerDefinition]] | None = None
    ) -> dict[Tier, list[TierRow]]:
        """Return the tier list with place names resolved.

        Reuses an existing classification when one is given.
        """
        return tier_rows(
            self.get_tiers() if tiers is None else tiers,
            self.store.list_places(),
            self.localization.unresolved_place_label,
        )
