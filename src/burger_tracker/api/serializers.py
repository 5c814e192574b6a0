"""JSON serialization of domain objects for the API."""

from burger_tracker.domain.entities import (
    BurgerDefinition,
    BurgerLog,
    HomeEntry,
    Place,
)
from burger_tracker.domain.palette import TIER_COLORS, argb_to_hex
from burger_tracker.domain.stats import (
    DateRange,
    DistributionSlice,
    PeriodStats,
    Tier,
    TierRow,
)
from burger_tracker.services.localization import Localization
from burger_tracker.services.stats import arc_angles


def serialize_place(place: Place) -> dict[str, object]:
    return {
        "id": place.id,
        "name": place.name,
        "color": argb_to_hex(place.color),
        "icon": place.icon,
        "icon_ref": place.icon_ref,
    }


def serialize_burger(definition: BurgerDefinition) -> dict[str, object]:
    return {
        "id": definition.id,
        "place_id": definition.place_id,
        "name": definition.name,
        "rating": definition.rating,
    }


def serialize_range(date_range: DateRange) -> dict[str, object]:
    return {
        "start": date_range.start.isoformat(),
        "end": date_range.end.isoformat(),
        "label": date_range.label,
    }


def serialize_log(
    log: BurgerLog,
    definitions: dict[str, BurgerDefinition],
    places: dict[str, Place],
    localization: Localization,
    orphan_color: int,
    home_color: int,
) -> dict[str, object]:
    """Serialize a log with its burger and place names resolved."""
    definition = definitions.get(log.burger_def_id or "")
    place = places.get(definition.place_id) if definition else None
    quantity = None
    if isinstance(log.entry, HomeEntry):
        quantity = log.entry.quantity
        title = localization.format_home_quantity(quantity)
        accent = home_color
    else:
        title = definition.name if definition else localization.unknown_burger_label
        accent = place.color if place else orphan_color
    return {
        "id": log.id,
        "day": log.day.isoformat(),
        "type": log.type.value,
        "quantity": quantity,
        "burger_def_id": log.burger_def_id,
        "title": title,
        "place_name": place.name if place else None,
        "rating": definition.rating if definition else None,
        "accent_color": argb_to_hex(accent),
        "note": log.note,
        "photo_ref": log.photo_ref,
    }


def serialize_slices(slices: list[DistributionSlice]) -> list[dict[str, object]]:
    return [
        {
            "label": item.label,
            "color": argb_to_hex(item.color),
            "sweep_degrees": item.sweep_degrees,
            "start_degrees": start,
        }
        for item, (start, _) in zip(slices, arc_angles(slices), strict=True)
    ]


def serialize_tiers(rows: dict[Tier, list[TierRow]]) -> list[dict[str, object]]:
    return [
        {
            "tier": tier.value,
            "color": argb_to_hex(TIER_COLORS[tier]),
            "burgers": [
                {**serialize_burger(row.definition), "place_name": row.place_name}
                for row in items
            ],
        }
        for tier, items in rows.items()
    ]


def serialize_period(stats: PeriodStats) -> dict[str, object]:
    return {
        "range": serialize_range(stats.range),
        "total": stats.total,
        "log_count": len(stats.logs),
        "slices": serialize_slices(stats.slices),
    }
