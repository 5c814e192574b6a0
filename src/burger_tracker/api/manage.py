"""Endpoints for managing places and burger definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from burger_tracker.api.models import (
    BurgerCreateRequest,
    BurgerUpdateRequest,
    PlaceCreateRequest,
    PlaceUpdateRequest,
)
from burger_tracker.api.serializers import serialize_burger, serialize_place
from burger_tracker.domain.palette import TAG_COLORS, argb_to_hex, hex_to_argb

if TYPE_CHECKING:
    from burger_tracker.containers import AppContainer

UNPROCESSABLE = 422

router = APIRouter(prefix="/manage", tags=["manage"])


def _parse_color(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return hex_to_argb(value)
    except ValueError as exc:
        raise HTTPException(status_code=UNPROCESSABLE, detail=str(exc)) from exc


@router.get("/palette")
async def palette() -> dict[str, object]:
    """Return the colours offered for place tags."""
    return {"colors": [argb_to_hex(color) for color in TAG_COLORS]}


@router.get("/places")
async def list_places(request: Request) -> dict[str, object]:
    """Return all places."""
    container: AppContainer = request.app.state.container
    return {
        "places": [
            serialize_place(place) for place in container.catalog_service.list_places()
        ]
    }


@router.post("/places", status_code=status.HTTP_201_CREATED)
async def create_place(
    payload: PlaceCreateRequest, request: Request
) -> dict[str, object]:
    """Create a place."""
    container: AppContainer = request.app.state.container
    place = container.catalog_service.add_place(
        payload.name,
        color=_parse_color(payload.color),
        icon=payload.icon,
        icon_ref=payload.icon_ref,
    )
    return serialize_place(place)


@router.patch("/places/{place_id}")
async def update_place(
    place_id: str, payload: PlaceUpdateRequest, request: Request
) -> dict[str, object]:
    """Edit a place."""
    container: AppContainer = request.app.state.container
    place = container.catalog_service.update_place(
        place_id,
        name=payload.name,
        color=_parse_color(payload.color),
        icon=payload.icon,
        icon_ref=payload.icon_ref,
    )
    return serialize_place(place)


@router.delete("/places/{place_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_place(place_id: str, request: Request) -> None:
    """Delete a place, leaving its burgers and logs orphaned."""
    container: AppContainer = request.app.state.container
    container.catalog_service.delete_place(place_id)


@router.get("/burgers")
async def list_burgers(
    request: Request, place_id: str | None = None
) -> dict[str, object]:
    """Return burger definitions, optionally for one place."""
    container: AppContainer = request.app.state.container
    definitions = container.catalog_service.list_burger_definitions(place_id)
    return {"burgers": [serialize_burger(item) for item in definitions]}


@router.post("/burgers", status_code=status.HTTP_201_CREATED)
async def create_burger(
    payload: BurgerCreateRequest, request: Request
) -> dict[str, object]:
    """Create a burger definition."""
    container: AppContainer = request.app.state.container
    definition = container.catalog_service.add_burger_definition(
        payload.place_id, payload.name, payload.rating
    )
    return serialize_burger(definition)


@router.patch("/burgers/{burger_def_id}")
async def update_burger(
    burger_def_id: str, payload: BurgerUpdateRequest, request: Request
) -> dict[str, object]:
    """Rename or re-rate a burger definition."""
    container: AppContainer = request.app.state.container
    catalog = container.catalog_service
    definition = catalog.get_burger_definition(burger_def_id)
    if payload.name is not None:
        definition = catalog.rename_burger_definition(burger_def_id, payload.name)
    if payload.rating is not None:
        definition = catalog.rate_burger_definition(burger_def_id, payload.rating)
    return serialize_burger(definition)


@router.delete("/burgers/{burger_def_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_burger(burger_def_id: str, request: Request) -> None:
    """Delete a burger definition, leaving its logs orphaned."""
    container: AppContainer = request.app.state.container
    container.catalog_service.delete_burger_definition(burger_def_id)
