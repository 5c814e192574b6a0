"""Pydantic models for API request payloads."""

from datetime import date

from pydantic import BaseModel, Field


class HomeLogRequest(BaseModel):
    """Payload for a batch of home-made burgers."""

    day: date
    quantity: int = Field(gt=0)
    note: str = ""
    photo_ref: str | None = None


class StreetLogRequest(BaseModel):
    """Payload for a burger bought at a place."""

    day: date
    place_id: str | None = None
    new_place_name: str | None = None
    burger_def_id: str | None = None
    new_burger_name: str | None = None
    rating: int = Field(default=0, ge=0, le=5)
    note: str = ""
    photo_ref: str | None = None


class PlaceCreateRequest(BaseModel):
    """Payload for a new place; colours are #RRGGBB or #AARRGGBB."""

    name: str
    color: str | None = None
    icon: str | None = None
    icon_ref: str | None = None


class PlaceUpdateRequest(BaseModel):
    """Partial update of a place."""

    name: str | None = None
    color: str | None = None
    icon: str | None = None
    icon_ref: str | None = None


class BurgerCreateRequest(BaseModel):
    """Payload for a new burger definition."""

    place_id: str
    name: str
    rating: int = Field(default=0, ge=0, le=5)


class BurgerUpdateRequest(BaseModel):
    """Partial update of a burger definition."""

    name: str | None = None
    rating: int | None = Field(default=None, ge=1, le=5)
