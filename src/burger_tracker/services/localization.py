"""Locale catalogs for date labels and fixed captions."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

_logger = logging.getLogger(__name__)


class Localization(Protocol):
    """Locale-aware formatting used by range labels and charts."""

    home_label: str
    unresolved_place_label: str
    unknown_burger_label: str

    def format_day(self, day: date) -> str:
        """Return the label for a single day."""

    def format_week(self, start: date, end: date) -> str:
        """Return the label for a Monday-Sunday week."""

    def format_month(self, day: date) -> str:
        """Return the label for the month containing the day."""

    def format_year(self, day: date) -> str:
        """Return the label for the year containing the day."""

    def format_home_quantity(self, quantity: int) -> str:
        """Return the caption of a home-made log entry."""


@dataclass(frozen=True)
class MonthCatalog(Localization):
    """Localization driven by month-name tables."""

    code: str
    month_names: tuple[str, ...]
    month_abbreviations: tuple[str, ...]
    day_pattern: str
    home_label: str
    home_quantity_pattern: str
    unresolved_place_label: str = "?"
    unknown_burger_label: str = "?"

    def format_day(self, day: date) -> str:
        """Return the label for a single day."""
        return self.day_pattern.format(
            day=day.day, month=self.month_names[day.month - 1], year=day.year
        )

    def format_week(self, start: date, end: date) -> str:
        """Return the label for a Monday-Sunday week."""
        return f"{self._short(start)} - {self._short(end)}"

    def format_month(self, day: date) -> str:
        """Return the capitalized month label."""
        label = f"{self.month_names[day.month - 1]} {day.year}"
        return label[:1].upper() + label[1:]

    def format_year(self, day: date) -> str:
        """Return the label for the year containing the day."""
        return str(day.year)

    def format_home_quantity(self, quantity: int) -> str:
        """Return the caption of a home-made log entry."""
        return self.home_quantity_pattern.format(quantity=quantity)

    def _short(self, day: date) -> str:
        return f"{day.day} {self.month_abbreviations[day.month - 1]}"


SPANISH = MonthCatalog(
    code="es",
    month_names=(
        "enero",
        "febrero",
        "marzo",
        "abril",
        "mayo",
        "junio",
        "julio",
        "agosto",
        "septiembre",
        "octubre",
        "noviembre",
        "diciembre",
    ),
    month_abbreviations=(
        "ene",
        "feb",
        "mar",
        "abr",
        "may",
        "jun",
        "jul",
        "ago",
        "sep",
        "oct",
        "nov",
        "dic",
    ),
    day_pattern="{day} de {month} {year}",
    home_label="Caseras",
    home_quantity_pattern="Caseras ({quantity})",
    unknown_burger_label="Desconocida",
)

ENGLISH = MonthCatalog(
    code="en",
    month_names=(
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    ),
    month_abbreviations=(
        "Jan",
        "Feb",
        "Mar",
        "Apr",
        "May",
        "Jun",
        "Jul",
        "Aug",
        "Sep",
        "Oct",
        "Nov",
        "Dec",
    ),
    day_pattern="{day} {month} {year}",
    home_label="Home-made",
    home_quantity_pattern="Home-made ({quantity})",
    unknown_burger_label="Unknown",
)

_CATALOGS = {catalog.code: catalog for catalog in (SPANISH, ENGLISH)}


def get_localization(code: str | None) -> MonthCatalog:
    """Return the catalog for a locale code, falling back to Spanish."""
    if not code:
        return SPANISH
    language = code.replace("-", "_").split("_", maxsplit=1)[0].lower()
    catalog = _CATALOGS.get(language)
    if catalog is None:
        _logger.warning("Unknown locale %s, using %s", code, SPANISH.code)
        return SPANISH
    return catalog
