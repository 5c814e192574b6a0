"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from burger_tracker.domain.entities import BurgerDefinition, BurgerLog


class TimeFilter(StrEnum):
    """Granularity of the period being looked at."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class Tier(StrEnum):
    """Quality bucket derived from a burger's current rating."""

    S = "S"
    A = "A"
    B = "B"
    C = "C"


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar range with a display label."""

    start: date
    end: date
    label: str

    def contains(self, day: date) -> bool:
        """Return True when the day falls inside the range, both ends included."""
        return self.start <= day <= self.end


@dataclass(frozen=True)
class DistributionSlice:
    """One wedge of the consumption pie chart."""

    sweep_degrees: float
    color: int
    label: str


@dataclass(frozen=True)
class TierRow:
    """A classified burger paired with the name of its place."""

    definition: BurgerDefinition
    place_name: str


@dataclass
class PeriodStats:
    """Everything computed for one period."""

    range: DateRange
    logs: list[BurgerLog]
    total: int
    slices: list[DistributionSlice]
    tiers: dict[Tier, list[BurgerDefinition]]
