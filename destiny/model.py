"""Domain types shared by the destiny components."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

User = str
StoreName = str
DestinationName = str
Currency = str


class Month(enum.Enum):
    JANUARY = "january"
    FEBRUARY = "february"
    MARCH = "march"
    APRIL = "april"
    MAY = "may"
    JUNE = "june"
    JULY = "july"
    AUGUST = "august"
    SEPTEMBER = "september"
    OCTOBER = "october"
    NOVEMBER = "november"
    DECEMBER = "december"


class Rating(enum.IntEnum):
    """How good a destination is in a given month; ordered from worst to best."""

    NOT_GOOD = 0
    GOOD = 1
    BEST = 2


class TravelLength(enum.Flag):
    WEEKEND = enum.auto()
    LONG_WEEKEND = enum.auto()
    WEEK = enum.auto()
    TWO_WEEKS = enum.auto()
    THREE_WEEKS = enum.auto()


class TravelBy(enum.Flag):
    CAR = enum.auto()
    MOTORBIKE = enum.auto()
    PLANE = enum.auto()
    TRAIN = enum.auto()


@dataclass(frozen=True)
class UserDefinedDestination:
    """The user-editable details of a destination."""

    approximated_travel_cost: int | None = None
    approximated_daily_cost: int | None = None
    lengths: TravelLength | None = None
    month_ratings: tuple[tuple[Month, Rating], ...] | None = None
    description: str | None = None
    travel_by: TravelBy | None = None

    def __post_init__(self) -> None:
        if self.month_ratings is not None:
            ratings: Iterable[tuple[Month, Rating]] = self.month_ratings
            object.__setattr__(
                self,
                "month_ratings",
                tuple((month, rating) for month, rating in ratings),
            )


@dataclass(frozen=True)
class Destination:
    name: DestinationName
    user_defined_destination: UserDefinedDestination


@dataclass(frozen=True)
class Preferences:
    """What a traveller is looking for when ordering destinations."""

    month: Month
    lengths: TravelLength | None = None
    travel_by: TravelBy | None = None


class StoreError(Exception):
    """Base class of all errors raised by a destination store."""


class NotFoundError(StoreError, KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"not found: {self.name}"


class AlreadyExistsError(StoreError):
    def __init__(self, name: str | None = None) -> None:
        super().__init__(name) if name is not None else super().__init__()
        self.name = name

    def __str__(self) -> str:
        return "already exists" if self.name is None else f"already exists: {self.name}"


class AccessDeniedError(StoreError, PermissionError):
    def __str__(self) -> str:
        return "access denied"


class NotInitializedError(StoreError):
    def __str__(self) -> str:
        return "store is not initialized"


def store_worker_name(owner: User, store_name: StoreName) -> str:
    """Name of the worker that holds the store *store_name* of *owner*."""
    return f"{owner}__{store_name}"