"""A destination store owned by one user and reachable through access handles."""

from __future__ import annotations

import dataclasses

from destiny.accounts import Accounts
from destiny.logic import matches_preferences, rating
from destiny.model import (
    AccessDeniedError,
    AlreadyExistsError,
    Currency,
    Destination,
    DestinationName,
    NotFoundError,
    NotInitializedError,
    Preferences,
    User,
    UserDefinedDestination,
)

DEFAULT_CURRENCY = "HUF"
DEFAULT_HOME_LOCATION = "Kosd, Hungary"


class StoreWorker:
    """The state of one store: its owner, settings and destinations."""

    def __init__(self, accounts: Accounts | None = None) -> None:
        self.owner: User | None = None
        self.shared_with: set[User] = set()
        self.currency: Currency = DEFAULT_CURRENCY
        self.home_location: str = DEFAULT_HOME_LOCATION
        self.destinations: dict[DestinationName, Destination] = {}
        self._accounts = accounts if accounts is not None else Accounts()

    def initialize(self, user: User) -> bool:
        """Make *user* the owner; False if the store already has one."""
        if self.owner is not None:
            return False
        self.owner = user
        return True

    def store(self, user: User) -> Store:
        """An access handle acting on behalf of *user*."""
        return Store(self, user)

    def get_user_name(self, email: str) -> User:
        return self._accounts.get_user_name(email)

    def _authorize(self, user: User) -> None:
        if self.owner is None:
            raise NotInitializedError()
        if user != self.owner and user not in self.shared_with:
            raise AccessDeniedError()


class Store:
    """Operations on a store, each checked against the acting user."""

    def __init__(self, worker: StoreWorker, user: User) -> None:
        self._worker = worker
        self.user = user

    def _state(self) -> StoreWorker:
        self._worker._authorize(self.user)
        return self._worker

    def set_currency(self, currency: Currency) -> None:
        self._state().currency = currency

    def get_currency(self) -> Currency:
        return self._state().currency

    def set_home_location(self, location: str) -> None:
        self._state().home_location = location

    def get_home_location(self) -> str:
        return self._state().home_location

    def add_destination(self, name: DestinationName, destination: UserDefinedDestination) -> None:
        destinations = self._state().destinations
        if name in destinations:
            raise AlreadyExistsError(name)
        destinations[name] = Destination(name, destination)

    def update_destination(self, name: DestinationName, destination: UserDefinedDestination) -> None:
        destinations = self._state().destinations
        try:
            current = destinations[name]
        except KeyError:
            raise NotFoundError(name) from None
        destinations[name] = dataclasses.replace(current, user_defined_destination=destination)

    def get_destination(self, name: DestinationName) -> Destination | None:
        return self._state().destinations.get(name)

    def get_destinations(self) -> list[Destination]:
        return list(self._state().destinations.values())

    def remove_destination(self, name: DestinationName) -> None:
        destinations = self._state().destinations
        if destinations.pop(name, None) is None:
            raise NotFoundError(name)

    def get_ordered_destinations(self, preferences: Preferences) -> list[Destination]:
        """Matching destinations, sorted by their rating for the preferred month."""
        matching = (
            d for d in self._state().destinations.values() if matches_preferences(preferences, d)
        )
        return sorted(matching, key=lambda d: rating(d, preferences.month))


class StoreDirectory:
    """Store workers addressed by name, created on first use."""

    def __init__(self, accounts: Accounts | None = None) -> None:
        self.accounts = accounts if accounts is not None else Accounts()
        self._workers: dict[str, StoreWorker] = {}

    def worker(self, name: str) -> StoreWorker:
        if name not in self._workers:
            self._workers[name] = StoreWorker(self.accounts)
        return self._workers[name]

    def __contains__(self, name: object) -> bool:
        return name in self._workers

    def __len__(self) -> int:
        return len(self._workers)