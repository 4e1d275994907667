"""A user's own list of stores, each backed by a store worker."""

from __future__ import annotations

import os

from destiny.model import AlreadyExistsError, StoreName, User, store_worker_name
from destiny.store import StoreDirectory

WORKER_NAME_VARIABLE = "GOLEM_WORKER_NAME"


class UserWorker:
    """The stores created by one user.

    The acting user defaults to the value of the ``GOLEM_WORKER_NAME``
    environment variable, which names the worker running on the user's behalf.
    """

    def __init__(self, user: User | None = None, directory: StoreDirectory | None = None) -> None:
        if user is None:
            try:
                user = os.environ[WORKER_NAME_VARIABLE]
            except KeyError:
                raise RuntimeError(f"{WORKER_NAME_VARIABLE} is not available") from None
        self.user: User = user
        self.directory = directory if directory is not None else StoreDirectory()
        self._stores: list[tuple[User, StoreName]] = []

    def create_store(self, name: StoreName) -> None:
        """Create and initialize the store *name*, owned by this user."""
        if any(existing == name for _, existing in self._stores):
            raise AlreadyExistsError()
        self._initialize_store_worker(name)
        self._stores.append((self.user, name))

    def stores(self) -> list[tuple[User, StoreName]]:
        """The (owner, store name) pairs of this user's stores, in creation order."""
        return list(self._stores)

    def get_user_name(self, email: str) -> User:
        return self.directory.accounts.get_user_name(email)

    def _initialize_store_worker(self, name: StoreName) -> None:
        worker = self.directory.worker(store_worker_name(self.user, name))
        if not worker.initialize(self.user):
            raise RuntimeError("failed to initialize store worker: it already existed")