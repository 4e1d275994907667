"""Mapping of e-mail addresses to stable user identifiers."""

from __future__ import annotations

import uuid

from destiny.model import User


class Accounts:
    """Hands out a random, stable user name for every e-mail address."""

    def __init__(self) -> None:
        self._accounts: dict[str, User] = {}

    def get_user_name(self, email: str) -> User:
        """The user name for *email*, created on first request."""
        if email not in self._accounts:
            self._accounts[email] = str(uuid.uuid4())
        return self._accounts[email]

    def __len__(self) -> int:
        return len(self._accounts)