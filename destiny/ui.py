"""HTTP client for the destiny API and the routes of its web front end."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from typing import Any
from urllib.parse import quote, unquote

from destiny.model import Currency, StoreName, User

DESTINY_BASE_URL = "http://localhost:9006"

_NO_BODY = object()


def _segment(value: str) -> str:
    return quote(value, safe="")


def store_list_path() -> str:
    return "/ui"


def store_edit_path(owner: User, name: StoreName) -> str:
    return f"/ui/store/edit/{_segment(owner)}/{_segment(name)}"


def store_view_path(owner: User, name: StoreName) -> str:
    return f"/ui/store/{_segment(owner)}/{_segment(name)}"


def parse_route(path: str) -> tuple[str, dict[str, str]]:
    """Match *path* against the UI routes, returning the view and its parameters."""
    bare = path.split("#", 1)[0].split("?", 1)[0]
    parts = bare.strip("/").split("/")
    match parts:
        case ["ui"]:
            return "store_list", {}
        case ["ui", "store", "edit", owner, name] if owner and name:
            return "store_edit", {"owner": unquote(owner), "name": unquote(name)}
        case ["ui", "store", owner, name] if owner and name:
            return "store_view", {"owner": unquote(owner), "name": unquote(name)}
    raise ValueError(f"no route matches {path!r}")


class DestinyClient:
    """Talks to the stores API of a destiny server."""

    def __init__(self, base_url: str = DESTINY_BASE_URL, timeout: float = 10.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def list_stores(self) -> list[tuple[User, StoreName]]:
        data = self._get_json("/api/stores")
        if not isinstance(data, list):
            raise ValueError("failed to decode list of stores")
        stores = []
        for item in data:
            if not (isinstance(item, list) and len(item) == 2):
                raise ValueError("failed to decode list of stores")
            owner, name = item
            stores.append((owner, name))
        return stores

    def create_store(self, name: StoreName) -> None:
        self._send("POST", "/api/stores", name)

    def get_currency(self, owner: User, name: StoreName) -> Currency:
        data = self._get_json(self._currency_path(owner, name))
        if not isinstance(data, str):
            raise ValueError("failed to decode currency")
        return data

    def set_currency(self, owner: User, name: StoreName, currency: Currency) -> None:
        self._send("PUT", self._currency_path(owner, name), currency)

    @staticmethod
    def _currency_path(owner: User, name: StoreName) -> str:
        return f"/api/stores/{_segment(owner)}/{_segment(name)}/currency"

    def _request(self, method: str, path: str, body: Any = _NO_BODY) -> urllib.request.Request:
        headers = {"Accept": "application/json"}
        data = None
        if body is not _NO_BODY:
            data = json.dumps(body).encode("utf-8")
            headers["Content-Type"] = "application/json"
        return urllib.request.Request(
            self.base_url + path, data=data, headers=headers, method=method
        )

    def _get_json(self, path: str) -> Any:
        with urllib.request.urlopen(self._request("GET", path), timeout=self.timeout) as resp:
            return json.load(resp)

    def _send(self, method: str, path: str, body: Any) -> None:
        # Only transport failures are errors here; the response status is not checked.
        try:
            with urllib.request.urlopen(
                self._request(method, path, body), timeout=self.timeout
            ) as resp:
                resp.read()
        except urllib.error.HTTPError as err:
            err.close()