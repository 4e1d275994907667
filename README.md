# destiny

`destiny` keeps collections of travel destinations. Each collection is a
*store* with an owner. For every destination you can record costs, suitable
trip lengths, how you travel there, a description and a rating for each
month. You can then ask for the destinations that fit your preferences,
ordered by their rating for a given month.

It has no dependencies outside the standard library.

## Example

```python
from destiny.model import (
    Month, Preferences, Rating, TravelBy, TravelLength, UserDefinedDestination,
)
from destiny.store import StoreWorker

worker = StoreWorker()
worker.initialize("alice")          # True; a second call returns False
store = worker.store("alice")

store.add_destination(
    "Lisbon",
    UserDefinedDestination(
        lengths=TravelLength.WEEK | TravelLength.LONG_WEEKEND,
        month_ratings=((Month.MAY, Rating.BEST), (Month.AUGUST, Rating.GOOD)),
        travel_by=TravelBy.PLANE,
    ),
)
store.add_destination("Vienna", UserDefinedDestination(travel_by=TravelBy.TRAIN))

store.get_currency()                # "HUF"
store.get_home_location()           # "Kosd, Hungary"

store.get_ordered_destinations(Preferences(month=Month.MAY, travel_by=TravelBy.PLANE))
# [Destination(name="Lisbon", ...)]
```

## Modules

### `destiny.model`

Data types and errors.

- `Month` (an `Enum` of the twelve months) and `Rating` (an `IntEnum`:
  `NOT_GOOD < GOOD < BEST`).
- The flag sets `TravelLength` (`WEEKEND`, `LONG_WEEKEND`, `WEEK`,
  `TWO_WEEKS`, `THREE_WEEKS`) and `TravelBy` (`CAR`, `MOTORBIKE`, `PLANE`,
  `TRAIN`).
- Frozen dataclasses:
  - `UserDefinedDestination`, with every field optional:
    `approximated_travel_cost`, `approximated_daily_cost`, `lengths`,
    `month_ratings` (pairs of `Month` and `Rating`, stored as a tuple),
    `description` and `travel_by`.
  - `Destination(name, user_defined_destination)`.
  - `Preferences(month, lengths=None, travel_by=None)`.
- Errors, all derived from `StoreError`:
  - `NotFoundError(name)`: no destination with that name. It is also a
    `KeyError`.
  - `AlreadyExistsError(name=None)`: the destination or store already exists.
  - `AccessDeniedError`: the user is neither the owner nor in the store's
    `shared_with` set. It is also a `PermissionError`.
  - `NotInitializedError`: the store has no owner yet.
- `store_worker_name(owner, store_name)` returns `"<owner>__<store_name>"`,
  the name that identifies a store.

### `destiny.logic`

The rules for choosing and ordering destinations.

- `filter_by_travel_length(preferred, specified)`: true when either side is
  `None`, or when the two length sets share at least one length.
- `filter_by_vehicle(preferred, specified)`: true when no vehicle is
  preferred. Otherwise the destination must give exactly the preferred set
  of vehicles; a destination that gives none is rejected.
- `matches_preferences(preferences, destination)`: both filters together.
- `rating(destination, month)`: the first rating given for the month, or
  `Rating.NOT_GOOD` when there is none.

### `destiny.accounts`

`Accounts.get_user_name(email)` returns a random UUID string the first time
it sees an address, and the same string for that address afterwards.
`len(accounts)` is the number of known addresses.

### `destiny.store`

- `StoreWorker(accounts=None)` holds one store: `owner`, `shared_with`,
  `currency` (default `"HUF"`), `home_location` (default `"Kosd, Hungary"`)
  and `destinations`.
  - `initialize(user)` sets the owner and returns `True`, or returns `False`
    if there already is one.
  - `store(user)` returns a `Store` acting on behalf of `user`.
  - `get_user_name(email)` asks its `Accounts`.
- `Store` methods first check access, raising `NotInitializedError` or
  `AccessDeniedError`:
  - `set_currency`, `get_currency`, `set_home_location`, `get_home_location`.
  - `add_destination(name, destination)`: raises `AlreadyExistsError` if the
    name is taken.
  - `update_destination(name, destination)` and `remove_destination(name)`:
    raise `NotFoundError` if the name is unknown.
  - `get_destination(name)` returns the `Destination` or `None`;
    `get_destinations()` returns all of them in insertion order.
  - `get_ordered_destinations(preferences)` keeps the destinations that match
    the preferences and sorts them by their rating for the preferred month,
    from `NOT_GOOD` up to `BEST`. The sort is stable, so equal ratings keep
    insertion order.
- `StoreDirectory(accounts=None).worker(name)` returns the store worker with
  that name, creating it on first use. All its workers share one `Accounts`.
  It supports `in` and `len`.

### `destiny.user`

`UserWorker(user=None, directory=None)` is the list of stores belonging to
one user. Without `user`, the name is read from the `GOLEM_WORKER_NAME`
environment variable; `RuntimeError` is raised if it is not set.

- `create_store(name)` creates and initialises the store worker
  `store_worker_name(user, name)` in the directory, with the user as owner.
  It raises `AlreadyExistsError` if the user already has a store of that
  name, and `RuntimeError` if that worker already had an owner.
- `stores()` returns `(owner, store name)` pairs in creation order.
- `get_user_name(email)` asks the directory's `Accounts`.

```python
from destiny.store import StoreDirectory
from destiny.user import UserWorker

directory = StoreDirectory()
user = UserWorker("alice", directory)
user.create_store("summer")
user.stores()                                   # [("alice", "summer")]
directory.worker("alice__summer").store("alice").get_home_location()
# "Kosd, Hungary"
```

### `destiny.ui`

- `DestinyClient(base_url="http://localhost:9006", timeout=10.0)` speaks
  JSON over HTTP to a stores API:
  - `list_stores()`: `GET /api/stores`, returning `(owner, name)` pairs.
  - `create_store(name)`: `POST /api/stores`.
  - `get_currency(owner, name)`: `GET /api/stores/<owner>/<name>/currency`.
  - `set_currency(owner, name, currency)`: `PUT` to the same path.

  Reads raise `ValueError` when the reply does not have the expected shape.
  Writes do not check the response status; only connection failures raise.
- `store_list_path()`, `store_edit_path(owner, name)` and
  `store_view_path(owner, name)` build the page paths `/ui`,
  `/ui/store/edit/<owner>/<name>` and `/ui/store/<owner>/<name>`, with the
  segments percent-encoded.
- `parse_route(path)` turns such a path back into `("store_list", {})`,
  `("store_edit", {"owner": ..., "name": ...})` or
  `("store_view", {"owner": ..., "name": ...})`, ignoring any query or
  fragment, and raises `ValueError` for other paths.

## What it does not do

- All state lives in memory in Python objects; nothing is saved to disk.
- There is no HTTP server: `DestinyClient` needs a stores API running
  elsewhere, and nothing in this package serves one.
- There are no web pages or other screens; `destiny.ui` only builds and
  parses page paths.
- There is no command-line program.
- Nothing in the package adds users to a store's `shared_with` set; set it
  directly on the `StoreWorker`.