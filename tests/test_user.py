import pytest

from destiny.model import AccessDeniedError, AlreadyExistsError, store_worker_name
from destiny.store import StoreDirectory
from destiny.user import UserWorker


@pytest.fixture
def directory():
    return StoreDirectory()


def test_create_store_via_user(directory):
    username = directory.accounts.get_user_name("traveller@example.com")
    user = UserWorker(username, directory)

    initial_store_list = user.stores()
    user.create_store("store1")
    updated_store_list = user.stores()
    store = directory.worker(f"{username}__store1").store(username)

    assert initial_store_list == []
    assert updated_store_list == [(username, "store1")]
    assert store.get_home_location() == "Kosd, Hungary"


def test_create_store_twice_is_rejected(directory):
    user = UserWorker("alice", directory)
    user.create_store("trips")
    with pytest.raises(AlreadyExistsError):
        user.create_store("trips")
    assert user.stores() == [("alice", "trips")]


def test_stores_keep_creation_order(directory):
    user = UserWorker("alice", directory)
    for name in ("b", "a", "c"):
        user.create_store(name)
    assert [name for _, name in user.stores()] == ["b", "a", "c"]


def test_stores_returns_a_copy(directory):
    user = UserWorker("alice", directory)
    user.create_store("trips")
    user.stores().clear()
    assert user.stores() == [("alice", "trips")]


def test_created_store_is_owned_by_user(directory):
    user = UserWorker("alice", directory)
    user.create_store("trips")
    worker = directory.worker(store_worker_name("alice", "trips"))
    assert worker.owner == "alice"
    with pytest.raises(AccessDeniedError):
        worker.store("bob").get_currency()


def test_already_initialized_worker_fails(directory):
    directory.worker(store_worker_name("alice", "trips")).initialize("mallory")
    user = UserWorker("alice", directory)
    with pytest.raises(RuntimeError):
        user.create_store("trips")
    assert user.stores() == []


def test_same_store_name_for_different_users(directory):
    alice = UserWorker("alice", directory)
    bob = UserWorker("bob", directory)
    alice.create_store("trips")
    bob.create_store("trips")
    assert store_worker_name("alice", "trips") in directory
    assert store_worker_name("bob", "trips") in directory
    assert len(directory) == 2


def test_user_taken_from_environment(monkeypatch, directory):
    monkeypatch.setenv("GOLEM_WORKER_NAME", "env-user")
    user = UserWorker(directory=directory)
    user.create_store("trips")
    assert user.stores() == [("env-user", "trips")]


def test_missing_environment_user(monkeypatch):
    monkeypatch.delenv("GOLEM_WORKER_NAME", raising=False)
    with pytest.raises(RuntimeError):
        UserWorker()


def test_get_user_name_uses_shared_accounts(directory):
    user = UserWorker("alice", directory)
    first = user.get_user_name("someone@example.com")
    assert user.get_user_name("someone@example.com") == first
    assert directory.accounts.get_user_name("someone@example.com") == first
    assert user.get_user_name("other@example.com") != first