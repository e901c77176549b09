import threading

import pytest

from data import auth
from data import connection
from tests.conftest import FakeStore, make_cfg


@pytest.fixture
def created(monkeypatch):
    calls = []

    def fake_create_client(url, key):
        calls.append((url, key))
        return object()

    monkeypatch.setattr(connection, "create_client", fake_create_client)
    return calls


def test_valid_config_is_detected():
    assert connection.is_store_configured(make_cfg())
    assert make_cfg().store_configured


def test_publishable_key_is_accepted():
    assert connection.is_store_configured(make_cfg(supabase_anon_key="sb_publishable_abc123"))


@pytest.mark.parametrize(
    "overrides",
    [
        {"supabase_url": None},
        {"supabase_url": ""},
        {"supabase_url": "http://insecure.supabase.co"},
        {"supabase_anon_key": None},
        {"supabase_anon_key": "not-a-token"},
    ],
)
def test_missing_or_malformed_config_gives_no_client(overrides, created):
    cfg = make_cfg(**overrides)
    assert not connection.is_store_configured(cfg)
    assert connection.get_store_client(cfg) is None
    assert created == []


def test_client_is_built_once_and_reused(created):
    cfg = make_cfg()
    first = connection.get_store_client(cfg)
    second = connection.get_store_client(cfg)
    assert first is not None
    assert first is second
    assert len(created) == 1


def test_concurrent_first_use_builds_one_client(monkeypatch):
    calls = []
    gate = threading.Event()

    def slow_create(url, key):
        gate.wait(0.05)
        calls.append(url)
        return object()

    monkeypatch.setattr(connection, "create_client", slow_create)
    cfg = make_cfg()
    seen = []
    threads = [threading.Thread(target=lambda: seen.append(connection.get_store_client(cfg))) for _ in range(8)]
    for t in threads:
        t.start()
    gate.set()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert len({id(c) for c in seen}) == 1


def test_construction_failure_degrades_to_none_and_is_remembered(monkeypatch):
    attempts = []

    def boom(url, key):
        attempts.append(url)
        raise ValueError("Invalid API key")

    monkeypatch.setattr(connection, "create_client", boom)
    assert connection.get_store_client(make_cfg()) is None
    assert connection.get_store_client(make_cfg()) is None
    assert len(attempts) == 1


def test_session_clients_do_not_share_the_signed_in_user(monkeypatch):
    monkeypatch.setattr(connection, "create_client", lambda url, key: FakeStore())
    cfg = make_cfg()
    first = connection.create_session_client(cfg)
    second = connection.create_session_client(cfg)

    auth.sign_in(first, "a@x.com", "pw")

    assert first is not second
    assert first is not connection.get_store_client(cfg)
    assert auth.get_current_user(first).email == "a@x.com"
    assert auth.get_current_user(second) is None
    assert auth.get_current_user(connection.get_store_client(cfg)) is None


def test_session_client_needs_valid_config(created):
    assert connection.create_session_client(make_cfg(supabase_anon_key="nope")) is None
    assert created == []


def test_require_store_client_raises_when_unconfigured():
    with pytest.raises(connection.StoreNotConfiguredError):
        connection.require_store_client(make_cfg(supabase_url=None))
