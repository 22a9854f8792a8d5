"""Tests for PathStore values that are themselves stores."""

import pytest

from path_store import AccessDeniedError, NotFoundError, PathConflictError, PathStore


@pytest.fixture
def vault():
    return PathStore(restrictions={"master_key": "none", "notes": "rw"}, fields={"notes": {}})


@pytest.fixture
def host(vault):
    return PathStore(fields={"vault": vault, "lazy_vault": lambda: vault})


def test_read_delegates_to_nested_store(host, vault):
    vault.write("notes:today", "buy milk")
    assert host.read("vault:notes:today") == "buy milk"


def test_nested_store_enforces_its_own_policy(host):
    with pytest.raises(AccessDeniedError) as exc_info:
        host.read("vault:master_key")
    assert exc_info.value.path == "vault:master_key"
    assert exc_info.value.__cause__.path == "master_key"


def test_nested_not_found(host):
    with pytest.raises(NotFoundError) as exc_info:
        host.read("vault:notes:missing")
    assert exc_info.value.path == "vault:notes:missing"
    assert exc_info.value.segment == "missing"
    assert exc_info.value.__cause__.path == "notes:missing"


def test_write_delegates_to_nested_store(host, vault):
    host.write("vault:notes:today", "call bob")
    assert vault.read("notes:today") == "call bob"


def test_write_denied_by_nested_store(host):
    with pytest.raises(AccessDeniedError) as exc_info:
        host.write("vault:master_key", "0000")
    assert exc_info.value.path == "vault:master_key"
    assert exc_info.value.operation == "write"


def test_nested_conflict_reports_full_path(host, vault):
    vault.write("notes:today", "scalar")
    with pytest.raises(PathConflictError) as exc_info:
        host.write("vault:notes:today:time", "9am")
    assert exc_info.value.path == "vault:notes:today:time"
    assert exc_info.value.__cause__.path == "notes:today:time"


def test_errors_from_deeply_nested_stores_keep_full_path(vault):
    middle = PathStore(fields={"vault": vault})
    outer = PathStore(fields={"middle": middle})
    with pytest.raises(AccessDeniedError) as exc_info:
        outer.read("middle:vault:master_key")
    assert exc_info.value.path == "middle:vault:master_key"


def test_reading_store_itself_returns_it(host, vault):
    assert host.read("vault") is vault


def test_lazy_producer_of_store_is_virtual_resource(vault):
    s = PathStore(restrictions={"lazy_vault": "none"}, fields={"lazy_vault": lambda: vault})
    # top level is bypassed, the nested store still guards its own keys
    assert s.read("lazy_vault:notes") == {}
    with pytest.raises(AccessDeniedError):
        s.read("lazy_vault:master_key")
    with pytest.raises(AccessDeniedError):
        s.read("lazy_vault")


def test_write_through_lazy_store(host, vault):
    host.write("lazy_vault:notes:k", 1)
    assert vault.read("notes:k") == 1
