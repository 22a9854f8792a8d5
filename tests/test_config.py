"""Tests for StoreConfig and PathStore.from_config."""

import pytest
from pydantic import ValidationError

from path_store import AccessDeniedError, PathStore, Permission, StoreConfig


def test_defaults():
    cfg = StoreConfig()
    assert cfg.default_policy is Permission.READ_WRITE
    assert cfg.restrictions == {}


def test_aliases_are_parsed():
    cfg = StoreConfig(default_policy="r", restrictions={"a": "rw", "b": "none"})
    assert cfg.default_policy is Permission.READ
    assert cfg.restrictions == {"a": Permission.READ_WRITE, "b": Permission.NONE}


def test_unknown_default_policy_rejected():
    with pytest.raises(ValidationError):
        StoreConfig(default_policy="admin")


def test_unknown_override_rejected():
    with pytest.raises(ValidationError):
        StoreConfig(restrictions={"a": "sometimes"})


def test_from_json():
    cfg = StoreConfig.model_validate_json(
        '{"default_policy": "none", "restrictions": {"public": "read"}}'
    )
    assert cfg.default_policy is Permission.NONE
    assert cfg.restrictions["public"] is Permission.READ


def test_config_is_frozen():
    cfg = StoreConfig()
    with pytest.raises(ValidationError):
        cfg.default_policy = Permission.NONE  # type: ignore[misc]


def test_from_config_model():
    cfg = StoreConfig(default_policy="none", restrictions={"public": "read"})
    s = PathStore.from_config(cfg, fields={"public": 1, "private": 2})
    assert s.read("public") == 1
    with pytest.raises(AccessDeniedError):
        s.read("private")


def test_from_config_mapping():
    s = PathStore.from_config({"default_policy": "read", "restrictions": {"log": "w"}})
    assert s.default_policy is Permission.READ
    assert dict(s.restrictions) == {"log": Permission.WRITE}
    assert s.allowed_to_write("log")
    assert not s.allowed_to_read("log")


def test_from_config_invalid_mapping():
    with pytest.raises(ValidationError):
        PathStore.from_config({"default_policy": "maybe"})


def test_from_config_on_subclass_returns_subclass():
    class Custom(PathStore):
        pass

    assert isinstance(Custom.from_config({}), Custom)
