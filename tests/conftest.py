"""Shared test fixtures."""

import pytest

from path_store import Lazy, PathStore


@pytest.fixture
def store():
    return PathStore()


@pytest.fixture
def read_only_store():
    return PathStore(default_policy="read")


@pytest.fixture
def guarded_store():
    """Store with one override per policy, default read-write."""
    return PathStore(
        restrictions={
            "secret": "none",
            "public": "read",
            "inbox": "write",
            "shared": "read-write",
        },
        fields={
            "secret": "hunter2",
            "public": {"motd": "hello"},
            "inbox": [],
            "shared": {"count": 1},
        },
    )


@pytest.fixture
def profile():
    return Lazy(lambda: {"name": "alice", "tags": ["admin", "ops"]})
