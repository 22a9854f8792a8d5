"""PathStore — a permission-gated tree of nested values addressed by colon paths."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from path_store._internal.paths import join_path, list_index, split_path
from path_store.config import StoreConfig
from path_store.exceptions import (
    AccessDeniedError,
    NotFoundError,
    PathConflictError,
    PathStoreError,
    PolicyConfigError,
)
from path_store.permission import Permission
from path_store.values import ABSENT, Lazy, as_value, is_absent, resolve

logger = logging.getLogger(__name__)

# Top-level key that always self-authorizes multi-segment paths.
USER_NAMESPACE = "user"


class PathStore:
    """In-memory key/value tree with per-key read/write policies.

    Values are reached through paths such as ``"user:profile:name"``: the
    first segment is a top-level key, the rest walk nested dicts and lists.
    Writes create missing intermediate dicts.  Reads resolve :class:`Lazy`
    values, and bare callables nested in dicts or lists, at every level of
    the walk.  Errors from a nested store carry the full path.

    Access is decided by the first segment only:

    * A path of two or more segments whose first segment holds a ``Lazy``
      value, or is ``"user"``, is always allowed.
    * Otherwise an override registered for the first segment decides alone.
    * Without an override, ``default_policy`` decides.

    Overrides can be declared on a subclass, which is the declarative form::

        class Profile(PathStore):
            declared_restrictions = {"secret": "none", "public": "read"}

    or passed as ``restrictions=`` or registered with :meth:`restrict`.

    Parameters:
        default_policy: Policy for keys without an override.  Defaults to
                        ``"read-write"``.
        restrictions:   Per-key overrides, merged over the class declaration.
        fields:         Initial top-level values.  Seeded without permission
                        checks; bare callables become :class:`Lazy`.
    """

    declared_restrictions: ClassVar[Mapping[str, Permission | str]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # Fail at class definition rather than at first access.
        for key, policy in vars(cls).get("declared_restrictions", {}).items():
            _check_key(key)
            Permission.parse(policy)

    def __init__(
        self,
        default_policy: Permission | str = Permission.READ_WRITE,
        *,
        restrictions: Mapping[str, Permission | str] | None = None,
        fields: Mapping[str, Any] | None = None,
    ) -> None:
        self._default_policy = Permission.parse(default_policy)
        self._restrictions: dict[str, Permission] = {}
        self._fields: dict[str, Any] = {}

        for klass in reversed(type(self).__mro__):
            for key, policy in vars(klass).get("declared_restrictions", {}).items():
                self.restrict(key, policy)
        for key, policy in (restrictions or {}).items():
            self.restrict(key, policy)
        for key, value in (fields or {}).items():
            self._fields[key] = as_value(value)

    @classmethod
    def from_config(
        cls,
        config: StoreConfig | Mapping[str, Any],
        *,
        fields: Mapping[str, Any] | None = None,
    ) -> PathStore:
        """Build a store from a :class:`StoreConfig` or a mapping validated into one."""
        if not isinstance(config, StoreConfig):
            config = StoreConfig.model_validate(config)
        return cls(config.default_policy, restrictions=config.restrictions, fields=fields)

    # ── configuration ────────────────────────────────────────

    @property
    def default_policy(self) -> Permission:
        return self._default_policy

    @default_policy.setter
    def default_policy(self, policy: Permission | str) -> None:
        self._default_policy = Permission.parse(policy)

    @property
    def restrictions(self) -> Mapping[str, Permission]:
        """Read-only view of the override table."""
        return MappingProxyType(self._restrictions)

    def restrict(self, key: str, policy: Permission | str = Permission.NONE) -> PathStore:
        """Register *policy* as the override for top-level *key*.

        Register before the key is first accessed.  Returns the store so calls
        can be chained.

        Raises:
            PolicyConfigError: If *key* is a nested path or *policy* is unknown.
        """
        _check_key(key)
        permission = Permission.parse(policy)
        self._restrictions[key] = permission
        logger.debug("Registered %s override for %r", permission, key)
        return self

    # ── permission resolution ────────────────────────────────

    def allowed_to_read(self, path: str) -> bool:
        return self._allowed(path).can_read or self._self_authorizing(path)

    def allowed_to_write(self, path: str) -> bool:
        return self._allowed(path).can_write or self._self_authorizing(path)

    def _allowed(self, path: str) -> Permission:
        """Effective policy for the first segment of *path*."""
        key = split_path(path)[0]
        return self._restrictions.get(key, self._default_policy)

    def _self_authorizing(self, path: str) -> bool:
        segments = split_path(path)
        if len(segments) < 2:
            return False
        first = segments[0]
        return first == USER_NAMESPACE or isinstance(self._fields.get(first), Lazy)

    # ── reading ──────────────────────────────────────────────

    def read(self, path: str) -> Any:
        """Return the value at *path*, resolving lazy values along the way.

        Raises:
            AccessDeniedError: If the path's policy forbids reading.
            NotFoundError: If any segment holds no value.
        """
        if not self.allowed_to_read(path):
            logger.debug("Denied read of %r", path)
            raise AccessDeniedError(path, "read")

        segments = split_path(path)
        current: Any = self._fields
        for depth, segment in enumerate(segments):
            current = resolve(current)
            if isinstance(current, PathStore):
                try:
                    return current.read(join_path(segments[depth:]))
                except (AccessDeniedError, NotFoundError) as exc:
                    raise _rescope(exc, path) from exc
            current = _child(current, segment, path)
        return resolve(current)

    # ── writing ──────────────────────────────────────────────

    def write(self, path: str, value: Any) -> Any:
        """Store *value* at *path*, creating missing intermediate dicts.

        Returns the value as read back from its container, so a bare callable
        comes back wrapped in :class:`Lazy`.

        Raises:
            AccessDeniedError: If the path's policy forbids writing.
            PathConflictError: If a scalar, or a list with no such index,
                               sits where a container is needed.
        """
        if not self.allowed_to_write(path):
            logger.debug("Denied write of %r", path)
            raise AccessDeniedError(path, "write")

        segments = split_path(path)
        container: Any = self._fields
        for depth, segment in enumerate(segments[:-1]):
            child = resolve(_vivify(container, segment, path))
            if isinstance(child, PathStore):
                try:
                    return child.write(join_path(segments[depth + 1 :]), value)
                except (AccessDeniedError, PathConflictError) as exc:
                    raise _rescope(exc, path) from exc
            container = child

        stored = _assign(container, segments[-1], as_value(value), path)
        logger.debug("Wrote %r", path)
        return stored

    def write_entries(self, entries: Mapping[str, Any]) -> None:
        """Write every ``path -> value`` pair of *entries* in order.

        Not transactional: entries written before a failing one stay written
        and the failure propagates.
        """
        for path, value in entries.items():
            self.write(path, value)

    # ── snapshot ─────────────────────────────────────────────

    def entries(self) -> dict[str, Any]:
        """Return top-level keys whose *override* allows reading.

        Values are the raw stored objects (lazy values unresolved, nothing
        copied).  Keys without an override are left out even when the default
        policy allows reading.
        """
        snapshot: dict[str, Any] = {}
        for key, policy in self._restrictions.items():
            if not policy.can_read:
                continue
            value = self._fields.get(key, ABSENT)
            if is_absent(value):
                continue
            snapshot[key] = value
        return snapshot

    # ── introspection ────────────────────────────────────────

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and not is_absent(self._fields.get(key, ABSENT))

    def __repr__(self) -> str:
        overrides = {key: str(policy) for key, policy in self._restrictions.items()}
        return (
            f"{type(self).__name__}(default_policy={str(self._default_policy)!r}, "
            f"restrictions={overrides!r})"
        )


def _check_key(key: str) -> None:
    if not isinstance(key, str) or len(split_path(key)) != 1:
        raise PolicyConfigError(key, f"Overrides apply to top-level keys only, got {key!r}")


def _rescope(
    exc: AccessDeniedError | NotFoundError | PathConflictError, path: str
) -> PathStoreError:
    """Re-issue an error raised by a nested store under the caller's full *path*.

    The nested store's own error stays reachable as ``__cause__``.
    """
    if isinstance(exc, AccessDeniedError):
        return AccessDeniedError(path, exc.operation)
    if isinstance(exc, NotFoundError):
        return NotFoundError(path, exc.segment)
    return PathConflictError(path, exc.segment)


def _child(container: Any, segment: str, path: str) -> Any:
    """Look up *segment* in *container* for a read walk."""
    if isinstance(container, dict):
        value = container.get(segment, ABSENT)
        if is_absent(value):
            raise NotFoundError(path, segment)
        return value
    if isinstance(container, list):
        index = list_index(segment, len(container))
        if index is None or is_absent(container[index]):
            raise NotFoundError(path, segment)
        return container[index]
    # scalar (or None) met mid-path
    raise NotFoundError(path, segment)


def _vivify(container: Any, segment: str, path: str) -> Any:
    """Look up *segment* in *container* for a write walk, creating a dict if missing."""
    if isinstance(container, dict):
        value = container.get(segment, ABSENT)
        if is_absent(value):
            value = container[segment] = {}
        return value
    if isinstance(container, list):
        index = list_index(segment, len(container))
        if index is None:
            raise PathConflictError(path, segment, f"no index {segment!r} in a list")
        if is_absent(container[index]):
            container[index] = {}
        return container[index]
    raise PathConflictError(path, segment, f"found {type(container).__name__}")


def _assign(container: Any, segment: str, value: Any, path: str) -> Any:
    if isinstance(container, dict):
        container[segment] = value
        return container[segment]
    if isinstance(container, list):
        index = list_index(segment, len(container), allow_append=True)
        if index is None:
            raise PathConflictError(path, segment, f"no index {segment!r} in a list")
        if index == len(container):
            container.append(value)
        else:
            container[index] = value
        return container[index]
    raise PathConflictError(path, segment, f"found {type(container).__name__}")
