"""Permission — the policy attached to a top-level key."""

from __future__ import annotations

from enum import Enum

from path_store.exceptions import PolicyConfigError

_ALIASES = {
    "r": "read",
    "w": "write",
    "rw": "read-write",
}


class Permission(str, Enum):
    """Capabilities granted on a key.

    Members compare equal to their string value, so ``Permission.READ == "read"``.
    The short forms ``"r"``, ``"w"`` and ``"rw"`` are accepted by :meth:`parse`.
    """

    NONE = "none"
    READ = "read"
    WRITE = "write"
    READ_WRITE = "read-write"

    @property
    def can_read(self) -> bool:
        return self in (Permission.READ, Permission.READ_WRITE)

    @property
    def can_write(self) -> bool:
        return self in (Permission.WRITE, Permission.READ_WRITE)

    @classmethod
    def parse(cls, value: Permission | str) -> Permission:
        """Coerce *value* into a :class:`Permission`.

        Raises:
            PolicyConfigError: If *value* names no known policy.
        """
        if isinstance(value, Permission):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            try:
                return cls(_ALIASES.get(normalized, normalized))
            except ValueError:
                pass
        raise PolicyConfigError(value)

    def __str__(self) -> str:
        return self.value
