"""Store configuration schema.

Declares a store's default policy and per-key overrides as data, so they can
be loaded from JSON or any mapping before the store is first used.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from path_store.permission import Permission


class StoreConfig(BaseModel):
    """Permission configuration for a :class:`~path_store.store.PathStore`.

    Attributes:
        default_policy: Policy applied to any top-level key without an override.
        restrictions:   Explicit per-key overrides, keyed by top-level key name.
                        Values accept the long (``"read-write"``) and short
                        (``"rw"``) forms.
    """

    model_config = ConfigDict(frozen=True)

    default_policy: Permission = Permission.READ_WRITE
    restrictions: dict[str, Permission] = Field(default_factory=dict)

    @field_validator("default_policy", mode="before")
    @classmethod
    def _parse_default(cls, value: Any) -> Permission:
        return Permission.parse(value)

    @field_validator("restrictions", mode="before")
    @classmethod
    def _parse_restrictions(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {key: Permission.parse(policy) for key, policy in value.items()}

