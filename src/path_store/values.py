"""Value variants held by a store: lazy producers and deliberate absence."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final

logger = logging.getLogger(__name__)


class _Absent:
    """Marker for a value that is deliberately stored as "nothing"."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT: Final = _Absent()


@dataclass(frozen=True)
class Lazy:
    """A zero-argument producer whose result stands in for the stored value.

    The producer runs on every resolution; results are not cached, so a
    ``Lazy`` always reflects whatever its producer sees at read time.

    Attributes:
        producer: Callable taking no arguments and returning any store value.
    """

    producer: Callable[[], Any]

    def resolve(self) -> Any:
        logger.debug("Resolving lazy value %r", self.producer)
        return self.producer()


def as_value(value: Any) -> Any:
    """Normalize a value entering the store.

    Bare callables become :class:`Lazy`; everything else is stored as given.
    Only the outermost value is wrapped.  Callables nested inside dicts and
    lists stay bare and are still run by :func:`resolve` when a walk reaches
    them.
    """
    if isinstance(value, Lazy) or not callable(value):
        return value
    return Lazy(value)


def resolve(value: Any) -> Any:
    """Return the produced value if *value* is lazy, else *value* itself.

    Bare zero-argument callables count as lazy too.
    """
    if isinstance(value, Lazy):
        return value.resolve()
    if callable(value):
        logger.debug("Resolving bare callable %r", value)
        return value()
    return value


def is_absent(value: Any) -> bool:
    return value is ABSENT
