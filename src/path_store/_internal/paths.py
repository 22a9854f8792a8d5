"""Path helpers shared by the store's read and write walks."""

from __future__ import annotations

SEPARATOR = ":"


def split_path(path: str) -> list[str]:
    """Split *path* into segments.

    Plain ``str.split``: ``""`` is one empty segment and ``"a::b"`` keeps its
    empty middle segment.  Empty segments are ordinary keys.
    """
    return path.split(SEPARATOR)


def join_path(segments: list[str]) -> str:
    return SEPARATOR.join(segments)


def list_index(segment: str, length: int, *, allow_append: bool = False) -> int | None:
    """Parse *segment* as an index into a list of *length* items.

    Only non-negative decimal indices are accepted.  Returns ``None`` when the
    segment is not an index or falls outside the list (``length`` itself is
    valid when *allow_append* is set).
    """
    if not (segment.isascii() and segment.isdigit()):
        return None
    index = int(segment)
    upper = length + 1 if allow_append else length
    return index if index < upper else None
