"""Custom exceptions for the path_store package."""

from __future__ import annotations


class PathStoreError(Exception):
    """Base exception for all path store errors."""


class AccessDeniedError(PathStoreError):
    """Raised when a path's permission policy forbids the operation."""

    def __init__(self, path: str, operation: str) -> None:
        self.path = path
        self.operation = operation
        super().__init__(f"{operation.capitalize()} of '{path}' is not allowed")


class NotFoundError(PathStoreError, KeyError):
    """Raised by ``read`` when a segment of the path holds no value."""

    def __init__(self, path: str, segment: str) -> None:
        self.path = path
        self.segment = segment
        super().__init__(f"Nothing stored at '{path}' (missing segment '{segment}')")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class PathConflictError(PathStoreError):
    """Raised by ``write`` when an existing non-container value blocks the path."""

    def __init__(self, path: str, segment: str, detail: str = "") -> None:
        self.path = path
        self.segment = segment
        msg = f"Cannot write '{path}': no container to hold segment '{segment}'"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)


class PolicyConfigError(PathStoreError, ValueError):
    """Raised when a permission policy or store configuration is invalid."""

    def __init__(self, value: object, message: str = "") -> None:
        self.value = value
        super().__init__(message or f"Unknown permission policy: {value!r}")
