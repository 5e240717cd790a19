"""Failures raised by storage collaborators."""

from __future__ import annotations


class StorageError(Exception):
    """A lookup could not be completed (connectivity, driver, corrupt schema).

    Distinct from "not found": a missing row is a normal ``None`` result.
    """

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation
