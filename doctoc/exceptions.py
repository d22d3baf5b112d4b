"""Custom exceptions for doctoc."""

from __future__ import annotations

from typing import Iterable

ROOT_LABEL = "<root>"


class DoctocError(Exception):
    """Base exception for doctoc operations."""


class SchemaError(DoctocError):
    """Table of contents does not match the expected shape.

    Attributes:
        path: Keys leading from the root to the offending value.
        reason: Human readable description of the problem.
    """

    def __init__(self, path: Iterable[str], reason: str) -> None:
        self.path = tuple(path)
        self.reason = reason
        super().__init__(f"{format_path(self.path)}: {reason}")


def format_path(path: Iterable[str]) -> str:
    """Return a dotted representation of a key path."""
    parts = [str(part) for part in path]
    return ".".join(parts) if parts else ROOT_LABEL
