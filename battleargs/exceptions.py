"""Custom exception classes for the battle action argument decoder."""

from __future__ import annotations

from pathlib import Path


class BattleArgsError(Exception):
    """Base exception for all battle action argument errors."""


class SchemaError(BattleArgsError):
    """Raised when an action schema declaration is inconsistent."""


class UnknownActionError(BattleArgsError):
    """Raised when an action type has no registered schema."""

    def __init__(self, action: str) -> None:
        self.action = action
        super().__init__(f"No schema registered for action type: {action}")


class DataFileError(BattleArgsError):
    """Raised when a configuration or argument table file cannot be used."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Invalid data file {self.path}: {reason}")


__all__ = [
    "BattleArgsError",
    "DataFileError",
    "SchemaError",
    "UnknownActionError",
]
