"""Exception types raised while creating a project."""

from __future__ import annotations

from pathlib import Path

__all__ = ["CreateError", "IoFailure", "ProjectAlreadyExists"]


class CreateError(RuntimeError):
    """Base class for every failure reported by the scaffolder."""


class IoFailure(CreateError):
    """Raised when an underlying filesystem operation fails."""

    def __init__(self, error: OSError) -> None:
        super().__init__(f"IO error: {error}")
        self.error = error


class ProjectAlreadyExists(CreateError):
    """Raised when the target project directory is already occupied."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Project directory already exists: {path}")
        self.path = path
