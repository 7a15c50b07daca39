"""Exception hierarchy for newgo."""

from __future__ import annotations

from pathlib import Path


class NewGoError(Exception):
    """Base exception for all newgo errors."""


class ConfigError(NewGoError):
    """Defaults file loading, parsing or writing failure."""


class DefaultsMissingError(ConfigError):
    """Defaults file has not been created yet."""


class ToolchainError(NewGoError):
    """External command failed to start or exited unsuccessfully."""


class ToolNotFoundError(ToolchainError):
    """External command executable could not be found."""

    def __init__(self, message: str, *, program: str) -> None:
        super().__init__(message)
        self.program = program


class MaterializeError(NewGoError):
    """Project directory or files could not be created."""


class ProjectExistsError(MaterializeError):
    """Target project directory already exists."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path
