"""Core contracts shared across newgo modules."""

from newgo.core.contracts.exceptions import (
    ConfigError,
    DefaultsMissingError,
    MaterializeError,
    NewGoError,
    ProjectExistsError,
    ToolchainError,
    ToolNotFoundError,
)
from newgo.core.contracts.metadata import DefaultsRecord, ProjectMetadata
from newgo.core.contracts.progress import MaterializeProgress

__all__ = [
    "ConfigError",
    "DefaultsMissingError",
    "DefaultsRecord",
    "MaterializeError",
    "MaterializeProgress",
    "NewGoError",
    "ProjectExistsError",
    "ProjectMetadata",
    "ToolNotFoundError",
    "ToolchainError",
]
