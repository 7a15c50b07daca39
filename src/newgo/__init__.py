"""Public API surface for newgo."""

__version__ = "0.1.0"

from newgo.core.config import NewGoSettings
from newgo.core.contracts import (
    ConfigError,
    DefaultsMissingError,
    DefaultsRecord,
    MaterializeError,
    MaterializeProgress,
    NewGoError,
    ProjectExistsError,
    ProjectMetadata,
    ToolchainError,
    ToolNotFoundError,
)
from newgo.core.defaults import DefaultsStore, default_defaults_path, parse_defaults, serialize_defaults
from newgo.core.materializer import ProjectMaterializer
from newgo.core.metadata import MetadataCollector
from newgo.core.prompting import Prompter
from newgo.core.toolchain import Toolchain
from newgo.core.validation import (
    has_module_prefix_shape,
    is_existing_directory,
    is_project_name_available,
    is_single_token,
    is_yes_no,
    project_name_validator,
)

__all__ = [
    "ConfigError",
    "DefaultsMissingError",
    "DefaultsRecord",
    "DefaultsStore",
    "MaterializeError",
    "MaterializeProgress",
    "MetadataCollector",
    "NewGoError",
    "NewGoSettings",
    "ProjectExistsError",
    "ProjectMaterializer",
    "ProjectMetadata",
    "Prompter",
    "ToolNotFoundError",
    "Toolchain",
    "ToolchainError",
    "__version__",
    "default_defaults_path",
    "has_module_prefix_shape",
    "is_existing_directory",
    "is_project_name_available",
    "is_single_token",
    "is_yes_no",
    "parse_defaults",
    "project_name_validator",
    "serialize_defaults",
]
