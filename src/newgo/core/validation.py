"""Input validators used by the prompt loop.

Every validator is a plain ``(value: str) -> bool`` function. Validators that
need context, such as the workspace directory for name availability, take it
as an explicit parameter and are bound with :func:`functools.partial`.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from pathlib import Path

Validator = Callable[[str], bool]

MODULE_PREFIX_ROOT = "github.com/"

_YES_NO = {"y", "n"}
_RELATIVE_NAMES = {".", ".."}


def is_single_token(value: str) -> bool:
    return len(value.strip().split()) == 1


def is_existing_directory(value: str) -> bool:
    if not value:
        return False
    return Path(value).is_dir()


def is_yes_no(value: str) -> bool:
    return value.strip().lower() in _YES_NO


def has_module_prefix_shape(value: str, *, root: str = MODULE_PREFIX_ROOT) -> bool:
    if not (value.startswith(root) and is_single_token(value)):
        return False
    remainder = value[len(root) :]
    return bool(remainder) and not value.endswith("/")


def module_prefix_validator(root: str = MODULE_PREFIX_ROOT) -> Validator:
    return partial(has_module_prefix_shape, root=root)


def is_project_name_available(value: str, workspace_dir: str | Path) -> bool:
    if not is_single_token(value):
        return False
    # must name a single entry directly under the workspace
    if value in _RELATIVE_NAMES or Path(value).name != value:
        return False
    candidate = Path(workspace_dir) / value
    return not (candidate.exists() or candidate.is_symlink())


def project_name_validator(workspace_dir: str | Path) -> Validator:
    return partial(is_project_name_available, workspace_dir=workspace_dir)


__all__ = [
    "MODULE_PREFIX_ROOT",
    "Validator",
    "has_module_prefix_shape",
    "is_existing_directory",
    "is_project_name_available",
    "is_single_token",
    "is_yes_no",
    "module_prefix_validator",
    "project_name_validator",
]
