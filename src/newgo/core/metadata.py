"""Project metadata collection."""

from __future__ import annotations

from newgo.core.contracts.metadata import ProjectMetadata
from newgo.core.defaults.store import DefaultsStore
from newgo.core.prompting import Prompter
from newgo.core.validation import (
    MODULE_PREFIX_ROOT,
    Validator,
    is_existing_directory,
    module_prefix_validator,
    project_name_validator,
)


class MetadataCollector:
    """Assemble :class:`ProjectMetadata` from stored defaults and prompts.

    A stored default accepted with ``y`` is used as-is, without running its
    validator again.
    """

    def __init__(
        self,
        store: DefaultsStore,
        prompter: Prompter | None = None,
        *,
        module_prefix_root: str = MODULE_PREFIX_ROOT,
    ) -> None:
        self._store = store
        self._prompter = prompter or Prompter()
        self._module_prefix_root = module_prefix_root

    def collect(self) -> ProjectMetadata:
        defaults = self._store.load()

        workspace_dir = self._stored_or_prompt(
            "Workspace Directory",
            defaults.workspace_dir,
            is_existing_directory,
        )
        module_prefix = self._stored_or_prompt(
            "Module Prefix",
            defaults.module_prefix,
            module_prefix_validator(self._module_prefix_root),
        )
        project_name = self._prompter.prompt(
            "Project Name",
            "Please enter Project Name:",
            project_name_validator(workspace_dir),
        )
        return ProjectMetadata(
            workspace_dir=workspace_dir,
            module_prefix=module_prefix,
            project_name=project_name,
        )

    def _stored_or_prompt(self, field_label: str, stored: str, validator: Validator) -> str:
        if self._prompter.confirm(field_label, f"Use stored {field_label.lower()} '{stored}'? (y/n):"):
            return stored
        return self._prompter.prompt(field_label, f"Please enter {field_label}:", validator)


__all__ = ["MetadataCollector"]
