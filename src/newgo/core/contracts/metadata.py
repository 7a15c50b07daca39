"""Metadata and defaults contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class DefaultsRecord(BaseModel):
    workspace_dir: str = Field(min_length=1)
    module_prefix: str = Field(min_length=1)

    model_config = {"frozen": True}


class ProjectMetadata(BaseModel):
    """Answers collected for a single project.

    Validation happens in the prompt loop rather than on the model: a stored
    default accepted by the user is carried through unchanged.
    """

    workspace_dir: str
    module_prefix: str
    project_name: str

    model_config = {"frozen": True}

    @property
    def project_path(self) -> Path:
        return Path(self.workspace_dir) / self.project_name

    @property
    def module_name(self) -> str:
        return f"{self.module_prefix}/{self.project_name}"
