"""Environment-driven settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field

from newgo.core.validation import MODULE_PREFIX_ROOT


class NewGoSettings(BaseModel):
    go_command: str = Field(default="go", min_length=1)
    editor_command: str | None = "code"
    defaults_path: Path | None = None
    module_prefix_root: str = MODULE_PREFIX_ROOT

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> NewGoSettings:
        """Build settings from ``NEWGO_*`` variables.

        ``NEWGO_EDITOR`` set to an empty string disables the editor launch.
        """

        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        go_command = env.get("NEWGO_GO", "").strip()
        if go_command:
            values["go_command"] = go_command
        if "NEWGO_EDITOR" in env:
            values["editor_command"] = env["NEWGO_EDITOR"].strip() or None
        defaults_path = env.get("NEWGO_DEFAULTS_PATH", "").strip()
        if defaults_path:
            values["defaults_path"] = Path(defaults_path).expanduser()
        prefix_root = env.get("NEWGO_MODULE_PREFIX_ROOT", "").strip()
        if prefix_root:
            values["module_prefix_root"] = prefix_root
        return cls.model_validate(values)
