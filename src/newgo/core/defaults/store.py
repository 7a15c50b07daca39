"""Per-user defaults persistence."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from newgo.core.contracts.exceptions import ConfigError, DefaultsMissingError
from newgo.core.contracts.metadata import DefaultsRecord
from newgo.core.prompting import Prompter
from newgo.core.validation import MODULE_PREFIX_ROOT, is_existing_directory, module_prefix_validator

logger = logging.getLogger(__name__)

DEFAULTS_FILENAME = ".newgo.json"


def default_defaults_path() -> Path:
    try:
        base = Path.home()
    except (RuntimeError, KeyError):
        base = Path.cwd()
    return base / DEFAULTS_FILENAME


def serialize_defaults(record: DefaultsRecord) -> str:
    return record.model_dump_json(indent=2) + "\n"


def parse_defaults(text: str) -> DefaultsRecord:
    try:
        payload: Any = json.loads(text)
        return DefaultsRecord.model_validate(payload)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON: {exc}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid defaults: {exc}") from exc


class DefaultsStore:
    """Owns the on-disk defaults record.

    Call :meth:`ensure_initialized` before :meth:`load`; loading a missing or
    corrupt file raises instead of prompting again.
    """

    def __init__(
        self,
        path: Path | None = None,
        prompter: Prompter | None = None,
        *,
        module_prefix_root: str = MODULE_PREFIX_ROOT,
    ) -> None:
        self.path = path or default_defaults_path()
        self._prompter = prompter or Prompter()
        self._module_prefix_root = module_prefix_root

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> DefaultsRecord:
        if not self.exists():
            raise DefaultsMissingError(f"defaults file not found: {self.path}")
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"failed reading defaults file: {self.path}") from exc
        try:
            record = parse_defaults(text)
        except ConfigError as exc:
            raise ConfigError(f"corrupt defaults file {self.path}: {exc}") from exc
        logger.debug("Loaded defaults from %s", self.path)
        return record

    def save(self, record: DefaultsRecord) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(serialize_defaults(record), encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"failed to write defaults file: {self.path}") from exc
        logger.debug("Saved defaults to %s", self.path)

    def ensure_initialized(self) -> bool:
        """Run the first-run bootstrap when no defaults file exists.

        Returns ``True`` when the bootstrap ran.
        """

        if self.exists():
            return False
        self.bootstrap()
        return True

    def bootstrap(self) -> DefaultsRecord:
        print(f"No defaults found at {self.path}, let's set them up.")
        workspace_dir = self._prompter.prompt(
            "Workspace Directory",
            "Please enter Workspace Directory:",
            is_existing_directory,
        )
        module_prefix = self._prompter.prompt(
            "Module Prefix",
            f"Please enter Module Prefix (e.g. {self._module_prefix_root}<user>):",
            module_prefix_validator(self._module_prefix_root),
        )
        record = DefaultsRecord(workspace_dir=workspace_dir, module_prefix=module_prefix)
        self.save(record)
        print(f"Defaults written to {self.path}")
        return record


__all__ = [
    "DEFAULTS_FILENAME",
    "DefaultsStore",
    "default_defaults_path",
    "parse_defaults",
    "serialize_defaults",
]
