"""Project materialization: directory, module init, boilerplate, editor."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from newgo.core.contracts.exceptions import MaterializeError, ProjectExistsError, ToolchainError
from newgo.core.contracts.metadata import ProjectMetadata
from newgo.core.contracts.progress import MaterializeProgress
from newgo.core.toolchain import Toolchain

logger = logging.getLogger(__name__)

ENTRYPOINT_FILENAME = "main.go"

ENTRYPOINT_TEMPLATE = """package main

import "fmt"

func main() {
\tfmt.Println("Hello, World!")
}
"""

PHASE_CREATE = "Create"
PHASE_INIT = "Init module"
PHASE_WRITE = "Write main.go"
PHASE_EDITOR = "Launch editor"


class ProjectMaterializer:
    """Turn collected metadata into a Go module on disk.

    Steps run in order and stop at the first failure. Nothing created by an
    earlier step is removed when a later one fails. The editor launch is
    best-effort: its failure is reported as a warning only.
    """

    def __init__(
        self,
        toolchain: Toolchain,
        *,
        progress: MaterializeProgress | None = None,
        launch_editor: bool = True,
    ) -> None:
        self._toolchain = toolchain
        self._progress = progress
        self._launch_editor = launch_editor

    def create(self, metadata: ProjectMetadata) -> Path:
        project_path = metadata.project_path

        self._phase_start(PHASE_CREATE)
        try:
            project_path.mkdir()
        except FileExistsError as exc:
            error = ProjectExistsError(f"{project_path} already exists", path=project_path)
            self._phase_error(PHASE_CREATE, error)
            raise error from exc
        except OSError as exc:
            error = MaterializeError(f"failed to create {project_path}: {exc}")
            self._phase_error(PHASE_CREATE, error)
            raise error from exc
        logger.info("Created %s", project_path)
        self._phase_done(PHASE_CREATE)

        self._phase_start(PHASE_INIT)
        try:
            self._toolchain.init_module(metadata.module_name, cwd=project_path)
        except ToolchainError as exc:
            self._phase_error(PHASE_INIT, exc)
            raise
        logger.info("Initialized module %s", metadata.module_name)
        self._phase_done(PHASE_INIT)

        self._phase_start(PHASE_WRITE)
        entrypoint = project_path / ENTRYPOINT_FILENAME
        try:
            entrypoint.write_text(ENTRYPOINT_TEMPLATE, encoding="utf-8")
        except OSError as exc:
            error = MaterializeError(f"failed to write {entrypoint}: {exc}")
            self._phase_error(PHASE_WRITE, error)
            raise error from exc
        self._phase_done(PHASE_WRITE)

        if self._launch_editor:
            self._phase_start(PHASE_EDITOR)
            try:
                self._toolchain.launch_editor(project_path)
            except ToolchainError as exc:
                logger.warning("Editor launch failed: %s", exc)
                self._phase_error(PHASE_EDITOR, exc)
                print(f"warning: could not open editor: {exc}", file=sys.stderr)
            else:
                self._phase_done(PHASE_EDITOR)

        return project_path

    def _phase_start(self, phase: str) -> None:
        if self._progress is not None:
            self._progress.phase_start(phase)

    def _phase_done(self, phase: str) -> None:
        if self._progress is not None:
            self._progress.phase_done(phase)

    def _phase_error(self, phase: str, error: BaseException) -> None:
        if self._progress is not None:
            self._progress.phase_error(phase, error)


__all__ = ["ENTRYPOINT_FILENAME", "ENTRYPOINT_TEMPLATE", "ProjectMaterializer"]
