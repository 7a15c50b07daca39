"""External command collaborators: the Go toolchain and the editor."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from newgo.core.contracts.exceptions import ToolchainError, ToolNotFoundError

logger = logging.getLogger(__name__)


def run_command(program: str, args: Sequence[str], *, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    cmd = [program, *args]
    logger.debug("Running: %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True, check=False)
    except FileNotFoundError as exc:
        raise ToolNotFoundError(f"No executable found: '{program}'", program=program) from exc
    except OSError as exc:
        raise ToolchainError(f"Failed to execute {program}: {exc}") from exc

    if result.returncode != 0:
        details = (result.stderr or "").strip()
        message = f"{' '.join(cmd)} exited with status {result.returncode}"
        if details:
            message = f"{message}: {details}"
        raise ToolchainError(message)
    return result


def spawn_command(program: str, args: Sequence[str]) -> int:
    """Start ``program`` without waiting for it and return its pid."""
    cmd = [program, *args]
    logger.debug("Spawning: %s", " ".join(cmd))
    try:
        process = subprocess.Popen(cmd)
    except FileNotFoundError as exc:
        raise ToolNotFoundError(f"No executable found: '{program}'", program=program) from exc
    except OSError as exc:
        raise ToolchainError(f"Failed to execute {program}: {exc}") from exc
    logger.debug("Process started with pid %s", process.pid)
    return process.pid


@dataclass(frozen=True)
class Toolchain:
    go_command: str = "go"
    editor_command: str = "code"

    def detect_version(self) -> str:
        result = run_command(self.go_command, ["version"])
        return result.stdout.strip()

    def init_module(self, module_name: str, *, cwd: Path) -> None:
        run_command(self.go_command, ["mod", "init", module_name], cwd=cwd)

    def launch_editor(self, path: Path) -> int:
        return spawn_command(self.editor_command, [str(path)])


__all__ = ["Toolchain", "run_command", "spawn_command"]
