"""Interactive new-project session."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def print_banner() -> None:
    print("Welcome to Go Project Creator")


def run_new(args: argparse.Namespace) -> int:
    """Probe the toolchain, collect metadata and create the project."""
    import newgo.cli as cli

    del args
    cli.print_banner()

    settings = cli.NewGoSettings.from_env()
    toolchain = cli.Toolchain(
        go_command=settings.go_command,
        editor_command=settings.editor_command or "code",
    )

    try:
        go_version = toolchain.detect_version()
    except cli.ToolNotFoundError:
        print(f"error: {settings.go_command} not installed, won't continue further", file=sys.stderr)
        return 4
    except cli.ToolchainError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    print(f"go installation detected: {go_version}")

    prompter = cli.Prompter()
    store = cli.DefaultsStore(
        settings.defaults_path,
        prompter,
        module_prefix_root=settings.module_prefix_root,
    )

    try:
        store.ensure_initialized()
        collector = cli.MetadataCollector(store, prompter, module_prefix_root=settings.module_prefix_root)
        metadata = collector.collect()
        launch_editor = settings.editor_command is not None
        if sys.stderr.isatty():
            from newgo.cli.progress import RichMaterializeProgress

            with RichMaterializeProgress() as progress:
                materializer = cli.ProjectMaterializer(toolchain, progress=progress, launch_editor=launch_editor)
                project_path = materializer.create(metadata)
        else:
            materializer = cli.ProjectMaterializer(toolchain, launch_editor=launch_editor)
            project_path = materializer.create(metadata)
    except KeyboardInterrupt:
        print("\nAborted.")
        return 2
    except cli.ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except cli.ToolchainError as exc:
        if isinstance(exc, cli.ToolNotFoundError):
            print(f"error: {exc.program} not found, is it on your PATH?", file=sys.stderr)
        else:
            print(f"error: {exc}", file=sys.stderr)
        return 4
    except cli.MaterializeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5

    _print_next_steps(project_path, metadata.module_name)
    return 0


def _print_next_steps(project_path: Path, module_name: str) -> None:
    print(f"\nModule {module_name} created at {project_path}")
    print("\nNext steps:")
    print(f"  cd {project_path}")
    print("  go run .")


__all__ = ["print_banner", "run_new"]
