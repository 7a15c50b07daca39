"""Tests for environment settings."""

from __future__ import annotations

from pathlib import Path

from newgo.core.config import NewGoSettings


def test_defaults_when_environment_is_empty() -> None:
    settings = NewGoSettings.from_env({})

    assert settings.go_command == "go"
    assert settings.editor_command == "code"
    assert settings.defaults_path is None
    assert settings.module_prefix_root == "github.com/"


def test_environment_overrides() -> None:
    settings = NewGoSettings.from_env(
        {
            "NEWGO_GO": "/opt/go/bin/go",
            "NEWGO_EDITOR": "nvim",
            "NEWGO_DEFAULTS_PATH": "/tmp/newgo.json",
            "NEWGO_MODULE_PREFIX_ROOT": "example.org/",
        }
    )

    assert settings.go_command == "/opt/go/bin/go"
    assert settings.editor_command == "nvim"
    assert settings.defaults_path == Path("/tmp/newgo.json")
    assert settings.module_prefix_root == "example.org/"


def test_empty_editor_disables_editor() -> None:
    assert NewGoSettings.from_env({"NEWGO_EDITOR": "  "}).editor_command is None


def test_blank_go_command_keeps_default() -> None:
    assert NewGoSettings.from_env({"NEWGO_GO": ""}).go_command == "go"
