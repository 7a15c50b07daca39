"""Shared test fixtures for newgo tests."""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest

from newgo.core.contracts.metadata import DefaultsRecord
from newgo.core.defaults.store import DefaultsStore, serialize_defaults


class FakeQuestion:
    """Mimics questionary.Question: returns a canned value from .ask()."""

    def __init__(self, value: Any) -> None:
        self._value = value

    def ask(self) -> Any:
        if isinstance(self._value, BaseException):
            raise self._value
        return self._value


class FakeQuestionary(SimpleNamespace):
    """Fake questionary module driven by prompt-substring -> answers.

    Each key is matched case-insensitively against the prompt text. A list
    value is consumed one answer per prompt, so retries see the next entry.
    Exceptions in the list are raised from ``ask()``.
    """

    def __init__(self, answers: dict[str, Any]) -> None:
        queues = {key: list(value) if isinstance(value, list) else [value] for key, value in answers.items()}
        prompts: list[str] = []

        def _find(prompt: str) -> Any:
            prompts.append(prompt)
            for key, queue in queues.items():
                if key.lower() in prompt.lower():
                    if len(queue) > 1:
                        return queue.pop(0)
                    return queue[0]
            raise KeyError(f"no answer configured for prompt: {prompt!r}")

        def _text(prompt: str, **_kw: Any) -> FakeQuestion:
            return FakeQuestion(_find(prompt))

        super().__init__(text=_text, prompts=prompts)


@pytest.fixture
def install_questionary(monkeypatch: pytest.MonkeyPatch) -> Callable[[dict[str, Any]], FakeQuestionary]:
    """Install a fake questionary module built from an answers mapping."""

    def _install(answers: dict[str, Any]) -> FakeQuestionary:
        fake = FakeQuestionary(answers)
        monkeypatch.setitem(sys.modules, "questionary", fake)
        return fake

    return _install


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    ws = tmp_path / "ws"
    ws.mkdir()
    return ws


@pytest.fixture
def defaults_path(tmp_path: Path) -> Path:
    return tmp_path / "home" / ".newgo.json"


@pytest.fixture
def stored_store(defaults_path: Path, workspace: Path) -> DefaultsStore:
    """A store whose defaults file already holds the workspace and a prefix."""
    defaults_path.parent.mkdir(parents=True, exist_ok=True)
    record = DefaultsRecord(workspace_dir=str(workspace), module_prefix="github.com/alice")
    defaults_path.write_text(serialize_defaults(record), encoding="utf-8")
    return DefaultsStore(defaults_path)
