"""Contracts for materializer progress reporting."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MaterializeProgress(Protocol):
    def phase_start(self, phase: str) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass

    def phase_error(self, phase: str, error: BaseException) -> None:
        pass
