"""Shared fixtures for casegen tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


class ScriptedInput:
    """Stand-in for ``input`` that answers prompts from a fixed list."""

    def __init__(self, answers: list[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)


@pytest.fixture
def scripted_input() -> Callable[..., ScriptedInput]:
    """Factory: ``scripted_input("1", "foo")``."""

    def _make(*answers: str) -> ScriptedInput:
        return ScriptedInput(list(answers))

    return _make


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty working directory that casegen treats as the project root."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CASEGEN_LOG_LEVEL", raising=False)
    return tmp_path
