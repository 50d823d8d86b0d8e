"""Tests for the CLI entrypoint.

Covers:
- ``--version`` output
- Both menu modes end-to-end through ``main``
- Invalid choices: message, exit code, no filesystem writes
- Log level and config file handling
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from casegen import __version__
from casegen.cli import INVALID_CHOICE_MESSAGE, CLIError, main
from casegen.config import ConfigError
from casegen.prompts import MENU_PROMPT


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert capsys.readouterr().out.strip() == __version__


def test_unknown_flag_is_rejected() -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--name", "foo"])
    assert exc.value.code == 2


class TestUseCaseMode:
    def test_generates_scaffold_and_prints_summary(
        self, workdir: Path, scripted_input, capsys: pytest.CaptureFixture[str]
    ) -> None:
        answers = scripted_input("1", "getUser")
        assert main([], input_fn=answers) == 0

        assert answers.prompts == [MENU_PROMPT, "Enter the name of the use case: "]
        assert (workdir / "src" / "controllers" / "getUserController.ts").is_file()
        assert (workdir / "src" / "cases" / "getUser" / "__tests__" / "getUser.test.ts").is_file()

        out = capsys.readouterr().out.splitlines()
        assert out[0] == "Scaffold for use case 'getUser' has been created successfully."
        assert out[-1] == "Test file created in src/cases/getUser/__tests__/getUser.test.ts"

    def test_running_twice_succeeds(self, workdir: Path, scripted_input) -> None:
        assert main([], input_fn=scripted_input("1", "foo")) == 0
        assert main([], input_fn=scripted_input("1", "foo")) == 0
        assert sorted(p.name for p in (workdir / "src" / "cases").iterdir()) == ["foo"]


class TestEmptyProjectMode:
    def test_generates_project(
        self, workdir: Path, scripted_input, capsys: pytest.CaptureFixture[str]
    ) -> None:
        answers = scripted_input("2", "acme", "Ada", "A tool")
        assert main([], input_fn=answers) == 0

        assert answers.prompts[1:] == [
            "Enter the name of the project: ",
            "Enter the author name: ",
            "Enter a brief description of the project: ",
        ]
        data = json.loads((workdir / "acme" / "package.json").read_text(encoding="utf-8"))
        assert data["name"] == "acme"
        assert data["author"] == "Ada"
        assert capsys.readouterr().out.startswith("Empty project 'acme' has been created successfully.\n")

    def test_reads_config_file(self, workdir: Path, scripted_input) -> None:
        (workdir / "casegen.yaml").write_text("license: MIT\nproject_version: 2.0.0\n", encoding="utf-8")
        main([], input_fn=scripted_input("2", "acme", "Ada", ""))
        data = json.loads((workdir / "acme" / "package.json").read_text(encoding="utf-8"))
        assert data["license"] == "MIT"
        assert data["version"] == "2.0.0"


@pytest.mark.parametrize("choice", ["3", "", " 1", "1 ", "one", "12"])
def test_invalid_choice_writes_nothing(
    choice: str, workdir: Path, scripted_input, capsys: pytest.CaptureFixture[str]
) -> None:
    answers = scripted_input(choice, "should-not-be-read")
    assert main([], input_fn=answers) == 0
    assert capsys.readouterr().out.strip() == INVALID_CHOICE_MESSAGE
    assert answers.prompts == [MENU_PROMPT]
    assert list(workdir.iterdir()) == []


def test_eof_at_prompt_propagates(workdir: Path, scripted_input) -> None:
    with pytest.raises(EOFError):
        main([], input_fn=scripted_input("1"))
    assert list(workdir.iterdir()) == []


def test_unknown_log_level_is_an_error(
    workdir: Path, scripted_input, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("CASEGEN_LOG_LEVEL", "chatty")
    with pytest.raises(CLIError, match="CHATTY"):
        main([], input_fn=scripted_input("1", "foo"))


def test_numeric_log_level_is_accepted(
    workdir: Path, scripted_input, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("CASEGEN_LOG_LEVEL", "10")
    assert main([], input_fn=scripted_input("1", "foo")) == 0
    assert (workdir / "src" / "controllers" / "fooController.ts").is_file()


def test_invalid_choice_ignores_malformed_config(
    workdir: Path, scripted_input, capsys: pytest.CaptureFixture[str]
) -> None:
    (workdir / "casegen.yaml").write_text("- x\n", encoding="utf-8")
    assert main([], input_fn=scripted_input("3")) == 0
    assert capsys.readouterr().out.strip() == INVALID_CHOICE_MESSAGE


def test_malformed_config_is_reported_for_valid_choice(workdir: Path, scripted_input) -> None:
    (workdir / "casegen.yaml").write_text("- x\n", encoding="utf-8")
    answers = scripted_input("1", "foo")
    with pytest.raises(ConfigError):
        main([], input_fn=answers)
    assert answers.prompts == [MENU_PROMPT]
    assert not (workdir / "src").exists()
