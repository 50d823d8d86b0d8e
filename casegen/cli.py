"""
cli.py

Responsibility: CLI entrypoint for casegen.

High-level flow (single interactive command):
1) Parse flags (`--version` only)
2) Ask for the mode; an invalid choice stops here
3) Load `casegen.yaml`, configure logging, ask for the names that mode needs
4) Render and write the scaffold, print a per-file summary

This module should orchestrate behavior but keep concerns isolated:
- Prompts: `prompts.py`
- Rendering: `renderer.py`
- Filesystem writes: `scaffold.py`
- Configuration: `config.py`
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from casegen import __version__
from casegen.config import ScaffoldConfig, load_config
from casegen.prompts import (
    CHOICE_EMPTY_PROJECT,
    CHOICE_USE_CASE,
    InputFn,
    ask_choice,
    ask_project_info,
    ask_use_case,
)
from casegen.scaffold import (
    empty_project_summary,
    generate_empty_project,
    generate_use_case_scaffold,
    use_case_summary,
)

logger = logging.getLogger(__name__)

INVALID_CHOICE_MESSAGE = "Invalid choice. Please run the command again and select 1 or 2."


class CLIError(RuntimeError):
    pass


def _configure_logging(level_name: str) -> None:
    level = int(level_name) if level_name.isdigit() else logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise CLIError(f"Unknown log level: {level_name}")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _print_lines(lines: list[str]) -> None:
    for line in lines:
        print(line)


def use_case_cmd(*, root: Path, input_fn: InputFn) -> int:
    use_case = ask_use_case(input_fn)
    generate_use_case_scaffold(use_case, root=root)
    _print_lines(use_case_summary(use_case))
    return 0


def empty_project_cmd(*, root: Path, config: ScaffoldConfig, input_fn: InputFn) -> int:
    info = ask_project_info(input_fn)
    generate_empty_project(info, root=root, config=config)
    _print_lines(empty_project_summary(info))
    return 0


def run_interactive(*, root: Path, input_fn: InputFn = input) -> int:
    """
    Ask for a mode and run it against `root`.

    An unrecognized choice prints a message and returns 0 without reading
    `casegen.yaml` or touching the filesystem.
    """
    choice = ask_choice(input_fn)
    if choice not in (CHOICE_USE_CASE, CHOICE_EMPTY_PROJECT):
        print(INVALID_CHOICE_MESSAGE)
        return 0

    config = load_config(root)
    _configure_logging(config.log_level)
    logger.debug("Menu choice: %r", choice)

    if choice == CHOICE_USE_CASE:
        return use_case_cmd(root=root, input_fn=input_fn)
    return empty_project_cmd(root=root, config=config, input_fn=input_fn)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="casegen",
        description="Generate a scaffold for a use case or create an empty project",
    )
    p.add_argument(
        "--version",
        action="version",
        version=__version__,
        help="Output the current version",
    )
    return p


def main(argv: list[str] | None = None, *, input_fn: InputFn = input) -> int:
    parser = _build_parser()
    parser.parse_args(argv)
    return run_interactive(root=Path.cwd(), input_fn=input_fn)


if __name__ == "__main__":
    raise SystemExit(main())
