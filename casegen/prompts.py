"""
prompts.py

Responsibility: Ask the interactive questions, in a fixed order, and wrap the answers.

Answers are taken verbatim: no trimming, no validation. Empty input is a valid answer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

InputFn = Callable[[str], str]

MENU_PROMPT = (
    "Select an option:\n"
    "1. Generate use case scaffold\n"
    "2. Generate empty project\n"
    "Enter your choice (1 or 2): "
)

CHOICE_USE_CASE = "1"
CHOICE_EMPTY_PROJECT = "2"


@dataclass(frozen=True)
class UseCase:
    """Name of the use case to scaffold."""

    name: str


@dataclass(frozen=True)
class ProjectInfo:
    """Answers collected for the empty-project mode."""

    name: str
    author: str
    description: str


def ask_choice(input_fn: InputFn = input) -> str:
    return input_fn(MENU_PROMPT)


def ask_use_case(input_fn: InputFn = input) -> UseCase:
    return UseCase(name=input_fn("Enter the name of the use case: "))


def ask_project_info(input_fn: InputFn = input) -> ProjectInfo:
    name = input_fn("Enter the name of the project: ")
    author = input_fn("Enter the author name: ")
    description = input_fn("Enter a brief description of the project: ")
    return ProjectInfo(name=name, author=author, description=description)
