"""
renderer.py

Responsibility: Deterministically render the text of every generated file.

Rules:
- Templates live in the package's `templates/` directory, one Jinja2 file per file kind.
- Each `render_*` function is pure: names in, full file text out.
- Names are substituted verbatim; `capfirst` only upper-cases the first character.

This module intentionally does NOT touch the output filesystem or read user input.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


class RenderError(RuntimeError):
    pass


def capitalize_first(value: str) -> str:
    """
    Upper-case the first character and keep the rest as typed.

    Unlike `str.capitalize`, "getUser" becomes "GetUser", not "Getuser".
    """
    return value[:1].upper() + value[1:]


def _json_string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


@lru_cache(maxsize=1)
def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    env.filters["capfirst"] = capitalize_first
    env.filters["jsonstr"] = _json_string
    return env


def render(template_name: str, **context: Any) -> str:
    try:
        return _environment().get_template(template_name).render(**context)
    except TemplateError as e:
        raise RenderError(f"Failed rendering template file: {template_name}") from e


# Use case scaffold


def render_controller(use_case_name: str) -> str:
    return render("use_case/controller.ts.j2", name=use_case_name)


def render_repository(use_case_name: str) -> str:
    return render("use_case/repository.ts.j2", name=use_case_name)


def render_base_repository() -> str:
    """The shared abstract repository; identical for every use case."""
    return render("use_case/base_repository.ts.j2")


def render_types(use_case_name: str) -> str:
    return render("use_case/types.ts.j2", name=use_case_name)


def render_entry_point(use_case_name: str) -> str:
    return render("use_case/index.ts.j2", name=use_case_name)


def render_manager(use_case_name: str) -> str:
    return render("use_case/manager.ts.j2", name=use_case_name)


def render_implementation(use_case_name: str) -> str:
    return render("use_case/impl.ts.j2", name=use_case_name)


def render_test(use_case_name: str) -> str:
    return render("use_case/test.ts.j2", name=use_case_name)


# Empty project


def render_package_json(
    project_name: str,
    author: str,
    description: str,
    *,
    version: str = "1.0.0",
    license: str = "ISC",
) -> str:
    """
    Render `package.json`.

    String fields are JSON-encoded, so the manifest stays parseable whatever the
    user typed and `name` round-trips to the exact project name.
    """
    return render(
        "empty_project/package.json.j2",
        project_name=project_name,
        author=author,
        description=description,
        version=version,
        license=license,
    )


def render_tsconfig() -> str:
    return render("empty_project/tsconfig.json.j2")


def render_env() -> str:
    return render("empty_project/env.ts.j2")


def render_readme(project_name: str, author: str, description: str, *, license: str = "ISC") -> str:
    return render(
        "empty_project/README.md.j2",
        project_name=project_name,
        author=author,
        description=description,
        license=license,
    )
