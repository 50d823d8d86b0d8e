"""
scaffold.py

Responsibility: Lay out directories and write rendered files for one generation.

Rules:
- Directories are created with parents; existing directories are left alone.
- Names are joined as relative parts: a leading `/` never escapes the output root.
- Files are always overwritten. There is no confirmation and no rollback, so an
  error partway through leaves a partially written tree.
- Filesystem errors propagate to the caller unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from casegen import renderer
from casegen.config import ScaffoldConfig
from casegen.prompts import ProjectInfo, UseCase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScaffoldResult:
    """Root of a generation and the files written, in write order."""

    root: Path
    files: list[Path] = field(default_factory=list)


def _relative_part(name: str) -> str:
    """Drop leading separators so a free-form name always joins under its parent."""
    return name.lstrip("/\\")


def ensure_dir(path: Path) -> None:
    if not path.is_dir():
        logger.debug("Creating directory %s", path)
    path.mkdir(parents=True, exist_ok=True)


def write_file(path: Path, content: str) -> Path:
    logger.debug("Writing %s", path)
    ensure_dir(path.parent)
    path.write_text(content, encoding="utf-8", newline="\n")
    return path


def generate_use_case_scaffold(
    use_case: UseCase,
    *,
    root: str | Path,
) -> ScaffoldResult:
    """Write the use-case scaffold under `<root>/src`."""
    name = use_case.name
    base = Path(root) / "src"
    part = _relative_part(name)
    case_dir = base / "cases" / part
    controllers = base / "controllers"
    repositories = base / "repositories"
    shared = base / "shared"

    for directory in (
        case_dir,
        case_dir / "impl",
        case_dir / "manager",
        case_dir / "types",
        case_dir / "__tests__",
        controllers,
        repositories,
        shared,
    ):
        ensure_dir(directory)

    files = [
        write_file(controllers / f"{part}Controller.ts", renderer.render_controller(name)),
        write_file(repositories / f"{part}Repository.ts", renderer.render_repository(name)),
        write_file(shared / "repository.ts", renderer.render_base_repository()),
        write_file(case_dir / "types" / "index.ts", renderer.render_types(name)),
        write_file(case_dir / "index.ts", renderer.render_entry_point(name)),
        write_file(case_dir / "manager" / "index.ts", renderer.render_manager(name)),
        write_file(case_dir / "impl" / "index.ts", renderer.render_implementation(name)),
        write_file(case_dir / "__tests__" / f"{part}.test.ts", renderer.render_test(name)),
    ]

    logger.info("Generated use case %r (%d files) under %s", name, len(files), base)
    return ScaffoldResult(root=base, files=files)


def generate_empty_project(
    info: ProjectInfo,
    *,
    root: str | Path,
    config: ScaffoldConfig | None = None,
) -> ScaffoldResult:
    """
    Write an empty TypeScript project into `<root>/<project name>`.

    The project directory may already exist; files inside it are overwritten.
    """
    cfg = config or ScaffoldConfig()
    project_dir = Path(root) / _relative_part(info.name)
    src_dir = project_dir / "src"

    ensure_dir(project_dir)
    ensure_dir(src_dir)

    files = [
        write_file(
            project_dir / "package.json",
            renderer.render_package_json(
                info.name,
                info.author,
                info.description,
                version=cfg.project_version,
                license=cfg.license,
            ),
        ),
        write_file(project_dir / "tsconfig.json", renderer.render_tsconfig()),
        write_file(src_dir / ".env.ts", renderer.render_env()),
        write_file(
            project_dir / "README.md",
            renderer.render_readme(info.name, info.author, info.description, license=cfg.license),
        ),
    ]

    logger.info("Generated empty project %r (%d files) in %s", info.name, len(files), project_dir)
    return ScaffoldResult(root=project_dir, files=files)


def use_case_summary(use_case: UseCase) -> list[str]:
    name = use_case.name
    return [
        f"Scaffold for use case '{name}' has been created successfully.",
        f"Controller created in src/controllers/{name}Controller.ts",
        f"Repository created in src/repositories/{name}Repository.ts",
        "Base Repository created in src/shared/repository.ts",
        f"Types created in src/cases/{name}/types/index.ts",
        f"Main index file created in src/cases/{name}/index.ts",
        f"Manager file created in src/cases/{name}/manager/index.ts",
        f"Implementation file created in src/cases/{name}/impl/index.ts",
        f"Test file created in src/cases/{name}/__tests__/{name}.test.ts",
    ]


def empty_project_summary(info: ProjectInfo) -> list[str]:
    return [
        f"Empty project '{info.name}' has been created successfully.",
        "Project structure:",
        f"{info.name}/",
        "├── src/",
        "│   └── .env.ts",
        "├── package.json",
        "├── tsconfig.json",
        "└── README.md",
    ]
