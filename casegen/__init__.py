"""
casegen package

This package implements casegen, an interactive scaffolding CLI for
TypeScript use cases and empty projects.

Key responsibilities are split across modules:
- `prompts.py`: line-based prompt sequence and the answer models it produces
- `renderer.py`: deterministic Jinja2 rendering, one function per generated file kind
- `scaffold.py`: directory creation, file writes and the printed summaries
- `config.py`: optional `casegen.yaml` configuration with environment overrides
- `cli.py`: CLI entrypoint and orchestration (flags -> prompt -> render -> write)
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
