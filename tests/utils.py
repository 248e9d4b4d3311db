from __future__ import annotations

from pathlib import Path


def write_global_config(home: Path, content: str) -> Path:
    cfg_dir = home / ".config" / "recipemeta"
    cfg_dir.mkdir(parents=True, exist_ok=True)
    path = cfg_dir / "config.toml"
    path.write_text(content, encoding="utf-8")
    return path


def write_project_config(project: Path, content: str) -> Path:
    project.mkdir(parents=True, exist_ok=True)
    path = project / "recipemeta.toml"
    path.write_text(content, encoding="utf-8")
    return path


def write_recipe_module(root: Path, name: str, body: str) -> Path:
    path = root / f"{name}.py"
    path.write_text(
        "from datetime import date\n\nfrom recipemeta.domain import make_recipe\n\n" + body,
        encoding="utf-8",
    )
    return path
