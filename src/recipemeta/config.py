from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os
import tomllib
from typing import Any, Optional

from .errors import ConfigError
from .serialize import OUTPUT_FORMATS


DEFAULT_MODULES = ("recipemeta.recipes",)
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class EffectiveConfig:
    modules: tuple[str, ...]
    output_format: str
    log_level: str
    default_project: Optional[str]
    project_dir: str


def _config_root() -> Path:
    return Path(os.path.expanduser("~/.config/recipemeta"))


def load_global_config() -> dict[str, Any]:
    path = _config_root() / "config.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def load_project_config(project_dir: str) -> dict[str, Any]:
    path = Path(project_dir) / "recipemeta.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"Failed to read config: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config: {path}") from exc


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_config(cli: dict[str, Any], project: dict[str, Any], global_cfg: dict[str, Any]) -> dict[str, Any]:
    merged = _deep_merge(global_cfg, project)
    return _deep_merge(merged, cli)


def resolve_config(cli_args: dict[str, Any]) -> EffectiveConfig:
    global_cfg = load_global_config()
    project_dir = cli_args.get("project")
    if not project_dir:
        project_dir = global_cfg.get("default_project") or os.getcwd()

    project_cfg = load_project_config(project_dir)
    merged = merge_config(_cli_to_dict(cli_args), project_cfg, global_cfg)

    default_project = merged.get("default_project")
    return EffectiveConfig(
        modules=_normalize_modules(merged.get("modules", DEFAULT_MODULES)),
        output_format=_normalize_output_format(merged.get("output_format", "text")),
        log_level=_normalize_log_level(merged.get("log_level", "WARNING")),
        default_project=str(default_project) if default_project else None,
        project_dir=str(project_dir),
    )


def _cli_to_dict(cli_args: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key in ("modules", "output_format", "log_level"):
        if cli_args.get(key) is not None:
            out[key] = cli_args[key]
    return out


def config_to_toml(cfg: EffectiveConfig) -> str:
    modules = ", ".join(repr(name) for name in cfg.modules)
    lines = [f"modules = [{modules}]"]
    lines.append(f"output_format = {cfg.output_format!r}")
    lines.append(f"log_level = {cfg.log_level!r}")
    if cfg.default_project:
        lines.append(f"default_project = {cfg.default_project!r}")
    return "\n".join(lines) + "\n"


def _normalize_modules(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        raise ConfigError(f"modules must be a list of module names, got {value!r}")
    names = tuple(str(name).strip() for name in value)
    if not names or not all(names):
        raise ConfigError("modules must name at least one module and no empty names")
    return names


def _normalize_output_format(value: Any) -> str:
    text = str(value or "").strip().lower()
    if text in OUTPUT_FORMATS:
        return text
    raise ConfigError(f"Unsupported output format: {value!r} (expected one of {', '.join(OUTPUT_FORMATS)})")


def _normalize_log_level(value: Any) -> str:
    text = str(value or "").strip().upper()
    if text in LOG_LEVELS:
        return text
    raise ConfigError(f"Unsupported log level: {value!r} (expected one of {', '.join(LOG_LEVELS)})")
