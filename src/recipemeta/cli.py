from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable

from .catalog import load_catalog
from .config import EffectiveConfig, config_to_toml, resolve_config
from .errors import ConfigError, DuplicateSlugError, RecipemetaError, ValidationError
from .serialize import OUTPUT_FORMATS, render


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help(sys.stderr)
        return 1

    handlers: dict[str, Callable[[argparse.Namespace], int]] = {
        "check": _cmd_check,
        "show": _cmd_show,
        "config": _cmd_config,
    }

    try:
        return handlers[args.command](args)
    except RecipemetaError as exc:
        print(str(exc), file=sys.stderr)
        return _exit_code(exc)


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--project")
    common.add_argument("--module", dest="modules", action="append", help="Module to scan for recipes (repeatable)")
    common.add_argument("--log-level", dest="log_level")
    common.add_argument("--verbose", action="store_true")

    parser = argparse.ArgumentParser(prog="recipemeta")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("check", parents=[common])

    show = sub.add_parser("show", parents=[common])
    show.add_argument("slug")
    show.add_argument("--format", dest="output_format", choices=OUTPUT_FORMATS)

    sub.add_parser("config", parents=[common])

    return parser


def _cmd_check(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    catalog = load_catalog(cfg.modules)
    print(f"ok: {len(catalog)} recipe(s)")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    catalog = load_catalog(cfg.modules)
    descriptor = catalog.get(args.slug)
    if descriptor is None:
        raise ConfigError(f"Unknown recipe: {args.slug}")
    print(render(descriptor, cfg.output_format))
    return 0


def _cmd_config(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    print(config_to_toml(cfg), end="")
    return 0


def _resolve_cfg(args: argparse.Namespace) -> EffectiveConfig:
    cfg = resolve_config(vars(args).copy())
    _configure_logging(cfg, verbose=args.verbose)
    return cfg


def _configure_logging(cfg: EffectiveConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, cfg.log_level)
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    logging.getLogger().setLevel(level)


def _exit_code(exc: RecipemetaError) -> int:
    if isinstance(exc, ConfigError):
        return 2
    if isinstance(exc, DuplicateSlugError):
        return 5
    if isinstance(exc, ValidationError):
        return 4
    return 1
