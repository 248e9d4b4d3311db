from __future__ import annotations

import json
from typing import Any

import yaml

from .domain import RecipeDescriptor
from .errors import ConfigError


OUTPUT_FORMATS = ("text", "json", "yaml")


def to_mapping(descriptor: RecipeDescriptor) -> dict[str, Any]:
    """Return the fields under the names a hosting site reads."""
    return {
        "slug": descriptor.slug,
        "title": descriptor.title,
        "createdAt": descriptor.created_at.isoformat(),
        "author": descriptor.author,
        "playgroundLink": descriptor.playground_link,
        "excerpt": descriptor.excerpt,
        "filters": descriptor.filters.as_dict(),
    }


def render(descriptor: RecipeDescriptor, output_format: str) -> str:
    data = to_mapping(descriptor)
    if output_format == "json":
        return json.dumps(data, indent=2)
    if output_format == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True).rstrip("\n")
    if output_format == "text":
        return "\n".join(_text_lines(data))
    raise ConfigError(f"Unsupported output format: {output_format}")


def _text_lines(data: dict[str, Any]) -> list[str]:
    lines: list[str] = []
    for key, value in data.items():
        if isinstance(value, dict):
            for sub_key, sub_value in value.items():
                lines.append(f"{key}.{sub_key}: {sub_value}")
        elif value is None:
            lines.append(f"{key}: -")
        else:
            lines.append(f"{key}: {value}")
    return lines
