from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Optional

from ..errors import ValidationError
from ..validate import coerce_date, require_text, validate_choice, validate_slug, validate_url


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


DIFFICULTIES = tuple(level.value for level in Difficulty)
FILTER_KEYS = ("difficulty",)


@dataclass(frozen=True)
class RecipeFilters:
    difficulty: Optional[Difficulty] = None

    def __post_init__(self) -> None:
        if self.difficulty is not None:
            value = validate_choice("difficulty", self.difficulty, DIFFICULTIES)
            object.__setattr__(self, "difficulty", Difficulty(value))

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any] | RecipeFilters]) -> RecipeFilters:
        if data is None:
            return cls()
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise ValidationError("filters", data, "must be a mapping")
        for key in data:
            if key not in FILTER_KEYS:
                raise ValidationError("filters", key, f"unknown filter (expected one of {', '.join(FILTER_KEYS)})")
        return cls(difficulty=data.get("difficulty"))

    def as_dict(self) -> dict[str, str]:
        out: dict[str, str] = {}
        if self.difficulty is not None:
            out["difficulty"] = self.difficulty.value
        return out


@dataclass(frozen=True)
class RecipeDescriptor:
    """Catalog metadata for one tutorial recipe.

    Every field is checked on construction and a bad value raises
    ``ValidationError`` naming the field. ``filters`` may be given as a plain
    mapping; it is stored as a ``RecipeFilters``.
    """

    slug: str
    title: str
    created_at: date
    author: str
    playground_link: Optional[str]
    excerpt: str
    filters: RecipeFilters = field(default_factory=RecipeFilters)

    def __post_init__(self) -> None:
        validate_slug(self.slug)
        require_text("title", self.title)
        object.__setattr__(self, "created_at", coerce_date("created_at", self.created_at))
        require_text("author", self.author)
        if self.playground_link is not None:
            validate_url("playground_link", self.playground_link)
        require_text("excerpt", self.excerpt)
        if not isinstance(self.filters, RecipeFilters):
            object.__setattr__(self, "filters", RecipeFilters.from_mapping(self.filters))


def make_recipe(
    slug: str,
    title: str,
    created_at: date | str,
    author: str,
    playground_link: Optional[str],
    excerpt: str,
    filters: Optional[Mapping[str, Any] | RecipeFilters] = None,
) -> RecipeDescriptor:
    return RecipeDescriptor(
        slug=slug,
        title=title,
        created_at=created_at,
        author=author,
        playground_link=playground_link,
        excerpt=excerpt,
        filters=RecipeFilters.from_mapping(filters),
    )
