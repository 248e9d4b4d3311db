from .models import (
    DIFFICULTIES,
    Difficulty,
    RecipeDescriptor,
    RecipeFilters,
    make_recipe,
)

__all__ = [
    "DIFFICULTIES",
    "Difficulty",
    "RecipeDescriptor",
    "RecipeFilters",
    "make_recipe",
]
