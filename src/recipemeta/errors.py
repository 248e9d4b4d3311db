from typing import Any


class RecipemetaError(Exception):
    pass


class ConfigError(RecipemetaError):
    pass


class ValidationError(RecipemetaError):
    def __init__(self, field: str, value: Any, reason: str):
        super().__init__(f"{field}: {reason} (got {value!r})")
        self.field = field
        self.value = value
        self.reason = reason


class DuplicateSlugError(ValidationError):
    def __init__(self, slug: str, first: str, second: str):
        super().__init__("slug", slug, f"defined twice, by {first} and {second}")
        self.first = first
        self.second = second
