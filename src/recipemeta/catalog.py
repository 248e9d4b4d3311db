from __future__ import annotations

from collections.abc import Iterable, Mapping
import importlib
import logging
from types import MappingProxyType, ModuleType

from .domain import RecipeDescriptor
from .errors import ConfigError, DuplicateSlugError


logger = logging.getLogger(__name__)


def build_catalog(descriptors: Iterable[RecipeDescriptor]) -> Mapping[str, RecipeDescriptor]:
    return _freeze((f"entry {index}", descriptor) for index, descriptor in enumerate(descriptors))


def load_catalog(modules: Iterable[str]) -> Mapping[str, RecipeDescriptor]:
    """Collect the descriptors exported by ``modules`` into a read-only mapping.

    Importing a module runs its descriptor constructors, so a malformed
    definition surfaces here as ``ValidationError``.
    """
    entries: list[tuple[str, RecipeDescriptor]] = []
    for name in modules:
        module = _import_module(name)
        logger.debug("scanning %s for recipes", name)
        for attr, descriptor in exported_descriptors(module):
            entries.append((f"{name}.{attr}", descriptor))
    return _freeze(entries)


def exported_descriptors(module: ModuleType) -> list[tuple[str, RecipeDescriptor]]:
    found: list[tuple[str, RecipeDescriptor]] = []
    for attr, value in sorted(vars(module).items()):
        if attr.startswith("_"):
            continue
        if isinstance(value, RecipeDescriptor):
            found.append((attr, value))
    return found


def _import_module(name: str) -> ModuleType:
    try:
        return importlib.import_module(name)
    except ImportError as exc:
        raise ConfigError(f"Cannot import recipe module {name!r}: {exc}") from exc


def _freeze(entries: Iterable[tuple[str, RecipeDescriptor]]) -> Mapping[str, RecipeDescriptor]:
    catalog: dict[str, RecipeDescriptor] = {}
    sources: dict[str, str] = {}
    for source, descriptor in entries:
        existing = catalog.get(descriptor.slug)
        if existing is not None:
            # The same definition re-exported under another name is one entry.
            if existing == descriptor:
                continue
            raise DuplicateSlugError(descriptor.slug, sources[descriptor.slug], source)
        catalog[descriptor.slug] = descriptor
        sources[descriptor.slug] = source
        logger.debug("registered %s from %s", descriptor.slug, source)
    return MappingProxyType(catalog)
