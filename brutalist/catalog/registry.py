"""Catalog: the read-only, process-wide registry of element prototypes.

The catalog is built once (:func:`get_catalog`) and never mutated.
Construction checks two invariants eagerly:

* prototype ids are unique within and across the three mappings;
* every id in a prototype's ``allowed_connections`` names a connector.
"""

from __future__ import annotations

import functools
import logging
from collections import Counter
from types import MappingProxyType
from typing import Iterator, Mapping

from brutalist.catalog.assets import build_connectors, build_decorative, build_modules
from brutalist.catalog.materials import MATERIALS, PRIMARY_MATERIAL
from brutalist.errors import CatalogError, IdCollisionError
from brutalist.models.element import Connector, Decorative, Element, MaterialProperties, Module

logger = logging.getLogger(__name__)

MODULES = "modules"
CONNECTORS = "connectors"
DECORATIVE = "decorative"
CATEGORIES = (MODULES, CONNECTORS, DECORATIVE)


class Catalog:
    """Three id -> prototype mappings with lookup helpers."""

    def __init__(
        self,
        modules: Mapping[str, Module],
        connectors: Mapping[str, Connector],
        decorative: Mapping[str, Decorative],
        materials: Mapping[str, MaterialProperties] | None = None,
        primary_material: str = PRIMARY_MATERIAL,
    ) -> None:
        self._mappings: dict[str, Mapping[str, Element]] = {
            MODULES: MappingProxyType(dict(modules)),
            CONNECTORS: MappingProxyType(dict(connectors)),
            DECORATIVE: MappingProxyType(dict(decorative)),
        }
        self._materials = MappingProxyType(dict(materials if materials is not None else MATERIALS))
        if primary_material not in self._materials:
            raise CatalogError(f"Unknown primary material: {primary_material}")
        self._primary_material = primary_material
        self._check_unique_ids()
        self._check_connections()

    # -- invariants -----------------------------------------------------------

    def _check_unique_ids(self) -> None:
        counts: Counter[str] = Counter()
        for category, mapping in self._mappings.items():
            for key, prototype in mapping.items():
                if key != prototype.id:
                    raise CatalogError(
                        f"{category} key {key!r} does not match prototype id {prototype.id!r}"
                    )
                counts[key] += 1
        duplicates = [key for key, n in counts.items() if n > 1]
        if duplicates:
            raise IdCollisionError(duplicates)

    def _check_connections(self) -> None:
        connectors = self._mappings[CONNECTORS]
        for prototype in self:
            for target in prototype.allowed_connections or ():
                if target not in connectors:
                    raise CatalogError(
                        f"Prototype {prototype.id!r} allows unknown connector {target!r}"
                    )

    # -- lookup ---------------------------------------------------------------

    @property
    def modules(self) -> Mapping[str, Module]:
        return self._mappings[MODULES]

    @property
    def connectors(self) -> Mapping[str, Connector]:
        return self._mappings[CONNECTORS]

    @property
    def decorative(self) -> Mapping[str, Decorative]:
        return self._mappings[DECORATIVE]

    def get(self, category: str, prototype_id: str) -> Element:
        """Return the prototype *prototype_id* from *category*.

        Raises ``KeyError`` for an unknown category or id.
        """
        mapping = self._mappings.get(category)
        if mapping is None:
            raise KeyError(f"Unknown catalog category {category!r}; expected one of {CATEGORIES}")
        try:
            return mapping[prototype_id]
        except KeyError:
            raise KeyError(f"No {category} prototype named {prototype_id!r}") from None

    def find(self, prototype_id: str) -> Element:
        """Look *prototype_id* up in every category."""
        for mapping in self._mappings.values():
            if prototype_id in mapping:
                return mapping[prototype_id]
        raise KeyError(f"No prototype named {prototype_id!r}")

    def material(self, name: str) -> MaterialProperties:
        """Return the palette finish *name*; ``KeyError`` if there is none."""
        try:
            return self._materials[name]
        except KeyError:
            raise KeyError(f"No material named {name!r}") from None

    @property
    def primary_material(self) -> MaterialProperties:
        """The reference finish rough surfaces are replaced with."""
        return self.material(self._primary_material)

    def ids(self) -> list[str]:
        return [key for mapping in self._mappings.values() for key in mapping]

    def __contains__(self, prototype_id: object) -> bool:
        return any(prototype_id in mapping for mapping in self._mappings.values())

    def __iter__(self) -> Iterator[Element]:
        for mapping in self._mappings.values():
            yield from mapping.values()

    def __len__(self) -> int:
        return sum(len(mapping) for mapping in self._mappings.values())


@functools.lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """Build the default catalog once per process."""
    catalog = Catalog(
        modules=build_modules(),
        connectors=build_connectors(),
        decorative=build_decorative(),
    )
    logger.debug("Loaded catalog with %d prototypes", len(catalog))
    return catalog
