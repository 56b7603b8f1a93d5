"""Instantiation of catalog prototypes into placed, independent elements.

Every placement goes through :func:`instantiate`, which rebuilds the
prototype from a dump so the instance owns all of its nested records.
Builders wrap each placement in a :class:`BuildResult`; a failed build is
reduced by :func:`collect_results` into a fallback element plus a
:class:`Diagnostic`, so one bad element never aborts the batch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

import pydantic

from brutalist.catalog.registry import Catalog
from brutalist.config import FALLBACK_SIZE
from brutalist.errors import InstantiationError
from brutalist.models.assembly import Diagnostic
from brutalist.models.element import Element, MaterialProperties, evolve, is_finite_vector

logger = logging.getLogger(__name__)

FALLBACK_PROTOTYPE = "floatingCube"
FALLBACK_SUFFIX = "#fallback"


def _triple(value: Any) -> tuple[float, float, float]:
    if hasattr(value, "as_tuple"):
        return value.as_tuple()
    return tuple(value)


def instantiate(
    prototype: Element,
    element_id: str,
    *,
    dimensions: Sequence[float],
    position: Sequence[float],
    rotation: Sequence[float] = (0.0, 0.0, 0.0),
    scale: Sequence[float] | None = None,
    material: MaterialProperties | None = None,
) -> Element:
    """Return a placed copy of *prototype*.

    Raises
    ------
    InstantiationError
        If the resulting geometry does not validate (non-positive or
        non-finite dimensions, non-finite transform, empty id).
    """
    geometry = {
        "dimensions": _triple(dimensions),
        "position": _triple(position),
        "rotation": _triple(rotation),
        "scale": _triple(scale if scale is not None else prototype.geometry.scale),
    }
    updates: dict[str, Any] = {"id": element_id, "geometry": geometry}
    if material is not None:
        updates["material"] = material
    try:
        return evolve(prototype, **updates)
    except pydantic.ValidationError as exc:
        first = exc.errors()[0]
        where = ".".join(str(part) for part in first["loc"])
        raise InstantiationError(element_id, f"{where}: {first['msg']}") from exc


@dataclass(frozen=True)
class BuildResult:
    """Outcome of one element build: the element, or the error."""

    element_id: str
    position: tuple[float, ...]
    element: Element | None = None
    error: InstantiationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def try_instantiate(prototype: Element, element_id: str, **kwargs: Any) -> BuildResult:
    """Like :func:`instantiate` but returns a :class:`BuildResult`."""
    position = tuple(kwargs.get("position", (0.0, 0.0, 0.0)))
    try:
        element = instantiate(prototype, element_id, **kwargs)
    except InstantiationError as exc:
        return BuildResult(element_id=element_id, position=position, error=exc)
    return BuildResult(element_id=element_id, position=position, element=element)


def failed(element_id: str, reason: str, position: Sequence[float] = (0.0, 0.0, 0.0)) -> BuildResult:
    """A :class:`BuildResult` for a build that failed before instantiation."""
    return BuildResult(
        element_id=element_id,
        position=tuple(position),
        error=InstantiationError(element_id, reason),
    )


def fallback_element(
    catalog: Catalog,
    element_id: str,
    position: Sequence[float],
    origin: Sequence[float] = (0.0, 0.0, 0.0),
) -> Element:
    """Unit floating cube standing in for *element_id*.

    Placed at *position* when it is usable, otherwise at *origin*.
    """
    where = tuple(position)
    if len(where) != 3 or not is_finite_vector(where):
        where = tuple(origin)
    return instantiate(
        catalog.get("modules", FALLBACK_PROTOTYPE),
        f"{element_id}{FALLBACK_SUFFIX}",
        dimensions=(FALLBACK_SIZE, FALLBACK_SIZE, FALLBACK_SIZE),
        position=where,
    )


def collect_results(
    results: Iterable[BuildResult],
    catalog: Catalog,
    origin: Sequence[float] = (0.0, 0.0, 0.0),
) -> tuple[list[Element], list[Diagnostic]]:
    """Reduce build results into elements plus diagnostics.

    Successes are kept in order; each failure is replaced in place by a
    fallback element and recorded as a warning.
    """
    elements: list[Element] = []
    diagnostics: list[Diagnostic] = []
    for result in results:
        if result.ok:
            elements.append(result.element)
            continue
        logger.warning("Substituting fallback for %s: %s", result.element_id, result.error.reason)
        diagnostics.append(
            Diagnostic(element_id=result.element_id, severity="warning", message=str(result.error))
        )
        elements.append(fallback_element(catalog, result.element_id, result.position, origin))
    return elements, diagnostics
