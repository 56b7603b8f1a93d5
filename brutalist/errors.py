"""Exception taxonomy for the brutalist generator.

``ValidationError`` is raised to the caller.  ``InstantiationError`` is
caught by the builders and degraded into a fallback element.
``IdCollisionError`` is fatal for the catalog and advisory for assemblies.
"""

from __future__ import annotations


class BrutalistError(Exception):
    """Base class for all errors raised by this package."""


class ValidationError(BrutalistError):
    """Generation parameters or controls are outside their domain.

    Deliberately not a ``ValueError`` so that it passes through pydantic
    validators untouched.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class InstantiationError(BrutalistError):
    """A single element could not be built from its prototype."""

    def __init__(self, element_id: str, reason: str) -> None:
        self.element_id = element_id
        self.reason = reason
        super().__init__(f"Cannot instantiate {element_id!r}: {reason}")


class IdCollisionError(BrutalistError, KeyError):
    """Two elements (or prototypes) share an id."""

    def __init__(self, duplicates: list[str]) -> None:
        self.duplicates = sorted(set(duplicates))
        super().__init__(f"Duplicate ids: {', '.join(self.duplicates)}")

    def __str__(self) -> str:
        return self.args[0]


class CatalogError(BrutalistError):
    """The asset catalog is internally inconsistent."""
