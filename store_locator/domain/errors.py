"""Domain error taxonomy.

Expected failures travel as values: repositories and use cases return one of
these instead of raising, and the API boundary maps each kind to a response.
Callers branch with ``isinstance(result, DomainError)``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class DomainError:
    message: str


@dataclass(frozen=True)
class ResourceNotFound(DomainError):
    resource_type: str = ""
    identifier: str = ""


@dataclass(frozen=True)
class ValidationError(DomainError):
    field: str | None = None
    invalid_value: Any = None


@dataclass(frozen=True)
class GeospatialError(DomainError):
    """Coordinate-semantics failure, distinct from plain range validation."""

    latitude: float | None = None
    longitude: float | None = None


@dataclass(frozen=True)
class DataAccessError(DomainError):
    cause: BaseException | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class UnexpectedError(DomainError):
    message: str = "An unexpected error occurred"
    cause: BaseException | None = field(default=None, compare=False, repr=False)


Result = Union[T, DomainError]
