from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from operator import attrgetter
from types import MappingProxyType
from typing import Any, Callable, Mapping

from autocare.domain.errors import ValidationError
from autocare.domain.vehicle import Vehicle


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class InvalidSortFieldError(ValidationError):
    """Raised when the requested sort field is not in the allow-list."""

    error_code: str = "INVALID_SORT_FIELD"

    def __init__(self, value: str, allowed_values: list[str]) -> None:
        super().__init__(
            f"Invalid sort field '{value}'. "
            f"Allowed values are: [{', '.join(allowed_values)}].",
            parameter="sortBy",
            value=value,
            allowed_values=allowed_values,
        )


class InvalidSortDirectionError(ValidationError):
    """Raised when the requested sort direction is neither ASC nor DESC."""

    error_code: str = "INVALID_SORT_DIRECTION"

    def __init__(self, value: str, allowed_values: list[str]) -> None:
        super().__init__(
            f"Invalid sort direction '{value}'. "
            f"Allowed values are: [{', '.join(allowed_values)}].",
            parameter="sortDir",
            value=value,
            allowed_values=allowed_values,
        )


class SortField(str, Enum):
    ID = "id"
    MAKE = "make"
    MODEL = "model"
    OWNER_NAME = "ownerName"
    MAINTAINER_NAME = "maintainerName"


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


# Every allowed sort key has exactly one resolution path
SORT_ATTRIBUTES: Mapping[SortField, Callable[[Vehicle], Any]] = MappingProxyType(
    {
        SortField.ID: attrgetter("id"),
        SortField.MAKE: attrgetter("make"),
        SortField.MODEL: attrgetter("model"),
        SortField.OWNER_NAME: attrgetter("owner_name"),
        SortField.MAINTAINER_NAME: attrgetter("maintainer_name"),
    }
)

DEFAULT_SORT_FIELD = SortField.ID
DEFAULT_SORT_DIRECTION = SortDirection.ASC


@dataclass(frozen=True, slots=True)
class SortDescriptor:
    field: SortField = DEFAULT_SORT_FIELD
    direction: SortDirection = DEFAULT_SORT_DIRECTION

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC


def allowed_sort_fields() -> list[str]:
    return [member.value for member in SortField]


def allowed_sort_directions() -> list[str]:
    return [member.value for member in SortDirection]


def _parse_field(field_name: str) -> SortField | None:
    # Exact, case-sensitive match against the canonical spelling
    for member in SortField:
        if member.value == field_name:
            return member
    return None


def _parse_direction(direction_token: str) -> SortDirection | None:
    normalized = direction_token.upper()
    for member in SortDirection:
        if member.value == normalized:
            return member
    return None


def validate_sort(field_name: str, direction_token: str) -> SortDescriptor:
    """
    Validate a requested sort field and direction.

    Both inputs are checked; if both are invalid, the field error is reported.

    Raises:
        InvalidSortFieldError: If field_name is not an allowed sort field
        InvalidSortDirectionError: If direction_token is not ASC/DESC
    """
    sort_field = _parse_field(field_name)
    direction = _parse_direction(direction_token)

    if sort_field is None:
        raise InvalidSortFieldError(field_name, allowed_sort_fields())
    if direction is None:
        raise InvalidSortDirectionError(direction_token, allowed_sort_directions())

    return SortDescriptor(field=sort_field, direction=direction)


def sort_key(sort: SortDescriptor) -> Callable[[Vehicle], tuple[bool, Any]]:
    """
    Key function for in-memory ordering on the requested field.

    Missing values (vehicle without owner/maintainer) sort after present ones,
    which becomes "first" once the order is reversed for DESC.
    """
    resolve = SORT_ATTRIBUTES[sort.field]

    def key(vehicle: Vehicle) -> tuple[bool, Any]:
        value = resolve(vehicle)
        return (value is None, value if value is not None else "")

    return key


def order_vehicles(vehicles: list[Vehicle], sort: SortDescriptor) -> list[Vehicle]:
    """Order vehicles by the sort descriptor with id ascending as the final tie-break."""
    by_id = sorted(vehicles, key=attrgetter("id"))
    # sorted() is stable, including with reverse=True, so ties keep id order
    return sorted(by_id, key=sort_key(sort), reverse=sort.descending)
