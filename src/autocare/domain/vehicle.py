from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True, slots=True)
class Customer:
    id: int
    name: str


@dataclass(frozen=True, slots=True)
class Maintainer:
    id: int
    name: str


@dataclass(frozen=True, slots=True)
class ServiceRecord:
    id: int
    service_date: date
    description: str


@dataclass(frozen=True, slots=True)
class Vehicle:
    id: int
    make: str
    model: str
    owner: Customer | None = None
    maintainer: Maintainer | None = None
    service_history: tuple[ServiceRecord, ...] = field(default_factory=tuple)

    @property
    def owner_name(self) -> str | None:
        return self.owner.name if self.owner is not None else None

    @property
    def maintainer_name(self) -> str | None:
        return self.maintainer.name if self.maintainer is not None else None


def has_text(value: str | None) -> bool:
    """True when value holds at least one non-whitespace character."""
    return value is not None and value.strip() != ""


@dataclass(frozen=True, slots=True)
class VehicleFilters:
    """
    Optional search filters for the vehicle catalog.

    Blank values (None, "" or whitespace only) mean "no constraint";
    they never narrow the result set.
    """

    make: str | None = None
    model: str | None = None
    owner_name: str | None = None
    maintainer_name: str | None = None


@dataclass(frozen=True, slots=True)
class VehiclePage:
    """One slice of an ordered, filtered result set plus its metadata."""

    items: list[Vehicle]
    total_count: int
    page_number: int
    page_size: int

    @property
    def total_pages(self) -> int:
        # Ceiling division; page_size is validated to be >= 1
        return -(-self.total_count // self.page_size)
