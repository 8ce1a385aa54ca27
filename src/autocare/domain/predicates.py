"""Composable search predicates over vehicles.

A predicate is a conjunction of case-insensitive substring terms. Terms are
kept in a frozenset, so ``&`` is set union: commutative, associative, and
``MATCH_ALL`` (the empty conjunction) is its identity.

Filter keys resolve to vehicle attributes through the closed ``FILTER_ATTRIBUTES``
table. Storage adapters translate the same keys with their own fixed tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from operator import attrgetter
from types import MappingProxyType
from typing import Callable, Mapping

from autocare.domain.vehicle import Vehicle, VehicleFilters, has_text


class FilterField(str, Enum):
    MAKE = "make"
    MODEL = "model"
    OWNER_NAME = "ownerName"
    MAINTAINER_NAME = "maintainerName"


FILTER_ATTRIBUTES: Mapping[FilterField, Callable[[Vehicle], str | None]] = MappingProxyType(
    {
        FilterField.MAKE: attrgetter("make"),
        FilterField.MODEL: attrgetter("model"),
        FilterField.OWNER_NAME: attrgetter("owner_name"),  # Customer.name
        FilterField.MAINTAINER_NAME: attrgetter("maintainer_name"),  # Maintainer.name
    }
)


@dataclass(frozen=True, slots=True, order=True)
class ContainsTerm:
    """Case-insensitive "attribute contains needle" test. Needle is stored lowercased."""

    field: FilterField
    needle: str

    @classmethod
    def of(cls, field: FilterField, text: str) -> ContainsTerm:
        return cls(field=field, needle=text.lower())

    def matches(self, vehicle: Vehicle) -> bool:
        value = FILTER_ATTRIBUTES[self.field](vehicle)
        if value is None:
            return False
        return self.needle in value.lower()


@dataclass(frozen=True, slots=True)
class Predicate:
    terms: frozenset[ContainsTerm] = frozenset()

    def __and__(self, other: Predicate) -> Predicate:
        return Predicate(self.terms | other.terms)

    def matches(self, vehicle: Vehicle) -> bool:
        return all(term.matches(vehicle) for term in self.terms)


MATCH_ALL = Predicate()


def contains(field: FilterField, value: str | None) -> Predicate:
    """Predicate for a single filter; blank values match everything."""
    if value is None or not has_text(value):
        return MATCH_ALL
    return Predicate(frozenset({ContainsTerm.of(field, value)}))


def compose_predicate(filters: VehicleFilters) -> Predicate:
    """Build the composite AND predicate for a set of optional filters."""
    return (
        contains(FilterField.MAKE, filters.make)
        & contains(FilterField.MODEL, filters.model)
        & contains(FilterField.OWNER_NAME, filters.owner_name)
        & contains(FilterField.MAINTAINER_NAME, filters.maintainer_name)
    )
