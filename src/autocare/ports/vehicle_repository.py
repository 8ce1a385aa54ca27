from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from autocare.domain.paging import PageDescriptor
from autocare.domain.predicates import Predicate
from autocare.domain.vehicle import Vehicle


@dataclass(frozen=True)
class SearchResult:
    """Result from catalog search including pagination metadata."""

    vehicles: list[Vehicle]
    total_count: int  # Total matching vehicles across all pages


class VehicleRepository(ABC):
    """
    Port for vehicle data access.

    Contract (Preconditions):
        - predicate and page are built and validated by the caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate

    Contract (Postconditions):
        - Results are ordered by page.sort, then by id ascending, so that
          consecutive pages never skip or repeat a vehicle
        - Text comparison follows the store: the in-memory adapter compares by
          code point ("Zed" < "amy"), the SQL adapter by the database collation,
          so mixed-case make/model/name sorts may differ between adapters
        - total_count is computed before paging is applied
    """

    @abstractmethod
    def search(self, predicate: Predicate, page: PageDescriptor) -> SearchResult:
        """
        Return one page of vehicles matching the predicate.

        Args:
            predicate: Composite AND predicate - pre-built
            page: Offset, limit and sort order - pre-validated

        Returns:
            SearchResult containing the page of vehicles and the total match count
        """
        ...

    @abstractmethod
    def get_by_id(self, vehicle_id: int) -> Vehicle | None:
        """Return the vehicle with the given id, or None if it does not exist."""
        ...
