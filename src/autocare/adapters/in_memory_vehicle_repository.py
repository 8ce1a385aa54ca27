from __future__ import annotations

from autocare.domain.paging import PageDescriptor
from autocare.domain.predicates import Predicate
from autocare.domain.sorting import order_vehicles
from autocare.domain.vehicle import Vehicle
from autocare.ports.vehicle_repository import SearchResult, VehicleRepository


class InMemoryVehicleRepository(VehicleRepository):
    """
    Canonical contract implementation for tests.

    - Applies the composed predicate (AND semantics)
    - Orders by the requested sort, then by id
    - Applies paging AFTER filtering and ordering
    - Returns total_count of matching vehicles before paging
    """

    def __init__(self, vehicles: list[Vehicle]) -> None:
        self._vehicles = list(vehicles)

    def search(self, predicate: Predicate, page: PageDescriptor) -> SearchResult:
        # Trust that UseCase has validated inputs (contract programming)
        matches = [vehicle for vehicle in self._vehicles if predicate.matches(vehicle)]
        total_count = len(matches)  # Count BEFORE paging

        ordered = order_vehicles(matches, page.sort)

        start = page.offset
        end = page.offset + page.limit

        return SearchResult(vehicles=ordered[start:end], total_count=total_count)

    def get_by_id(self, vehicle_id: int) -> Vehicle | None:
        for vehicle in self._vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        return None
