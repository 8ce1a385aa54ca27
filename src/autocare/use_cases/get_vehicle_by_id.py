"""Get vehicle by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from autocare.domain.errors import DomainError, NotFoundError
from autocare.domain.result import Err, Ok, Result
from autocare.domain.vehicle import Vehicle
from autocare.ports.vehicle_repository import VehicleRepository


@dataclass(frozen=True, slots=True)
class GetVehicleByIdRequest:
    """Request to get a vehicle by ID."""

    vehicle_id: int


class GetVehicleById:
    """
    Use case for retrieving a single vehicle by ID.

    Responsibilities:
    - Delegate to repository for data access
    - Return Err(NotFoundError) naming the id if the vehicle doesn't exist
    """

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: GetVehicleByIdRequest) -> Result[Vehicle, DomainError]:
        vehicle = self._repository.get_by_id(request.vehicle_id)

        if vehicle is None:
            return Err(NotFoundError(resource="Vehicle", identifier=request.vehicle_id))

        return Ok(vehicle)
