from __future__ import annotations

import logging
from dataclasses import dataclass, field

from autocare.domain.errors import DomainError, ValidationError
from autocare.domain.paging import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE, build_page_request
from autocare.domain.predicates import compose_predicate
from autocare.domain.result import Err, Ok, Result
from autocare.domain.sorting import DEFAULT_SORT_DIRECTION, DEFAULT_SORT_FIELD, validate_sort
from autocare.domain.vehicle import VehicleFilters, VehiclePage
from autocare.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchVehicleCatalogRequest:
    """Raw (unvalidated) listing parameters as received from the caller."""

    filters: VehicleFilters = field(default_factory=VehicleFilters)
    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE
    sort_field: str = DEFAULT_SORT_FIELD.value
    sort_direction: str = DEFAULT_SORT_DIRECTION.value


class SearchVehicleCatalog:
    """
    Vehicle catalog listing with filters, sorting and pagination.

    Sort and page inputs are validated before the repository is touched;
    the first validation failure is returned as Err and nothing else runs.
    Filters cannot fail: blank values simply do not constrain the result.
    """

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: SearchVehicleCatalogRequest) -> Result[VehiclePage, DomainError]:
        """
        Execute catalog search.

        Args:
            request: Filters, pagination and sort parameters

        Returns:
            Ok(VehiclePage) with the requested slice and the total match count,
            or Err(ValidationError) for an invalid sort or page parameter
        """
        try:
            sort = validate_sort(request.sort_field, request.sort_direction)
            page = build_page_request(request.page_number, request.page_size, sort)
        except ValidationError as exc:
            logger.info(
                "Rejected vehicle search",
                extra={"error_code": exc.error_code, "context": exc.context},
            )
            return Err(exc)

        predicate = compose_predicate(request.filters)

        result = self._repository.search(predicate=predicate, page=page)

        return Ok(
            VehiclePage(
                items=result.vehicles,
                total_count=result.total_count,
                page_number=page.page_number,
                page_size=page.page_size,
            )
        )
