"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
Repositories and use cases are cheap and built fresh for each request.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from autocare.adapters.sqlalchemy_vehicle_repository import SqlAlchemyVehicleRepository
from autocare.entrypoints.http.dtos.vehicles import (
    MAX_PAGE_NUMBER,
    MAX_PAGE_SIZE,
    ResponseView,
    VehicleSearchQueryDTO,
)
from autocare.infra.db.session import get_session
from autocare.ports.vehicle_repository import VehicleRepository
from autocare.use_cases.get_vehicle_by_id import GetVehicleById
from autocare.use_cases.search_vehicle_catalog import SearchVehicleCatalog


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() is a context manager that handles
    commit on success, rollback on exception, and session cleanup.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_vehicle_repository(db: Session = Depends(get_db)) -> VehicleRepository:
    return SqlAlchemyVehicleRepository(session=db)


def get_search_vehicles_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> SearchVehicleCatalog:
    return SearchVehicleCatalog(vehicle_repository=repository)


def get_get_vehicle_by_id_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> GetVehicleById:
    return GetVehicleById(vehicle_repository=repository)


def get_vehicle_search_query(
    make: str | None = Query(default=None, description="Filter by vehicle make"),
    model: str | None = Query(default=None, description="Filter by vehicle model"),
    owner_name: str | None = Query(
        default=None, alias="ownerName", description="Filter by owner's name"
    ),
    maintainer_name: str | None = Query(
        default=None, alias="maintainerName", description="Filter by maintainer's name"
    ),
    page_number: int = Query(
        default=0, alias="pageNumber", le=MAX_PAGE_NUMBER, description="Zero-based page index"
    ),
    page_size: int = Query(
        default=10, alias="pageSize", le=MAX_PAGE_SIZE, description="Vehicles per page"
    ),
    sort_by: str = Query(default="id", alias="sortBy", description="Field to sort by"),
    sort_dir: str = Query(default="ASC", alias="sortDir", description="ASC or DESC"),
    view: ResponseView = Query(default=ResponseView.PAGE, description="page or list"),
) -> VehicleSearchQueryDTO:
    """
    Collects listing query parameters into a DTO.

    Only request-shape rules live here (integers, page number and size caps, view).
    Negative page values and sort tokens are validated by the use case.
    """
    return VehicleSearchQueryDTO(
        make=make,
        model=model,
        owner_name=owner_name,
        maintainer_name=maintainer_name,
        page_number=page_number,
        page_size=page_size,
        sort_by=sort_by,
        sort_dir=sort_dir,
        view=view,
    )
