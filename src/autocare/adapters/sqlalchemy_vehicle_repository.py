"""SQLAlchemy implementation of VehicleRepository."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping

from sqlalchemy import func, select
from sqlalchemy.orm import Session, contains_eager, joinedload, selectinload

from autocare.domain.paging import PageDescriptor
from autocare.domain.predicates import FilterField, Predicate
from autocare.domain.sorting import SortField
from autocare.domain.vehicle import Customer, Maintainer, ServiceRecord, Vehicle
from autocare.infra.db.models import CustomerRow, MaintainerRow, ServiceRecordRow, VehicleRow
from autocare.ports.vehicle_repository import SearchResult, VehicleRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import ColumnElement, Select


# Fixed resolution paths from public keys to columns. Owner and maintainer
# names live on the joined customers / maintainers tables.
FILTER_COLUMNS: Mapping[FilterField, Any] = MappingProxyType(
    {
        FilterField.MAKE: VehicleRow.make,
        FilterField.MODEL: VehicleRow.model,
        FilterField.OWNER_NAME: CustomerRow.name,
        FilterField.MAINTAINER_NAME: MaintainerRow.name,
    }
)

SORT_COLUMNS: Mapping[SortField, Any] = MappingProxyType(
    {
        SortField.ID: VehicleRow.id,
        SortField.MAKE: VehicleRow.make,
        SortField.MODEL: VehicleRow.model,
        SortField.OWNER_NAME: CustomerRow.name,
        SortField.MAINTAINER_NAME: MaintainerRow.name,
    }
)


class SqlAlchemyVehicleRepository(VehicleRepository):
    """
    SQLAlchemy implementation of VehicleRepository.

    - Outer-joins customers and maintainers so relation filters and sorts resolve
    - Translates predicate terms to case-insensitive LIKE clauses (wildcards escaped)
    - Returns total_count via COUNT(*) query
    - Orders by the requested column, then by vehicle id
    - Converts rows (infrastructure) to Vehicle (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def search(self, predicate: Predicate, page: PageDescriptor) -> SearchResult:
        """
        Search vehicles with a composed predicate and a page descriptor.

        Executes:
        1. COUNT(*) to get total matching vehicles (before paging)
        2. SELECT with ORDER BY / OFFSET / LIMIT to get the page

        Note:
            Assumes inputs are validated by UseCase (contract programming).
        """
        query = self._build_query(predicate)

        count_query = select(func.count()).select_from(query.subquery())
        total_count = self._session.execute(count_query).scalar() or 0

        query = (
            query.options(
                contains_eager(VehicleRow.owner),
                contains_eager(VehicleRow.maintainer),
                selectinload(VehicleRow.service_records),
            )
            .order_by(*self._order_by(page))
            .offset(page.offset)
            .limit(page.limit)
        )

        rows = self._session.execute(query).scalars().all()
        vehicles = [self._to_domain(row) for row in rows]

        return SearchResult(vehicles=vehicles, total_count=total_count)

    def get_by_id(self, vehicle_id: int) -> Vehicle | None:
        query = (
            select(VehicleRow)
            .where(VehicleRow.id == vehicle_id)
            .options(
                joinedload(VehicleRow.owner),
                joinedload(VehicleRow.maintainer),
                selectinload(VehicleRow.service_records),
            )
        )
        row = self._session.execute(query).unique().scalar_one_or_none()
        return self._to_domain(row) if row else None

    def _build_query(self, predicate: Predicate) -> Select[tuple[VehicleRow]]:
        query = (
            select(VehicleRow)
            .outerjoin(VehicleRow.owner)
            .outerjoin(VehicleRow.maintainer)
        )
        # Sorted only for stable SQL text; AND order does not change the result
        for term in sorted(predicate.terms):
            column = FILTER_COLUMNS[term.field]
            query = query.where(func.lower(column).contains(term.needle, autoescape=True))
        return query

    def _order_by(self, page: PageDescriptor) -> list[ColumnElement[Any]]:
        column = SORT_COLUMNS[page.sort.field]
        if page.sort.descending:
            primary = column.desc().nulls_first()
        else:
            primary = column.asc().nulls_last()
        return [primary, VehicleRow.id.asc()]

    def _to_domain(self, row: VehicleRow) -> Vehicle:
        return Vehicle(
            id=row.id,
            make=row.make,
            model=row.model,
            owner=Customer(id=row.owner.id, name=row.owner.name) if row.owner else None,
            maintainer=(
                Maintainer(id=row.maintainer.id, name=row.maintainer.name)
                if row.maintainer
                else None
            ),
            service_history=tuple(self._to_service_record(r) for r in row.service_records),
        )

    @staticmethod
    def _to_service_record(row: ServiceRecordRow) -> ServiceRecord:
        return ServiceRecord(id=row.id, service_date=row.service_date, description=row.description)
