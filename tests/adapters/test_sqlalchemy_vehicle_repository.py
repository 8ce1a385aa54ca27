"""
Test suite for SqlAlchemyVehicleRepository.

Runs the repository against an in-memory SQLite database built from the ORM
metadata, so query building, joins, ordering and row conversion are exercised
for real. Tests verify:
- Filters apply case-insensitive LIKE on vehicle and related columns
- LIKE wildcards in filter values are matched literally
- COUNT(*) is computed before OFFSET/LIMIT
- Ordering uses the requested column, then vehicle id
- Service history is loaded in date order
"""

from __future__ import annotations

from datetime import date
from typing import Iterator
from unittest.mock import Mock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from autocare.adapters.sqlalchemy_vehicle_repository import (
    FILTER_COLUMNS,
    SORT_COLUMNS,
    SqlAlchemyVehicleRepository,
)
from autocare.domain.paging import PageDescriptor
from autocare.domain.predicates import MATCH_ALL, FilterField, compose_predicate
from autocare.domain.sorting import SortDescriptor, SortDirection, SortField
from autocare.domain.vehicle import VehicleFilters
from autocare.entrypoints.http.dtos.vehicles import MAX_PAGE_NUMBER, MAX_PAGE_SIZE, MAX_STORAGE_INT
from autocare.infra.db.models import (
    Base,
    CustomerRow,
    MaintainerRow,
    ServiceRecordRow,
    VehicleRow,
)


@pytest.fixture()
def session() -> Iterator[Session]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)

    with Session(engine) as db:
        john = CustomerRow(id=1, name="John Doe")
        jane = CustomerRow(id=2, name="Jane Smith")
        center_a = MaintainerRow(id=1, name="Service Center A")
        center_b = MaintainerRow(id=2, name="Service Center B")
        db.add_all([john, jane, center_a, center_b])
        db.add_all(
            [
                VehicleRow(id=1, make="Toyota", model="Camry", owner=john, maintainer=center_a),
                VehicleRow(id=2, make="Honda", model="Civic", owner=jane, maintainer=center_b),
                VehicleRow(id=3, make="Toyota", model="Corolla", owner=jane, maintainer=center_a),
            ]
        )
        # Inserted out of date order on purpose
        db.add_all(
            [
                ServiceRecordRow(
                    id=2, vehicle_id=1, service_date=date(2024, 7, 2), description="Tire rotation"
                ),
                ServiceRecordRow(
                    id=1, vehicle_id=1, service_date=date(2024, 1, 15), description="Oil change"
                ),
            ]
        )
        db.commit()
        yield db

    engine.dispose()


@pytest.fixture()
def repository(session: Session) -> SqlAlchemyVehicleRepository:
    return SqlAlchemyVehicleRepository(session=session)


def _add_orphan(session: Session, vehicle_id: int, make: str, model: str = "X") -> None:
    session.add(VehicleRow(id=vehicle_id, make=make, model=model))
    session.commit()


# ==============================================================================
# Resolution tables
# ==============================================================================


def test_every_filter_and_sort_key_has_a_column() -> None:
    assert set(FILTER_COLUMNS) == set(FilterField)
    assert set(SORT_COLUMNS) == set(SortField)


# ==============================================================================
# Filtering
# ==============================================================================


def test_no_filters_returns_all_by_id(repository: SqlAlchemyVehicleRepository) -> None:
    result = repository.search(MATCH_ALL, PageDescriptor())

    assert [v.id for v in result.vehicles] == [1, 2, 3]
    assert result.total_count == 3


def test_make_and_maintainer_filter(repository: SqlAlchemyVehicleRepository) -> None:
    predicate = compose_predicate(
        VehicleFilters(make="Toyota", maintainer_name="Service Center A")
    )

    result = repository.search(predicate, PageDescriptor())

    assert [v.id for v in result.vehicles] == [1, 3]
    assert result.total_count == 2
    assert {v.maintainer_name for v in result.vehicles} == {"Service Center A"}


def test_filters_are_case_insensitive_substrings(repository: SqlAlchemyVehicleRepository) -> None:
    predicate = compose_predicate(VehicleFilters(model="ORO", owner_name="jAnE"))

    result = repository.search(predicate, PageDescriptor())

    assert [v.id for v in result.vehicles] == [3]


def test_relation_filter_excludes_vehicles_without_relation(
    session: Session, repository: SqlAlchemyVehicleRepository
) -> None:
    _add_orphan(session, 4, "Toyota")

    by_make = repository.search(compose_predicate(VehicleFilters(make="toyota")), PageDescriptor())
    by_owner = repository.search(compose_predicate(VehicleFilters(owner_name="o")), PageDescriptor())

    assert [v.id for v in by_make.vehicles] == [1, 3, 4]
    assert 4 not in [v.id for v in by_owner.vehicles]


@pytest.mark.parametrize(("needle", "expected_ids"), [("%", [4]), ("_", [5]), ("100%", [4])])
def test_like_wildcards_match_literally(
    session: Session,
    repository: SqlAlchemyVehicleRepository,
    needle: str,
    expected_ids: list[int],
) -> None:
    _add_orphan(session, 4, "100% Motors")
    _add_orphan(session, 5, "Under_Score")

    result = repository.search(compose_predicate(VehicleFilters(make=needle)), PageDescriptor())

    assert [v.id for v in result.vehicles] == expected_ids


# ==============================================================================
# Paging and ordering
# ==============================================================================


def test_count_is_taken_before_paging(repository: SqlAlchemyVehicleRepository) -> None:
    predicate = compose_predicate(VehicleFilters(make="Toyota"))

    result = repository.search(predicate, PageDescriptor(page_number=1, page_size=1))

    assert [v.id for v in result.vehicles] == [3]
    assert result.total_count == 2


def test_descending_make_breaks_ties_by_id(repository: SqlAlchemyVehicleRepository) -> None:
    sort = SortDescriptor(SortField.MAKE, SortDirection.DESC)

    result = repository.search(MATCH_ALL, PageDescriptor(sort=sort))

    assert [v.id for v in result.vehicles] == [1, 3, 2]


def test_consecutive_pages_never_overlap(repository: SqlAlchemyVehicleRepository) -> None:
    sort = SortDescriptor(SortField.MAINTAINER_NAME, SortDirection.ASC)

    ids = [
        v.id
        for page_number in range(3)
        for v in repository.search(MATCH_ALL, PageDescriptor(page_number, 1, sort)).vehicles
    ]

    assert ids == [1, 3, 2]


def test_missing_owner_sorts_last_asc_first_desc(
    session: Session, repository: SqlAlchemyVehicleRepository
) -> None:
    _add_orphan(session, 4, "Kia")

    asc = repository.search(
        MATCH_ALL, PageDescriptor(sort=SortDescriptor(SortField.OWNER_NAME, SortDirection.ASC))
    )
    desc = repository.search(
        MATCH_ALL, PageDescriptor(sort=SortDescriptor(SortField.OWNER_NAME, SortDirection.DESC))
    )

    assert [v.id for v in asc.vehicles] == [2, 3, 1, 4]
    assert [v.id for v in desc.vehicles] == [4, 1, 2, 3]


def test_page_past_end(repository: SqlAlchemyVehicleRepository) -> None:
    result = repository.search(MATCH_ALL, PageDescriptor(page_number=3, page_size=10))

    assert result.vehicles == []
    assert result.total_count == 3


def test_largest_accepted_offset_returns_empty_page(repository: SqlAlchemyVehicleRepository) -> None:
    page = PageDescriptor(page_number=MAX_PAGE_NUMBER, page_size=MAX_PAGE_SIZE)

    result = repository.search(MATCH_ALL, page)

    assert result.vehicles == []
    assert result.total_count == 3


def test_get_by_id_at_storage_range_edge(repository: SqlAlchemyVehicleRepository) -> None:
    assert repository.get_by_id(MAX_STORAGE_INT) is None


def test_search_executes_count_then_select() -> None:
    session = Mock(spec=Session)
    count_result = Mock()
    count_result.scalar.return_value = 0
    select_result = Mock()
    select_result.scalars.return_value.all.return_value = []
    session.execute.side_effect = [count_result, select_result]

    result = SqlAlchemyVehicleRepository(session=session).search(MATCH_ALL, PageDescriptor())

    assert session.execute.call_count == 2
    assert result.vehicles == []
    assert result.total_count == 0


# ==============================================================================
# Get by id
# ==============================================================================


def test_get_by_id_maps_row_to_domain(repository: SqlAlchemyVehicleRepository) -> None:
    vehicle = repository.get_by_id(1)

    assert vehicle is not None
    assert vehicle.make == "Toyota"
    assert vehicle.owner_name == "John Doe"
    assert vehicle.maintainer_name == "Service Center A"
    assert [r.description for r in vehicle.service_history] == ["Oil change", "Tire rotation"]
    assert vehicle.service_history[0].service_date == date(2024, 1, 15)


def test_get_by_id_without_relations(
    session: Session, repository: SqlAlchemyVehicleRepository
) -> None:
    _add_orphan(session, 4, "Kia", "Rio")

    vehicle = repository.get_by_id(4)

    assert vehicle is not None
    assert vehicle.owner is None
    assert vehicle.maintainer is None
    assert vehicle.service_history == ()


def test_get_by_id_missing_returns_none(repository: SqlAlchemyVehicleRepository) -> None:
    assert repository.get_by_id(999) is None
