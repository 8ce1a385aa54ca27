"""Shared fixtures: the three-vehicle catalog used across layers."""

from __future__ import annotations

from datetime import date

import pytest

from autocare.domain.vehicle import Customer, Maintainer, ServiceRecord, Vehicle


@pytest.fixture()
def john() -> Customer:
    return Customer(id=1, name="John Doe")


@pytest.fixture()
def jane() -> Customer:
    return Customer(id=2, name="Jane Smith")


@pytest.fixture()
def center_a() -> Maintainer:
    return Maintainer(id=1, name="Service Center A")


@pytest.fixture()
def center_b() -> Maintainer:
    return Maintainer(id=2, name="Service Center B")


@pytest.fixture()
def catalog(
    john: Customer, jane: Customer, center_a: Maintainer, center_b: Maintainer
) -> list[Vehicle]:
    """Toyota/Camry/John/A, Honda/Civic/Jane/B, Toyota/Corolla/Jane/A."""
    return [
        Vehicle(
            id=1,
            make="Toyota",
            model="Camry",
            owner=john,
            maintainer=center_a,
            service_history=(
                ServiceRecord(id=1, service_date=date(2024, 1, 15), description="Oil change"),
                ServiceRecord(id=2, service_date=date(2024, 7, 2), description="Tire rotation"),
            ),
        ),
        Vehicle(id=2, make="Honda", model="Civic", owner=jane, maintainer=center_b),
        Vehicle(id=3, make="Toyota", model="Corolla", owner=jane, maintainer=center_a),
    ]
