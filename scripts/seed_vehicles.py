#!/usr/bin/env python3
"""
Seed the vehicle catalog with deterministic random data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Every vehicle has an owner, a maintainer and a short service history

Usage:
    python scripts/seed_vehicles.py
"""

from __future__ import annotations

import random
import sys
from datetime import date, timedelta
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from autocare.infra.db.models import CustomerRow, MaintainerRow, ServiceRecordRow, VehicleRow
from autocare.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_VEHICLES = 50  # Number of vehicles to generate
FIRST_SERVICE_DATE = date(2020, 1, 1)


# ==============================================================================
# Reference Data
# ==============================================================================

MODELS_BY_MAKE = {
    "Toyota": ["Corolla", "Camry", "RAV4", "Hilux", "Yaris"],
    "Honda": ["Civic", "Accord", "CR-V", "HR-V", "Fit"],
    "Ford": ["Focus", "Fusion", "Escape", "Explorer", "Mustang"],
    "Volkswagen": ["Jetta", "Tiguan", "Golf", "Passat", "Polo"],
    "Mazda": ["Mazda3", "Mazda6", "CX-3", "CX-5", "CX-30"],
    "Nissan": ["Versa", "Sentra", "Kicks", "X-Trail", "Leaf"],
}

CUSTOMER_NAMES = [
    "John Doe",
    "Jane Smith",
    "Bob Johnson",
    "Alice Martin",
    "Carlos Ruiz",
    "Mei Chen",
    "Fatima Khan",
    "Liam O'Brien",
]

MAINTAINER_NAMES = [
    "Service Center A",
    "Service Center B",
    "Downtown Auto Care",
    "Northside Garage",
]

SERVICE_DESCRIPTIONS = [
    "Oil change",
    "Brake pad replacement",
    "Tire rotation",
    "Battery replacement",
    "Annual inspection",
    "Air filter replacement",
    "Transmission fluid flush",
]


# ==============================================================================
# Seed Generation
# ==============================================================================


def generate_service_history() -> list[ServiceRecordRow]:
    """Generate 0-4 service records in chronological order."""
    records = []
    service_date = FIRST_SERVICE_DATE + timedelta(days=random.randint(0, 365))
    for _ in range(random.randint(0, 4)):
        records.append(
            ServiceRecordRow(
                service_date=service_date,
                description=random.choice(SERVICE_DESCRIPTIONS),
            )
        )
        service_date += timedelta(days=random.randint(60, 400))
    return records


def generate_vehicle(
    customers: list[CustomerRow], maintainers: list[MaintainerRow]
) -> VehicleRow:
    """Generate a single random vehicle with related rows."""
    make = random.choice(list(MODELS_BY_MAKE))
    model = random.choice(MODELS_BY_MAKE[make])

    return VehicleRow(
        make=make,
        model=model,
        owner=random.choice(customers),
        maintainer=random.choice(maintainers),
        service_records=generate_service_history(),
    )


def seed_vehicles(num_vehicles: int = NUM_VEHICLES, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with random vehicle data.

    Args:
        num_vehicles: Number of vehicles to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"🌱 Seeding database with {num_vehicles} vehicles (seed={seed})...")

    with get_session() as session:
        # Step 1: Clear existing data (idempotent), children first
        print("🗑️  Clearing existing catalog...")
        session.query(ServiceRecordRow).delete()
        deleted_count = session.query(VehicleRow).delete()
        session.query(CustomerRow).delete()
        session.query(MaintainerRow).delete()
        print(f"   Deleted {deleted_count} existing vehicles")

        # Step 2: Owners and maintainers
        customers = [CustomerRow(name=name) for name in CUSTOMER_NAMES]
        maintainers = [MaintainerRow(name=name) for name in MAINTAINER_NAMES]
        session.add_all(customers + maintainers)

        # Step 3: Vehicles with service history
        print(f"🚗 Generating {num_vehicles} vehicles...")
        vehicles = [generate_vehicle(customers, maintainers) for _ in range(num_vehicles)]

        session.add_all(vehicles)
        session.flush()  # Ensure all rows are inserted

        print(f"✅ Successfully seeded {len(vehicles)} vehicles!")

        print("\n📊 Sample vehicles:")
        for i, vehicle in enumerate(vehicles[:5], 1):
            print(
                f"   {i}. {vehicle.make} {vehicle.model} - owner {vehicle.owner.name}, "
                f"maintained by {vehicle.maintainer.name} "
                f"({len(vehicle.service_records)} services)"
            )

        if len(vehicles) > 5:
            print(f"   ... and {len(vehicles) - 5} more")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_vehicles()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
