from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Date, DateTime, ForeignKey, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from autocare.infra.db.models.base import Base, IdType
from autocare.infra.db.models.customer import CustomerRow
from autocare.infra.db.models.maintainer import MaintainerRow


class VehicleRow(Base):
    __tablename__ = "vehicles"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    make: Mapped[str] = mapped_column(String(50), nullable=False)
    model: Mapped[str] = mapped_column(String(50), nullable=False)

    customer_id: Mapped[int | None] = mapped_column(
        IdType, ForeignKey("customers.id"), nullable=True, index=True
    )
    maintainer_id: Mapped[int | None] = mapped_column(
        IdType, ForeignKey("maintainers.id"), nullable=True, index=True
    )

    owner: Mapped[CustomerRow | None] = relationship()
    maintainer: Mapped[MaintainerRow | None] = relationship()
    service_records: Mapped[list[ServiceRecordRow]] = relationship(
        back_populates="vehicle",
        order_by=lambda: [ServiceRecordRow.service_date, ServiceRecordRow.id],
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class ServiceRecordRow(Base):
    __tablename__ = "service_records"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    vehicle_id: Mapped[int] = mapped_column(
        IdType, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    service_date: Mapped[date] = mapped_column(Date, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    vehicle: Mapped[VehicleRow] = relationship(back_populates="service_records")
