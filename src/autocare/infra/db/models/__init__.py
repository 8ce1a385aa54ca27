from autocare.infra.db.models.base import Base
from autocare.infra.db.models.customer import CustomerRow
from autocare.infra.db.models.maintainer import MaintainerRow
from autocare.infra.db.models.vehicle import ServiceRecordRow, VehicleRow

__all__ = ["Base", "CustomerRow", "MaintainerRow", "ServiceRecordRow", "VehicleRow"]
