from __future__ import annotations

from autocare.domain.vehicle import ServiceRecord, Vehicle, VehicleFilters, VehiclePage
from autocare.entrypoints.http.dtos.vehicles import (
    ResponseView,
    ServiceRecordResponseDTO,
    VehiclePageResponseDTO,
    VehicleResponseDTO,
    VehicleSearchQueryDTO,
)
from autocare.use_cases.search_vehicle_catalog import SearchVehicleCatalogRequest


class VehicleMapper:
    """Maps between REST DTOs and domain models for the vehicle catalog."""

    @staticmethod
    def to_domain_filters(dto: VehicleSearchQueryDTO) -> VehicleFilters:
        return VehicleFilters(
            make=dto.make,
            model=dto.model,
            owner_name=dto.owner_name,
            maintainer_name=dto.maintainer_name,
        )

    @staticmethod
    def to_domain_request(dto: VehicleSearchQueryDTO) -> SearchVehicleCatalogRequest:
        """
        Builds the raw domain request from query parameters.

        Sort and page values are passed through unvalidated; the use case
        owns their validation so every violation takes the same path.
        """
        return SearchVehicleCatalogRequest(
            filters=VehicleMapper.to_domain_filters(dto),
            page_number=dto.page_number,
            page_size=dto.page_size,
            sort_field=dto.sort_by,
            sort_direction=dto.sort_dir,
        )

    @staticmethod
    def to_service_record_response(record: ServiceRecord) -> ServiceRecordResponseDTO:
        return ServiceRecordResponseDTO(
            id=record.id,
            service_date=record.service_date,
            description=record.description,
        )

    @staticmethod
    def to_vehicle_response(vehicle: Vehicle) -> VehicleResponseDTO:
        return VehicleResponseDTO(
            id=vehicle.id,
            make=vehicle.make,
            model=vehicle.model,
            owner_name=vehicle.owner_name,
            maintainer_name=vehicle.maintainer_name,
            service_history=[
                VehicleMapper.to_service_record_response(record)
                for record in vehicle.service_history
            ],
        )

    @staticmethod
    def to_page_response(page: VehiclePage) -> VehiclePageResponseDTO:
        return VehiclePageResponseDTO(
            content=[VehicleMapper.to_vehicle_response(vehicle) for vehicle in page.items],
            total_elements=page.total_count,
            total_pages=page.total_pages,
            page_number=page.page_number,
            page_size=page.page_size,
        )

    @staticmethod
    def to_list_response(page: VehiclePage) -> list[VehicleResponseDTO]:
        return VehicleMapper.to_page_response(page).content

    @staticmethod
    def to_response(
        page: VehiclePage, view: ResponseView
    ) -> VehiclePageResponseDTO | list[VehicleResponseDTO]:
        """
        Renders one internal page as the requested response variant.

        Both variants come from the same VehiclePage, so filtering, sorting
        and slicing are identical; only the envelope differs.
        """
        if view is ResponseView.LIST:
            return VehicleMapper.to_list_response(page)
        return VehicleMapper.to_page_response(page)
