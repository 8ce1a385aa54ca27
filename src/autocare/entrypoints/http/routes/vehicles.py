from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import JSONResponse

from autocare.domain.result import Err
from autocare.entrypoints.http.dependencies import (
    get_get_vehicle_by_id_use_case,
    get_search_vehicles_use_case,
    get_vehicle_search_query,
)
from autocare.entrypoints.http.dtos.vehicles import (
    MAX_STORAGE_INT,
    MIN_STORAGE_INT,
    VehiclePageResponseDTO,
    VehicleResponseDTO,
    VehicleSearchQueryDTO,
)
from autocare.entrypoints.http.error_responses import ErrorPayload
from autocare.entrypoints.http.error_translator import ErrorTranslator
from autocare.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from autocare.entrypoints.http.security import require_api_key
from autocare.use_cases.get_vehicle_by_id import GetVehicleById, GetVehicleByIdRequest
from autocare.use_cases.search_vehicle_catalog import SearchVehicleCatalog


router = APIRouter(tags=["Vehicles"], dependencies=[Depends(require_api_key)])

_translator = ErrorTranslator()

_ERROR_RESPONSES: dict[int | str, dict] = {
    400: {"model": ErrorPayload, "description": "Invalid query parameters"},
    401: {"model": ErrorPayload, "description": "Missing or invalid API key"},
    500: {"model": ErrorPayload, "description": "Unexpected error"},
}


@router.get(
    "/vehicles",
    response_model=None,
    summary="List vehicles",
    description="""
    List vehicles with optional filters, sorting and pagination.

    ## Filters
    - `make`, `model`, `ownerName`, `maintainerName`
    - Case-insensitive substring match, combined with AND
    - Blank values are ignored

    ## Sorting
    - `sortBy`: one of `id`, `make`, `model`, `ownerName`, `maintainerName` (default `id`)
    - `sortDir`: `ASC` or `DESC`, case-insensitive (default `ASC`)
    - Ties are broken by `id` so pages never overlap

    ## Pagination
    - `pageNumber`: zero-based (default 0)
    - `pageSize`: 1 to 200 (default 10)

    ## Response variants
    - `view=page` (default): `{content, totalElements, totalPages, pageNumber, pageSize}`
    - `view=list`: bare array of vehicles

    ## Example
    ```
    GET /api/v1/vehicles?make=Toyota&maintainerName=Service%20Center%20A&sortBy=model
    ```
    """,
    responses={
        200: {
            "description": "Successful response",
            "model": VehiclePageResponseDTO,
            "content": {
                "application/json": {
                    "example": {
                        "content": [
                            {
                                "id": 1,
                                "make": "Toyota",
                                "model": "Camry",
                                "ownerName": "John Doe",
                                "maintainerName": "Service Center A",
                                "serviceHistory": [],
                            }
                        ],
                        "totalElements": 1,
                        "totalPages": 1,
                        "pageNumber": 0,
                        "pageSize": 10,
                    }
                }
            },
        },
        **_ERROR_RESPONSES,
    },
)
def list_vehicles(
    request: Request,
    query: VehicleSearchQueryDTO = Depends(get_vehicle_search_query),
    use_case: SearchVehicleCatalog = Depends(get_search_vehicles_use_case),
) -> VehiclePageResponseDTO | list[VehicleResponseDTO] | JSONResponse:
    """List vehicles endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    domain_request = VehicleMapper.to_domain_request(query)

    # 2. Execute use case
    result = use_case.execute(domain_request)
    if isinstance(result, Err):
        return _translator.to_response(result.error, request.url.path)

    # 3. Map to the requested response variant
    return VehicleMapper.to_response(result.value, query.view)


@router.get(
    "/vehicles/{vehicle_id}",
    response_model=None,
    summary="Get vehicle by ID",
    responses={
        200: {"description": "Vehicle found", "model": VehicleResponseDTO},
        404: {"model": ErrorPayload, "description": "Vehicle not found"},
        **_ERROR_RESPONSES,
    },
)
def get_vehicle(
    request: Request,
    vehicle_id: int = Path(ge=MIN_STORAGE_INT, le=MAX_STORAGE_INT),
    use_case: GetVehicleById = Depends(get_get_vehicle_by_id_use_case),
) -> VehicleResponseDTO | JSONResponse:
    result = use_case.execute(GetVehicleByIdRequest(vehicle_id=vehicle_id))
    if isinstance(result, Err):
        return _translator.to_response(result.error, request.url.path)

    return VehicleMapper.to_vehicle_response(result.value)
