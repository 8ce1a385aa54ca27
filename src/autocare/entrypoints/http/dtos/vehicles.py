from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MAX_PAGE_SIZE = 200

# Ids and row offsets are BIGINT in storage
MIN_STORAGE_INT = -(2**63)
MAX_STORAGE_INT = 2**63 - 1

# Keeps pageNumber * pageSize within a BIGINT OFFSET
MAX_PAGE_NUMBER = MAX_STORAGE_INT // MAX_PAGE_SIZE


class ResponseView(str, Enum):
    """Response variant for the listing endpoint."""

    PAGE = "page"  # envelope with totals
    LIST = "list"  # bare array of items


class VehicleSearchQueryDTO(BaseModel):
    """Query parameters for listing vehicles in the catalog."""

    make: str | None = Field(
        default=None,
        description="Filter by vehicle make (case-insensitive substring match)",
        examples=["Toyota"],
    )
    model: str | None = Field(
        default=None,
        description="Filter by vehicle model (case-insensitive substring match)",
        examples=["Camry"],
    )
    owner_name: str | None = Field(
        default=None,
        description="Filter by owner's name (case-insensitive substring match)",
        examples=["John Doe"],
    )
    maintainer_name: str | None = Field(
        default=None,
        description="Filter by maintainer's name (case-insensitive substring match)",
        examples=["Service Center A"],
    )
    page_number: int = Field(
        default=0,
        description="Zero-based page index",
        examples=[0],
        le=MAX_PAGE_NUMBER,
    )
    page_size: int = Field(
        default=10,
        description="Number of vehicles per page",
        examples=[10],
        le=MAX_PAGE_SIZE,
    )
    sort_by: str = Field(default="id", description="Field to sort by", examples=["make"])
    sort_dir: str = Field(default="ASC", description="Sort direction: ASC or DESC", examples=["DESC"])
    view: ResponseView = Field(default=ResponseView.PAGE, description="Response variant")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "make": "Toyota",
                "maintainerName": "Service Center A",
                "pageNumber": 0,
                "pageSize": 10,
                "sortBy": "model",
                "sortDir": "DESC",
                "view": "page",
            }
        },
    )


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ServiceRecordResponseDTO(_CamelModel):
    id: int
    service_date: date
    description: str


class VehicleResponseDTO(_CamelModel):
    id: int
    make: str
    model: str
    owner_name: str | None = None
    maintainer_name: str | None = None
    service_history: list[ServiceRecordResponseDTO] = Field(default_factory=list)


class VehiclePageResponseDTO(_CamelModel):
    content: list[VehicleResponseDTO]
    total_elements: int
    total_pages: int
    page_number: int
    page_size: int
