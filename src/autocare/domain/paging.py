from __future__ import annotations

from dataclasses import dataclass, field

from autocare.domain.errors import ValidationError
from autocare.domain.sorting import SortDescriptor


DEFAULT_PAGE_NUMBER = 0
DEFAULT_PAGE_SIZE = 10


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class InvalidPageNumberError(ValidationError):
    """Raised when the page number is negative."""

    error_code: str = "INVALID_PAGE_NUMBER"

    def __init__(self, value: int) -> None:
        super().__init__(
            f"Invalid value '{value}' for parameter 'pageNumber'. "
            "Page number must be greater than or equal to 0.",
            parameter="pageNumber",
            value=value,
        )


class InvalidPageSizeError(ValidationError):
    """Raised when the page size is zero or negative."""

    error_code: str = "INVALID_PAGE_SIZE"

    def __init__(self, value: int) -> None:
        super().__init__(
            f"Invalid value '{value}' for parameter 'pageSize'. "
            "Page size must be greater than or equal to 1.",
            parameter="pageSize",
            value=value,
        )


@dataclass(frozen=True, slots=True)
class PageDescriptor:
    """Zero-based page request: which slice of the ordered result set to return."""

    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE
    sort: SortDescriptor = field(default_factory=SortDescriptor)

    @property
    def offset(self) -> int:
        return self.page_number * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


def build_page_request(
    page_number: int,
    page_size: int,
    sort: SortDescriptor,
) -> PageDescriptor:
    """
    Validate pagination parameters and assemble a page descriptor.

    No upper bound on page_size is enforced here; the HTTP layer caps it.

    Raises:
        InvalidPageNumberError: If page_number < 0
        InvalidPageSizeError: If page_size < 1
    """
    if page_number < 0:
        raise InvalidPageNumberError(page_number)
    if page_size < 1:
        raise InvalidPageSizeError(page_size)

    return PageDescriptor(page_number=page_number, page_size=page_size, sort=sort)
