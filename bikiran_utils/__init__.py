"""Cross-cutting helpers for server-side request handling."""

from .api_resp import (
    ApiFailure,
    ApiResponse,
    FieldError,
    NotFoundFailure,
    TypedApiResponse,
    ValidationFailure,
    bad_request,
    create_failure,
    error,
    error_from_response,
    error_with_data,
    not_found,
    success,
    typed_error,
    typed_from_failure,
    typed_success,
)
from .pagination import Gap, OrderDirection, PageInfo, PageNumber, Paginator

__version__ = "0.1.0"
