"""Response envelope, factory helpers and failure types."""

from .envelope import ApiResponse, FieldError, TypedApiResponse, new_reference_name
from .failures import ApiFailure, NotFoundFailure, ValidationFailure, create_failure
from .handler import (
    bad_request,
    error,
    error_from_response,
    error_with_data,
    not_found,
    success,
    typed_error,
    typed_from_failure,
    typed_success,
)

__all__ = [
    "ApiFailure",
    "ApiResponse",
    "FieldError",
    "NotFoundFailure",
    "TypedApiResponse",
    "ValidationFailure",
    "bad_request",
    "create_failure",
    "error",
    "error_from_response",
    "error_with_data",
    "new_reference_name",
    "not_found",
    "success",
    "typed_error",
    "typed_from_failure",
    "typed_success",
]
