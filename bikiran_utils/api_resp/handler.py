"""Factory helpers for building response envelopes.

Every helper is total: ``None`` inputs are replaced with safe defaults and a
blank reference name is replaced by a freshly generated one. ``id_factory``
lets callers (and tests) control how reference names are generated.
"""

from typing import Any, Callable, Iterable, Optional

from .envelope import ApiResponse, FieldError, TypedApiResponse, new_reference_name
from .failures import ApiFailure


IdFactory = Callable[[], str]

DEFAULT_ERROR_MESSAGE = "Error"
BAD_REQUEST_MESSAGE = "Invalid request"


def _reference_or_new(reference_name: Optional[str], id_factory: IdFactory) -> str:
    if reference_name is None or not reference_name.strip():
        return id_factory()
    return reference_name


def _text(message: Optional[str], default: str = "") -> str:
    return default if message is None else message


def success(message: str, data: Any = None, *, id_factory: IdFactory = new_reference_name) -> ApiResponse:
    return ApiResponse(
        is_error=False,
        message=_text(message),
        data={} if data is None else data,
        reference_name=id_factory(),
    )


def error_with_data(
    message: str,
    reference_name: Optional[str],
    data: Any,
    *,
    id_factory: IdFactory = new_reference_name,
) -> ApiResponse:
    return ApiResponse(
        is_error=True,
        message=_text(message),
        data={} if data is None else data,
        reference_name=_reference_or_new(reference_name, id_factory),
    )


def error(
    message: Optional[str] = DEFAULT_ERROR_MESSAGE,
    reference_name: Optional[str] = "",
    *,
    id_factory: IdFactory = new_reference_name,
) -> ApiResponse:
    return ApiResponse(
        is_error=True,
        message=_text(message),
        data={},
        reference_name=_reference_or_new(reference_name, id_factory),
    )


def error_from_response(existing: Optional[ApiResponse], *, id_factory: IdFactory = new_reference_name) -> ApiResponse:
    """Re-issue an existing envelope as an error.

    Keeps the message and reference name but drops the original data payload.
    """
    if existing is None:
        return error(id_factory=id_factory)
    return ApiResponse(
        is_error=True,
        message=existing.message,
        data={},
        reference_name=_reference_or_new(existing.reference_name, id_factory),
    )


def not_found(message: str, *, id_factory: IdFactory = new_reference_name) -> ApiResponse:
    return ApiResponse(is_error=True, message=_text(message), data={}, reference_name=id_factory())


def bad_request(exc: Optional[BaseException], *, id_factory: IdFactory = new_reference_name) -> ApiResponse:
    """Wrap a failure's description. The failure object itself never leaves this function."""
    description = str(exc) if exc is not None else ""
    return ApiResponse(
        is_error=True,
        message=description or BAD_REQUEST_MESSAGE,
        data={},
        reference_name=id_factory(),
    )


def typed_success(message: str, data: Any = None, *, id_factory: IdFactory = new_reference_name) -> TypedApiResponse:
    return TypedApiResponse(is_error=False, message=_text(message), data=data, reference_name=id_factory())


def typed_error(
    message: Optional[str] = DEFAULT_ERROR_MESSAGE,
    errors: Optional[Iterable[FieldError]] = None,
    reference_name: Optional[str] = "",
    *,
    id_factory: IdFactory = new_reference_name,
) -> TypedApiResponse:
    field_errors = tuple(errors) if errors is not None else None
    return TypedApiResponse(
        is_error=True,
        errors=field_errors or None,
        message=_text(message),
        reference_name=_reference_or_new(reference_name, id_factory),
    )


def typed_from_failure(failure: ApiFailure, *, id_factory: IdFactory = new_reference_name) -> TypedApiResponse:
    return typed_error(
        failure.message,
        errors=failure.field_errors,
        reference_name=failure.reference,
        id_factory=id_factory,
    )
