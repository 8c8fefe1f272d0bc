"""Failure types carried up the call chain and turned into envelopes at the boundary."""

from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from .envelope import FieldError


FieldErrorLike = Union[FieldError, Tuple[str, str], Mapping[str, Any]]


def _to_field_error(item: FieldErrorLike) -> FieldError:
    if isinstance(item, FieldError):
        return item
    if isinstance(item, Mapping):
        return FieldError(field=str(item.get("field") or ""), message=str(item.get("message") or ""))
    field, message = item
    return FieldError(field=field or "", message=message or "")


class ApiFailure(Exception):
    """Request failure with an optional reference name and field errors.

    Maps to HTTP 400.
    """

    status_code = 400

    def __init__(
        self,
        message: str,
        reference: str = "",
        field_errors: Optional[Iterable[FieldErrorLike]] = None,
    ) -> None:
        self.message = message or ""
        self.reference = reference or ""
        self.field_errors: Tuple[FieldError, ...] = tuple(_to_field_error(e) for e in field_errors or ())
        super().__init__(self.message)

    @classmethod
    def with_field_errors(cls, message: str, errors: Iterable[FieldErrorLike]) -> "ApiFailure":
        return cls(message, field_errors=errors)


class ValidationFailure(ApiFailure):
    """One or more field-level problems. Maps to HTTP 422."""

    status_code = 422


class NotFoundFailure(ApiFailure):
    """Requested resource does not exist. Maps to HTTP 404."""

    status_code = 404


def create_failure(message: str, reference: str = "") -> ApiFailure:
    """Build a failure carrying a single reference string."""
    return ApiFailure(message, reference=reference)
