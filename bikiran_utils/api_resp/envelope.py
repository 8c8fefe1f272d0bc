"""Standardized API response envelope models."""

import uuid
from typing import Any, Generic, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


T = TypeVar("T")


def new_reference_name() -> str:
    return str(uuid.uuid4())


_ENVELOPE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
)


class FieldError(BaseModel):
    """A single field-level validation problem."""

    model_config = _ENVELOPE_CONFIG

    field: str = ""
    message: str = ""


class ApiResponse(BaseModel):
    """Envelope returned from every API boundary.

    Serialized as ``{error, message, data, referenceName}``. ``data`` is an
    empty object when there is nothing to return and ``reference_name`` is
    always populated so the response can be correlated across systems.
    """

    model_config = _ENVELOPE_CONFIG

    is_error: bool = Field(default=False, alias="error")
    message: str = ""
    data: Any = Field(default_factory=dict)
    reference_name: str = Field(default_factory=new_reference_name)

    @field_validator("reference_name", mode="before")
    @classmethod
    def _fill_reference_name(cls, value: Any) -> str:
        if value is None or not str(value).strip():
            return new_reference_name()
        return value


class TypedApiResponse(BaseModel, Generic[T]):
    """Envelope with a typed payload and optional field errors.

    ``errors`` stays ``None`` on success and is only populated for
    validation-style failures.
    """

    model_config = _ENVELOPE_CONFIG

    is_error: bool = Field(default=False, alias="error")
    errors: Optional[Tuple[FieldError, ...]] = None
    message: str = ""
    data: Optional[T] = None
    reference_name: str = Field(default_factory=new_reference_name)

    @field_validator("reference_name", mode="before")
    @classmethod
    def _fill_reference_name(cls, value: Any) -> str:
        if value is None or not str(value).strip():
            return new_reference_name()
        return value
