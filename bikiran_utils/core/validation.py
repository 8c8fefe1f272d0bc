import logging
import re
from typing import List, Optional

from ..api_resp.envelope import FieldError
from ..api_resp.failures import ValidationFailure


logger = logging.getLogger(__name__)

ORDER_BY_PATTERN = re.compile(r'^[a-zA-Z_][a-zA-Z0-9_]*$')
REFERENCE_NAME_PATTERN = re.compile(r'^[a-zA-Z0-9_-]+$')
MAX_REFERENCE_NAME_LENGTH = 128


def is_valid_reference_name(reference_name: Optional[str]) -> bool:
    if not reference_name or len(reference_name) > MAX_REFERENCE_NAME_LENGTH:
        return False
    return bool(REFERENCE_NAME_PATTERN.fullmatch(reference_name))


def validate_inputs(order_by: Optional[str] = None, reference_name: Optional[str] = None) -> None:
    errors: List[FieldError] = []

    if order_by and not ORDER_BY_PATTERN.match(order_by.strip()):
        errors.append(FieldError(field="order_by", message="Invalid order_by format"))

    if reference_name:
        if len(reference_name) > MAX_REFERENCE_NAME_LENGTH:
            errors.append(FieldError(
                field="reference_name",
                message=f"reference_name is longer than {MAX_REFERENCE_NAME_LENGTH} characters",
            ))
        elif not REFERENCE_NAME_PATTERN.fullmatch(reference_name):
            errors.append(FieldError(field="reference_name", message="Invalid reference_name format"))

    if errors:
        logger.info(f"Input validation failed for {', '.join(e.field for e in errors)}")
        raise ValidationFailure.with_field_errors("Invalid request parameters", errors)
