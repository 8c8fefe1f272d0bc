import logging
import time
from typing import Callable, List, Mapping, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..api_resp.envelope import FieldError
from ..api_resp.failures import ApiFailure
from ..api_resp.handler import bad_request, error, not_found, typed_error, typed_from_failure
from .config import Config
from .http import get_ip_string
from .validation import is_valid_reference_name


logger = logging.getLogger(__name__)

LOCATION_PREFIXES = ("body", "query", "path", "header", "cookie")


def cors_allowed_origins() -> list[str]:
    return Config.allowed_origins()


def _request_id(request: Request) -> str:
    return f"{int(time.time() * 1000)}-{id(request)}"


def _caller_reference(request: Request) -> str:
    reference = request.headers.get(Config.REFERENCE_HEADER, "").strip()
    if reference and not is_valid_reference_name(reference):
        logger.info(f"Ignoring malformed {Config.REFERENCE_HEADER} header ({len(reference)} chars)")
        return ""
    return reference


def _envelope_response(request: Request, status_code: int, envelope, headers: Optional[Mapping[str, str]] = None) -> JSONResponse:
    response = JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(mode="json", by_alias=True),
        headers=dict(headers) if headers else None,
    )
    origin = request.headers.get("origin")
    if origin and origin in cors_allowed_origins():
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Access-Control-Allow-Credentials"] = "true"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "*"
    return response


async def log_requests(request: Request, call_next: Callable):
    start_time = time.time()
    request_id = _request_id(request)

    try:
        response = await call_next(request)
        process_time = time.time() - start_time
        # Only log slow requests (>1s) or errors
        if process_time > 1.0 or response.status_code >= 400:
            logger.info(
                f"[{request_id}] {request.method} {request.url.path} from {get_ip_string(request) or 'unknown'}"
                f" - {response.status_code} - {process_time:.2f}s"
            )
        return response
    except Exception as e:
        process_time = time.time() - start_time
        logger.error(f"[{request_id}] {request.method} {request.url.path} - ERROR: {str(e)} - {process_time:.2f}s")
        raise


async def api_failure_handler(request: Request, exc: ApiFailure):
    if exc.reference:
        envelope = typed_from_failure(exc)
    else:
        envelope = typed_error(exc.message, exc.field_errors, _caller_reference(request))
    logger.warning(
        f"[{_request_id(request)}] {type(exc).__name__} in {request.method} {request.url.path}: "
        f"{exc.message} (reference {envelope.reference_name})"
    )
    return _envelope_response(request, exc.status_code, envelope)


def _field_name(location) -> str:
    parts: List[str] = [str(p) for p in location]
    if parts and parts[0] in LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    field_errors = [FieldError(field=_field_name(e.get("loc", ())), message=e.get("msg", "")) for e in exc.errors()]
    failure = ApiFailure("Request validation failed", reference=_caller_reference(request), field_errors=field_errors)
    return _envelope_response(request, 422, typed_from_failure(failure))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    if exc.status_code == 404:
        envelope = not_found(message)
    else:
        envelope = error(message, _caller_reference(request))
    return _envelope_response(request, exc.status_code, envelope, exc.headers)


async def global_exception_handler(request: Request, exc: Exception):
    request_id = _request_id(request)
    logger.error(f"[{request_id}] Unhandled exception in {request.method} {request.url.path}: {str(exc)}", exc_info=True)
    return _envelope_response(request, 500, bad_request(exc))


def register_exception_handlers(app) -> None:
    app.add_exception_handler(ApiFailure, api_failure_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
