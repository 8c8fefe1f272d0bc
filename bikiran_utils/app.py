import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .api_resp.envelope import ApiResponse, TypedApiResponse
from .api_resp.handler import success, typed_success
from .core.config import Config
from .core.http import get_ip_long, get_ip_string
from .core.middleware import log_requests, register_exception_handlers
from .core.validation import validate_inputs
from .pagination import PageInfo, Paginator


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build a FastAPI application wired with the envelope, pagination and IP helpers."""
    Config.validate()
    app = FastAPI(title="Bikiran Utils API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.allowed_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def _log_requests(request, call_next):
        return await log_requests(request, call_next)

    register_exception_handlers(app)

    @app.get("/health", response_model=ApiResponse)
    async def health_check():
        """Basic health check for the API."""
        health_start_time = time.time()
        data = {
            "environment": Config.ENVIRONMENT,
            "response_time_ms": round((time.time() - health_start_time) * 1000, 2),
        }
        return success("Service is healthy", data)

    @app.get("/client-ip", response_model=ApiResponse)
    async def client_ip(request: Request):
        ip = get_ip_string(request)
        return success("Client address resolved", {"ip": ip, "ip_long": get_ip_long(request)})

    @app.get("/pages", response_model=TypedApiResponse[PageInfo])
    async def page_preview(
        page: int = 1,
        page_size: Optional[int] = None,
        total: int = 0,
        order_by: str = "id",
        order_type: str = "asc",
    ):
        """Preview pagination metadata for a page request and total item count."""
        validate_inputs(order_by=order_by)
        paginator = Paginator(page, page_size, order_by, order_type).set_total_count(total)
        info = paginator.page_info()
        return typed_success(f"Showing {info.showing_from}-{info.showing_to} of {info.total_count}", info)

    @app.get("/settings", response_model=ApiResponse)
    async def public_settings():
        return success("Public settings", Config.public_settings())

    return app


app = create_app()
