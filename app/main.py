"""
FastAPI Application Entry Point

Pizza Delivery API - in-memory order tracking.

Endpoints:
    - GET /health: Service health check
    - POST /orders: Create an order
    - GET /orders: List orders in submission order
    - GET /orders/{order_id}: Get a single order
    - GET /menu: Static menu

The order service is built once per application and injected into the
handlers through a FastAPI dependency, so tests can create isolated apps
with their own stores via create_app().

Version: 1.0.0
"""

import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import Settings, get_settings, setup_logging
from app.core.exceptions import NotFound, ValidationError
from app.schemas import (
    ErrorResponse,
    HealthResponse,
    MenuResponse,
    OrderCreate,
    OrderResponse,
)
from app.services.orders import OrderService, get_order_store
from app.services.orders.service import validation_error_from_errors

setup_logging()
logger = logging.getLogger(__name__)


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_order_service(request: Request) -> OrderService:
    return request.app.state.order_service


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


# =============================================================================
# APPLICATION LIFECYCLE
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application startup and shutdown events.
    """
    settings: Settings = app.state.settings
    service: OrderService = app.state.order_service

    # Startup
    logger.info("=" * 60)
    logger.info(f"🍕 Starting {settings.app_name}")
    logger.info(f"   Version: {settings.app_version}")
    logger.info(f"   Environment: {settings.env_mode.value}")
    logger.info(f"   Debug: {settings.debug}")
    logger.info(f"   Order Store: {service.store.provider_name}")
    logger.info("=" * 60)

    yield  # Application runs

    # Shutdown
    logger.info(f"Shutting down, discarding {service.store.count()} orders held in memory")
    service.store.clear()
    logger.info("✅ Cleanup complete")


# =============================================================================
# ROOT & HEALTH ENDPOINTS
# =============================================================================

router = APIRouter()


@router.get("/", tags=["Root"])
async def root(settings: Settings = Depends(get_app_settings)) -> dict[str, str]:
    """API root with navigation links."""
    return {
        "message": f"🍕 Welcome to {settings.app_name}",
        "version": settings.app_version,
        "environment": settings.env_mode.value,
        "documentation": "/docs",
        "health": "/health",
        "menu": "/menu",
    }


@router.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Service Health Check",
)
async def health_check(
    service: OrderService = Depends(get_order_service),
) -> HealthResponse:
    return HealthResponse(**service.health())


# =============================================================================
# ORDER API ENDPOINTS
# =============================================================================

@router.post(
    "/orders",
    response_model=OrderResponse,
    status_code=201,
    responses={422: {"model": ErrorResponse}},
    tags=["Orders"],
    summary="Create Order",
)
async def create_order(
    order_data: OrderCreate,
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    """
    Place a new pizza order.

    The order is assigned an id, marked pending and stamped with the
    creation time and delivery estimate.
    """
    order = service.create_order(order_data)
    return OrderResponse.model_validate(order)


@router.get(
    "/orders",
    response_model=List[OrderResponse],
    responses={422: {"model": ErrorResponse}},
    tags=["Orders"],
    summary="List Orders",
)
async def list_orders(
    status: Optional[str] = Query(None),
    service: OrderService = Depends(get_order_service),
) -> List[OrderResponse]:
    """Retrieve every order in submission order."""
    return [OrderResponse.model_validate(o) for o in service.list_orders(status=status)]


@router.get(
    "/orders/{order_id}",
    response_model=OrderResponse,
    responses={404: {"model": ErrorResponse}},
    tags=["Orders"],
)
async def get_order(
    order_id: str,
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    """Get a specific order by ID."""
    return OrderResponse.model_validate(service.get_order(order_id))


# =============================================================================
# MENU ENDPOINTS
# =============================================================================

@router.get(
    "/menu",
    response_model=MenuResponse,
    tags=["Menu"],
)
async def get_menu(
    service: OrderService = Depends(get_order_service),
) -> MenuResponse:
    """Sizes with prices (in cents) and slice counts, toppings and crusts."""
    return MenuResponse(**service.get_menu().to_dict())


# =============================================================================
# ERROR HANDLERS
# =============================================================================

def _error_response(status_code: int, error: str, detail: Optional[str] = None,
                    fields: Optional[list] = None) -> JSONResponse:
    body = ErrorResponse(error=error, detail=detail, fields=fields or [])
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        error = validation_error_from_errors(exc.errors(), skip_prefix=("body", "query", "path"))
        logger.info(f"Rejected {request.method} {request.url.path}: {error.message}")
        return _error_response(422, "Validation Error", error.message, error.fields)

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
        logger.info(f"Rejected {request.method} {request.url.path}: {exc.message}")
        return _error_response(422, "Validation Error", exc.message, exc.fields)

    @app.exception_handler(NotFound)
    async def not_found_handler(request: Request, exc: NotFound) -> JSONResponse:
        return _error_response(404, "Not Found", exc.message)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all exception handler."""
        logger.exception(f"Unhandled exception: {exc}")
        return _error_response(
            500,
            "Internal Server Error",
            str(exc) if settings.debug else "An unexpected error occurred",
        )


# =============================================================================
# APPLICATION FACTORY
# =============================================================================

def create_app(
    settings: Optional[Settings] = None,
    service: Optional[OrderService] = None,
) -> FastAPI:
    """
    Build a FastAPI application around an order service.

    Args:
        settings: Application settings (defaults to get_settings())
        service: Order service to serve (defaults to one backed by the
            configured shared store)

    Returns:
        FastAPI: Ready-to-serve application
    """
    settings = settings or get_settings()
    if service is None:
        service = OrderService.from_settings(settings, get_order_store())

    app = FastAPI(
        title=settings.app_name,
        description="Order pizzas, track them by id and browse the menu.",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.order_service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    register_exception_handlers(app, settings)
    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development and settings.debug,
    )


if __name__ == "__main__":
    run()
