"""
FastAPI application entry point for the invoice dashboard backend.

This module creates the FastAPI app instance, registers all routers and
turns RedirectSignal (raised by actions after a successful mutation or
sign-in) into 303 redirects.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.middleware.cors import CORSMiddleware

from dashboard.config import settings
from dashboard.routes.auth import router as auth_router
from dashboard.routes.customers import router as customers_router
from dashboard.routes.dashboard import router as dashboard_router
from dashboard.routes.health import router as health_router
from dashboard.routes.invoices import router as invoices_router
from dashboard.utils.navigation import RedirectSignal

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def _get_cors_origins() -> list[str]:
    """Allowed browser origins for the current ENVIRONMENT."""
    origins = settings.cors_origins()

    if not origins and settings.is_production():
        logger.warning(
            "CORS_ALLOWED_ORIGINS not set in production. "
            "No web origins allowed. Set CORS_ALLOWED_ORIGINS for the dashboard."
        )
    else:
        logger.info(f"CORS configured for {settings.ENVIRONMENT}: {origins}")

    return origins


app = FastAPI(
    title="Invoice Dashboard API",
    description="Data layer for the invoicing dashboard: invoice actions, dashboard queries and login",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log detailed validation errors for query/path parameters."""
    logger.error(
        f"Validation error on {request.method} {request.url.path}: {exc.errors()}"
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "details": jsonable_encoder(exc.errors()),
        }
    )


@app.exception_handler(RedirectSignal)
async def redirect_signal_handler(request: Request, exc: RedirectSignal):
    """Complete a control transfer requested by an action."""
    logger.info(f"{request.method} {request.url.path} -> redirect {exc.path}")
    return RedirectResponse(url=exc.path, status_code=status.HTTP_303_SEE_OTHER)


app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(auth_router)
app.include_router(dashboard_router)
app.include_router(invoices_router)
app.include_router(customers_router)

logger.info("FastAPI app initialized successfully")
