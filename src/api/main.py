import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.deps import get_rules, get_settings
from src.api.envelope import envelope_response, error_envelope
from src.app_shell.config import validate_shell_config
from src.shell.http.request_log import install_request_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and validate on startup (fail-fast)
    try:
        get_rules()
        validate_shell_config(settings)
    except Exception:
        logger.critical("Startup checks failed", exc_info=True)
        raise

    logger.info("Serving SecureMDM site (%s) on port %s", settings.env, settings.port)
    yield
    logger.info("Shutting down SecureMDM site")


# --- Exception handlers ---


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return envelope_response(exc.status_code, error_envelope(str(exc.detail)), request)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return envelope_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_envelope("Internal Server Error"),
        request,
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="SecureMDM Site API",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url=None,
        openapi_url="/api/openapi.json",
    )

    # --- Routers ---
    from src.api.routes import contact, newsletter, public_ssr, resources

    app.include_router(contact.router, prefix="/api", tags=["Contact"])
    app.include_router(newsletter.router, prefix="/api", tags=["Newsletter"])
    app.include_router(resources.router, prefix="/api", tags=["Resources"])

    @app.get("/health", tags=["Health"])
    def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "service": "api"}

    # Catch-all last so it never shadows API routes
    app.include_router(public_ssr.router, prefix="", tags=["SSR"])

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)

    install_request_logging(app, lambda: get_rules().http)

    return app


app = create_app()
