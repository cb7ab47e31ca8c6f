"""
Application entry point.

Creates the FastAPI application and wires together:
- The ledger router
- One user store and one order store per application instance
- Error handlers (centralized error-to-HTTP mapping)
- Security headers middleware
- Logging configuration

No business logic belongs here. Serve with ``uvicorn app.main:app``.
"""

from fastapi import FastAPI

from app.core.config import Settings, settings
from app.infrastructure.ledger.order_store import InMemoryOrderStore
from app.infrastructure.ledger.user_store import InMemoryUserStore
from app.interfaces.ledger.router import router as ledger_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application. Every call builds
    fresh, empty stores, so separate instances never share state.

    Args:
        app_settings: Settings to use instead of the environment-loaded ones.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    configure_logging(level=app_settings.log_level)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        openapi_url="/openapi.json" if app_settings.debug else None,
        # Routes match exactly; "/api/add_user/" must not redirect to "/api/add_user"
        redirect_slashes=False,
    )

    # --- Stores ---
    app.state.settings = app_settings
    app.state.user_store = InMemoryUserStore()
    app.state.order_store = InMemoryOrderStore()

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(ledger_router, prefix=app_settings.api_prefix)

    return app


app = create_app()
