"""
Centralized error handlers for FastAPI.

Maps domain-specific and parsing errors to HTTP responses.
Rejections of ledger requests carry an empty body; the reason is
only logged. No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.ledger.errors import LedgerDomainError, UnknownUserError
from app.interfaces.ledger.parsing import BadRequestError
from app.interfaces.ledger.schemas import ErrorResponse

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_403 = 403
HTTP_404 = 404
HTTP_405 = 405
HTTP_500 = 500


def _error_response(status_code: int, error: str) -> JSONResponse:
    """Build a JSON error response for unexpected failures."""
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=error).model_dump()
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all ledger error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(BadRequestError)
    async def handle_bad_request(request: Request, exc: BadRequestError) -> Response:
        """Handle bodies that are not JSON or miss a required field."""
        logger.warning("Bad request on %s: %s", request.url.path, exc.reason)
        return Response(status_code=HTTP_400)

    @app.exception_handler(UnknownUserError)
    async def handle_unknown_user(request: Request, exc: UnknownUserError) -> Response:
        """Handle references to users that were never registered."""
        logger.warning("Unauthorized on %s: user=%s", request.url.path, exc.user_id)
        return Response(status_code=HTTP_403)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        """Routing is an exact (method, path) match: a known path with the
        wrong method is reported as not found, like any unknown path."""
        if exc.status_code in (HTTP_404, HTTP_405):
            logger.debug("No route for %s %s", request.method, request.url.path)
            return Response(status_code=HTTP_404)
        return Response(status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(LedgerDomainError)
    async def handle_ledger_domain(
        _request: Request, exc: LedgerDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled ledger domain errors."""
        logger.error("Unhandled ledger domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
