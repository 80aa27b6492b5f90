"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.links.errors import (
    AccessDeniedError,
    AuthenticationRequiredError,
    InvalidLinkBundleError,
    LinkBundleConflictError,
    LinkBundleError,
    LinkBundleNotFoundError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_401 = 401
HTTP_403 = 403
HTTP_404 = 404
HTTP_409 = 409
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: Any = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, Any] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(InvalidLinkBundleError)
    async def handle_invalid_bundle(
        _request: Request, exc: InvalidLinkBundleError
    ) -> JSONResponse:
        """Handle payloads and patches that fail validation."""
        logger.warning("Invalid link bundle: %s", exc.reason)
        return _error_response(HTTP_400, exc.reason, exc.details or None)

    @app.exception_handler(AuthenticationRequiredError)
    async def handle_authentication_required(
        _request: Request, exc: AuthenticationRequiredError
    ) -> JSONResponse:
        """Handle anonymous or mismatched callers."""
        logger.warning("Unauthorized: %s", exc.reason)
        return _error_response(HTTP_401, "Unauthorized")

    @app.exception_handler(AccessDeniedError)
    async def handle_access_denied(
        _request: Request, exc: AccessDeniedError
    ) -> JSONResponse:
        """Handle mutations attempted by someone other than the owner."""
        logger.warning("Forbidden: bundle %s", exc.vanity_url)
        return _error_response(HTTP_403, "Forbidden")

    @app.exception_handler(LinkBundleNotFoundError)
    async def handle_not_found(
        _request: Request, exc: LinkBundleNotFoundError
    ) -> JSONResponse:
        """Handle unknown vanity URLs and users without bundles."""
        logger.info("Link bundle not found: %s", exc.key)
        return _error_response(HTTP_404, "Link bundle not found")

    @app.exception_handler(LinkBundleConflictError)
    async def handle_conflict(
        _request: Request, exc: LinkBundleConflictError
    ) -> JSONResponse:
        """Handle creation of a bundle whose id is already taken."""
        logger.warning("Link bundle conflict: %s", exc.bundle_id)
        return _error_response(HTTP_409, "Link bundle already exists")

    @app.exception_handler(LinkBundleError)
    async def handle_link_bundle(
        _request: Request, exc: LinkBundleError
    ) -> JSONResponse:
        """Catch-all for store failures and other link bundle errors."""
        logger.error("Unhandled link bundle error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
