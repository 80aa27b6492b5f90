"""
Secure HTTP headers middleware.

Adds security-related headers to every response:
- X-Content-Type-Options
- X-Frame-Options
- Referrer-Policy
- Content-Security-Policy
- Cache-Control (only when the route did not set one)

Also rejects request bodies larger than the configured limit.
No business logic. Pure cross-cutting concern.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
}
DEFAULT_CACHE_CONTROL = "no-store"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds secure HTTP headers to every response.

    Requests whose declared Content-Length exceeds ``max_body_bytes``
    are answered with 413 before reaching any route.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int = 1_048_576) -> None:
        super().__init__(app)
        self._max_body_bytes = max_body_bytes

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Process request and add security headers to response."""
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self._max_body_bytes:
            response: Response = JSONResponse(
                status_code=413, content={"error": "Request body too large"}
            )
        else:
            response = await call_next(request)

        for header_name, header_value in SECURE_HEADERS.items():
            response.headers[header_name] = header_value
        response.headers.setdefault("Cache-Control", DEFAULT_CACHE_CONTROL)
        return response
