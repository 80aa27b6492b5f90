"""
Domain-specific errors for the links bounded context.

All errors raised from the domain and application layers are defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from typing import Any, Optional


class LinkBundleError(Exception):
    """Base error for all link bundle errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidLinkBundleError(LinkBundleError):
    """Raised when a bundle, or the result of a patch, fails validation."""

    def __init__(self, reason: str, details: Optional[list[dict[str, Any]]] = None) -> None:
        super().__init__(f"Invalid link bundle: {reason}")
        self.reason = reason
        self.details = details or []


class AuthenticationRequiredError(LinkBundleError):
    """Raised when the caller is not authenticated as the required user."""

    def __init__(self, reason: str = "No authenticated caller") -> None:
        super().__init__(reason)
        self.reason = reason


class AccessDeniedError(LinkBundleError):
    """Raised when the caller does not own the bundle it tries to change."""

    def __init__(self, vanity_url: str) -> None:
        super().__init__(f"Caller does not own bundle: {vanity_url}")
        self.vanity_url = vanity_url


class LinkBundleNotFoundError(LinkBundleError):
    """Raised when no bundle matches the requested key."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Link bundle not found: {key}")
        self.key = key


class LinkBundleConflictError(LinkBundleError):
    """Raised when a bundle with the same identifier already exists."""

    def __init__(self, bundle_id: str) -> None:
        super().__init__(f"Link bundle already exists: {bundle_id}")
        self.bundle_id = bundle_id


class DuplicateLinkBundleError(LinkBundleError):
    """Raised by a bundle store when a write violates a uniqueness constraint.

    The store cannot tell which constraint tripped in a portable way, so
    callers decide whether this is a true conflict.
    """

    def __init__(self, bundle_id: str, reason: str = "") -> None:
        super().__init__(f"Uniqueness violation for bundle {bundle_id}: {reason}")
        self.bundle_id = bundle_id
        self.reason = reason


class LinkBundleStoreError(LinkBundleError):
    """Raised when the bundle store fails for any other reason."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"Bundle store {operation} failed: {reason}")
        self.operation = operation
        self.reason = reason
