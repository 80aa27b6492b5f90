"""
Adapter: Caller identity from trusted request headers.

Implements IdentityResolver port.
The authenticating reverse proxy in front of the API sets the principal
name header; this adapter turns it into a stable opaque handle.
"""

import hashlib
from collections.abc import Mapping
from typing import Optional

from app.domain.links.ports import IdentityResolver

DEFAULT_PRINCIPAL_HEADER = "X-MS-CLIENT-PRINCIPAL-NAME"
DEFAULT_PROVIDER_HEADER = "X-MS-CLIENT-PRINCIPAL-IDP"


class HeaderIdentityResolver(IdentityResolver):
    """Resolves the caller from request headers.

    The handle is the hex SHA-256 of the casefolded principal name,
    prefixed with the identity provider when that header is present, so
    the same account always maps to the same handle and raw account
    names are never stored.
    """

    def __init__(
        self,
        headers: Mapping[str, str],
        principal_header: str = DEFAULT_PRINCIPAL_HEADER,
        provider_header: str = DEFAULT_PROVIDER_HEADER,
    ) -> None:
        self._headers = headers
        self._principal_header = principal_header
        self._provider_header = provider_header

    async def resolve(self) -> Optional[str]:
        """Return the caller handle, or None when no principal is present."""
        principal = (self._headers.get(self._principal_header) or "").strip()
        if not principal:
            return None

        provider = (self._headers.get(self._provider_header) or "").strip()
        material = principal.casefold()
        if provider:
            material = f"{provider.casefold()}:{material}"

        return hashlib.sha256(material.encode("utf-8")).hexdigest()
