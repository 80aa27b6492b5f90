"""
Port interfaces (ABCs) for the links bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from app.domain.links.entities import LinkBundle


class LinkBundleRepository(ABC):
    """Port for persisting and retrieving link bundles.

    Vanity URL uniqueness is enforced by the store itself, not by callers.
    """

    @abstractmethod
    async def exists_by_id(self, bundle_id: str) -> bool:
        """Return True if a bundle with this identifier is stored."""
        raise NotImplementedError

    @abstractmethod
    async def list_all(self) -> list[LinkBundle]:
        """Return every stored bundle."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_vanity_url(self, vanity_url: str) -> Optional[LinkBundle]:
        """Return the bundle published under a vanity URL, or None."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_user(self, user_id: str) -> list[LinkBundle]:
        """Return all bundles owned by a user."""
        raise NotImplementedError

    @abstractmethod
    async def create(self, bundle: LinkBundle) -> None:
        """Persist a new bundle.

        Raises:
            DuplicateLinkBundleError: If a uniqueness constraint is violated.
            LinkBundleStoreError: On any other storage failure.
        """
        raise NotImplementedError

    @abstractmethod
    async def update(self, bundle: LinkBundle) -> None:
        """Replace a stored bundle, matched by identifier."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, bundle: LinkBundle) -> None:
        """Remove a stored bundle."""
        raise NotImplementedError


class IdentityResolver(ABC):
    """Port for resolving the caller of the current request."""

    @abstractmethod
    async def resolve(self) -> Optional[str]:
        """Return the caller's opaque handle, or None if unauthenticated."""
        raise NotImplementedError


class LinkBundlePatcher(ABC):
    """Port for overlaying a set of field edits onto a bundle."""

    @abstractmethod
    def apply(self, bundle: LinkBundle, edits: list[dict[str, Any]]) -> LinkBundle:
        """Return a new bundle with the edits applied.

        Raises:
            InvalidLinkBundleError: If the edits are malformed or the
                resulting bundle fails field validation.
        """
        raise NotImplementedError
