"""
Use case: Delete a link bundle owned by the caller.

Input: DeleteLinkBundleCommand (vanity_url)
Output: None
Side effects: Removes one bundle from the store.
Failure cases: AuthenticationRequiredError, LinkBundleNotFoundError,
    AccessDeniedError, LinkBundleStoreError.
"""

import logging

from app.application.links.access import load_owned_bundle, require_caller
from app.application.links.dtos import DeleteLinkBundleCommand
from app.domain.links.ports import IdentityResolver, LinkBundleRepository

logger = logging.getLogger(__name__)


class DeleteLinkBundleUseCase:
    """Deletes a bundle after the identity and ownership checks pass."""

    def __init__(
        self,
        repo: LinkBundleRepository,
        identity: IdentityResolver,
    ) -> None:
        self._repo = repo
        self._identity = identity

    async def execute(self, command: DeleteLinkBundleCommand) -> None:
        """Run the delete use case."""
        caller = await require_caller(self._identity)
        bundle = await load_owned_bundle(self._repo, caller, command.vanity_url)

        await self._repo.delete(bundle)
        logger.info("Deleted link bundle id=%s vanity_url=%s", bundle.id, bundle.vanity_url)
