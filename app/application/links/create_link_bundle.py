"""
Use case: Create a link bundle owned by the caller.

Input: CreateLinkBundleCommand (links, vanity_url, description, bundle_id)
Output: LinkBundle (as stored)
Side effects: Inserts one bundle into the store.
Failure cases: InvalidLinkBundleError, LinkBundleConflictError,
    DuplicateLinkBundleError (uniqueness violation other than the id),
    LinkBundleStoreError.
"""

import logging

from app.application.links.dtos import CreateLinkBundleCommand
from app.domain.links.entities import LinkBundle, new_bundle_id
from app.domain.links.errors import (
    DuplicateLinkBundleError,
    InvalidLinkBundleError,
    LinkBundleConflictError,
)
from app.domain.links.ports import IdentityResolver, LinkBundleRepository
from app.domain.links.vanity_url import assign_vanity_url, is_valid_vanity_url

logger = logging.getLogger(__name__)


class CreateLinkBundleUseCase:
    """Orchestrates bundle creation.

    Validates the links, stamps the caller as owner, assigns and checks
    the vanity URL, then inserts. Uniqueness is left to the store; a
    uniqueness failure is reported as a conflict only when a bundle with
    the same id really exists.
    """

    def __init__(
        self,
        repo: LinkBundleRepository,
        identity: IdentityResolver,
    ) -> None:
        self._repo = repo
        self._identity = identity

    async def execute(self, command: CreateLinkBundleCommand) -> LinkBundle:
        """Run the create use case.

        Args:
            command: The bundle to create.

        Returns:
            The bundle exactly as it was handed to the store.

        Raises:
            InvalidLinkBundleError: If no links are given or the vanity URL
                is malformed.
            LinkBundleConflictError: If a bundle with the same id exists.
            DuplicateLinkBundleError: If the store rejected the insert for
                another uniqueness reason.
        """
        if not command.links:
            raise InvalidLinkBundleError("No links are provided")

        caller = await self._identity.resolve()

        vanity_url = assign_vanity_url(command.vanity_url)
        if not is_valid_vanity_url(vanity_url):
            raise InvalidLinkBundleError(f"Malformed vanity URL: {vanity_url!r}")

        bundle = LinkBundle(
            id=command.bundle_id or new_bundle_id(),
            user_id=caller or "",
            vanity_url=vanity_url,
            description=command.description,
            links=tuple(command.links),
        )

        try:
            await self._repo.create(bundle)
        except DuplicateLinkBundleError:
            if await self._repo.exists_by_id(bundle.id):
                logger.warning("Link bundle id already taken: id=%s", bundle.id)
                raise LinkBundleConflictError(bundle.id) from None
            raise

        logger.info(
            "Created link bundle id=%s vanity_url=%s links=%d",
            bundle.id,
            bundle.vanity_url,
            bundle.link_count,
        )
        return bundle
