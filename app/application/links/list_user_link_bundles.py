"""
Use case: List the bundles owned by the calling user.

Input: ListUserLinkBundlesQuery (user_id)
Output: list[LinkBundleSummary]
Side effects: None.
Failure cases: AuthenticationRequiredError, LinkBundleNotFoundError.
"""

import logging

from app.application.links.dtos import LinkBundleSummary, ListUserLinkBundlesQuery
from app.domain.links.errors import AuthenticationRequiredError, LinkBundleNotFoundError
from app.domain.links.ports import IdentityResolver, LinkBundleRepository

logger = logging.getLogger(__name__)


class ListUserLinkBundlesUseCase:
    """Lists a user's bundles, only for that same user.

    The caller handle must equal the requested id exactly; handles are
    already normalized by the identity resolver.

    The result is a projection: owner, vanity URL, description and the
    number of links, never the links themselves.
    """

    def __init__(
        self,
        repo: LinkBundleRepository,
        identity: IdentityResolver,
    ) -> None:
        self._repo = repo
        self._identity = identity

    async def execute(self, query: ListUserLinkBundlesQuery) -> list[LinkBundleSummary]:
        """Run the per-user listing.

        Raises:
            AuthenticationRequiredError: If the caller is anonymous or is
                not the requested user.
            LinkBundleNotFoundError: If the user owns no bundles.
        """
        caller = await self._identity.resolve()
        if not caller or caller != query.user_id:
            raise AuthenticationRequiredError("Caller is not the requested user")

        bundles = await self._repo.find_by_user(query.user_id)
        if not bundles:
            raise LinkBundleNotFoundError(query.user_id)

        logger.info("Listed %d link bundles for caller", len(bundles))
        return [
            LinkBundleSummary(
                user_id=b.user_id,
                vanity_url=b.vanity_url,
                description=b.description,
                link_count=b.link_count,
            )
            for b in bundles
        ]
