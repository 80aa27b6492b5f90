"""
Use case: Get a link bundle by its vanity URL.

Input: GetLinkBundleQuery (vanity_url)
Output: LinkBundle
Side effects: None.
Failure cases: LinkBundleNotFoundError.
"""

import logging

from app.application.links.dtos import GetLinkBundleQuery
from app.domain.links.entities import LinkBundle
from app.domain.links.errors import LinkBundleNotFoundError
from app.domain.links.ports import LinkBundleRepository
from app.domain.links.vanity_url import normalize_vanity_url

logger = logging.getLogger(__name__)


class GetLinkBundleUseCase:
    """Looks up a bundle by vanity URL. Bundles are publicly readable."""

    def __init__(self, repo: LinkBundleRepository) -> None:
        self._repo = repo

    async def execute(self, query: GetLinkBundleQuery) -> LinkBundle:
        """Run the lookup.

        Args:
            query: The vanity URL to look up.

        Returns:
            The matching bundle.

        Raises:
            LinkBundleNotFoundError: If no bundle has this vanity URL.
        """
        bundle = await self._repo.find_by_vanity_url(
            normalize_vanity_url(query.vanity_url)
        )
        if bundle is None:
            raise LinkBundleNotFoundError(query.vanity_url)
        return bundle
