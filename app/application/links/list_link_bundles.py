"""
Use case: List every stored link bundle.

Input: None
Output: list[LinkBundle]
Side effects: None.
Failure cases: None beyond store failures.
"""

import logging

from app.domain.links.entities import LinkBundle
from app.domain.links.ports import LinkBundleRepository

logger = logging.getLogger(__name__)


class ListLinkBundlesUseCase:
    """Returns all bundles, unfiltered and without any authorization.

    Legacy debugging endpoint kept for compatibility.
    """

    def __init__(self, repo: LinkBundleRepository) -> None:
        self._repo = repo

    async def execute(self) -> list[LinkBundle]:
        """Run the list-all use case."""
        # TODO: remove together with GET /links once clients stop calling it
        bundles = await self._repo.list_all()
        logger.info("Listed all link bundles: count=%d", len(bundles))
        return bundles
