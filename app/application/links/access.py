"""
Caller identity and ownership checks shared by the mutating use cases.

Both checks run before any store mutation is attempted.
"""

import logging

from app.domain.links.entities import LinkBundle
from app.domain.links.errors import (
    AccessDeniedError,
    AuthenticationRequiredError,
    LinkBundleNotFoundError,
)
from app.domain.links.ownership import is_owner
from app.domain.links.ports import IdentityResolver, LinkBundleRepository
from app.domain.links.vanity_url import normalize_vanity_url

logger = logging.getLogger(__name__)


async def require_caller(identity: IdentityResolver) -> str:
    """Return the resolved caller handle.

    Raises:
        AuthenticationRequiredError: If no identity could be resolved.
    """
    caller = await identity.resolve()
    if not caller:
        raise AuthenticationRequiredError()
    return caller


async def load_owned_bundle(
    repo: LinkBundleRepository, caller: str, vanity_url: str
) -> LinkBundle:
    """Fetch a bundle and check that ``caller`` owns it.

    Raises:
        LinkBundleNotFoundError: If no bundle has this vanity URL.
        AccessDeniedError: If the bundle belongs to someone else.
    """
    bundle = await repo.find_by_vanity_url(normalize_vanity_url(vanity_url))
    if bundle is None:
        raise LinkBundleNotFoundError(vanity_url)

    if not is_owner(caller, bundle):
        logger.warning("Ownership check failed for bundle vanity_url=%s", bundle.vanity_url)
        raise AccessDeniedError(bundle.vanity_url)

    return bundle
