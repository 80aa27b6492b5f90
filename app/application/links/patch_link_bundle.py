"""
Use case: Apply a set of edits to a link bundle owned by the caller.

Input: PatchLinkBundleCommand (vanity_url, edits)
Output: LinkBundle (as stored)
Side effects: Updates one bundle in the store.
Failure cases: AuthenticationRequiredError, LinkBundleNotFoundError,
    AccessDeniedError, InvalidLinkBundleError, LinkBundleStoreError.
"""

import logging
from dataclasses import replace

from app.application.links.access import load_owned_bundle, require_caller
from app.application.links.dtos import PatchLinkBundleCommand
from app.domain.links.entities import LinkBundle
from app.domain.links.errors import InvalidLinkBundleError
from app.domain.links.ports import IdentityResolver, LinkBundlePatcher, LinkBundleRepository
from app.domain.links.vanity_url import is_valid_vanity_url, normalize_vanity_url

logger = logging.getLogger(__name__)

READ_ONLY_FIELDS = ("id", "user_id")


class PatchLinkBundleUseCase:
    """Edits a bundle: apply the edit set, validate the result, then persist.

    Nothing is written unless the whole edited bundle is valid. The link
    list is not re-checked for emptiness here; only creation requires
    at least one link.
    """

    def __init__(
        self,
        repo: LinkBundleRepository,
        identity: IdentityResolver,
        patcher: LinkBundlePatcher,
    ) -> None:
        self._repo = repo
        self._identity = identity
        self._patcher = patcher

    async def execute(self, command: PatchLinkBundleCommand) -> LinkBundle:
        """Run the patch use case.

        Raises:
            AuthenticationRequiredError: If the caller is anonymous.
            LinkBundleNotFoundError: If no bundle has this vanity URL.
            AccessDeniedError: If the caller does not own the bundle.
            InvalidLinkBundleError: If the edits or their result are invalid.
        """
        caller = await require_caller(self._identity)
        bundle = await load_owned_bundle(self._repo, caller, command.vanity_url)

        edited = self._patcher.apply(bundle, command.edits)
        edited = self._validate(bundle, edited)

        await self._repo.update(edited)
        logger.info(
            "Patched link bundle id=%s vanity_url=%s operations=%d",
            edited.id,
            edited.vanity_url,
            len(command.edits),
        )
        return edited

    @staticmethod
    def _validate(original: LinkBundle, edited: LinkBundle) -> LinkBundle:
        errors = [
            {"field": name, "message": "Field is read-only"}
            for name in READ_ONLY_FIELDS
            if getattr(original, name) != getattr(edited, name)
        ]

        vanity_url = normalize_vanity_url(edited.vanity_url)
        if not is_valid_vanity_url(vanity_url):
            errors.append({"field": "vanity_url", "message": "Malformed vanity URL"})

        if errors:
            raise InvalidLinkBundleError("Patched bundle is invalid", details=errors)

        return replace(edited, vanity_url=vanity_url)
