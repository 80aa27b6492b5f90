"""
Adapter: JSON Patch applier.

Implements LinkBundlePatcher port.
Applies RFC 6902 operations to the document form of a bundle and
re-validates the result before turning it back into an entity.
"""

import logging
from typing import Any

import jsonpatch
import jsonpointer
from pydantic import ValidationError

from app.domain.links.entities import LinkBundle
from app.domain.links.errors import InvalidLinkBundleError
from app.domain.links.ports import LinkBundlePatcher
from app.infrastructure.links.documents import LinkBundleDocument

logger = logging.getLogger(__name__)


def _validation_details(exc: ValidationError) -> list[dict[str, Any]]:
    """Flatten pydantic errors into field/message pairs."""
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]


class JsonPatchApplier(LinkBundlePatcher):
    """Applies JSON Patch documents to bundles in memory."""

    def apply(self, bundle: LinkBundle, edits: list[dict[str, Any]]) -> LinkBundle:
        """Return the bundle with ``edits`` applied.

        Args:
            bundle: The bundle as currently stored.
            edits: JSON Patch operations.

        Returns:
            A new, validated bundle entity.

        Raises:
            InvalidLinkBundleError: If the patch cannot be applied or the
                patched document is not a valid bundle.
        """
        document = LinkBundleDocument.from_entity(bundle).model_dump(by_alias=True)

        try:
            patched = jsonpatch.apply_patch(document, edits)
        except (jsonpatch.JsonPatchException, jsonpointer.JsonPointerException) as exc:
            logger.warning("Rejected patch for bundle id=%s: %s", bundle.id, exc)
            raise InvalidLinkBundleError(
                "Patch could not be applied",
                details=[{"field": "", "message": str(exc)}],
            ) from exc

        try:
            return LinkBundleDocument.model_validate(patched).to_entity()
        except ValidationError as exc:
            raise InvalidLinkBundleError(
                "Patched bundle is invalid", details=_validation_details(exc)
            ) from exc
