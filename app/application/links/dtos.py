"""
Data Transfer Objects for the links application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from app.domain.links.entities import Link


@dataclass(frozen=True)
class GetLinkBundleQuery:
    """Input DTO for looking up a bundle by its vanity URL."""

    vanity_url: str


@dataclass(frozen=True)
class ListUserLinkBundlesQuery:
    """Input DTO for listing the bundles owned by a user.

    Attributes:
        user_id: Handle of the user whose bundles are requested.
    """

    user_id: str


@dataclass(frozen=True)
class LinkBundleSummary:
    """Output DTO projecting a bundle without its link contents.

    Attributes:
        user_id: Owner handle.
        vanity_url: Public lookup key.
        description: Free-text description.
        link_count: Number of links in the bundle.
    """

    user_id: str
    vanity_url: str
    description: str
    link_count: int


@dataclass(frozen=True)
class CreateLinkBundleCommand:
    """Input DTO for creating a bundle.

    Has no owner field: the owner is always the resolved caller.

    Attributes:
        links: Links to publish, in order. Must not be empty.
        vanity_url: Requested vanity URL; blank means "generate one".
        description: Free-text description.
        bundle_id: Optional caller-chosen identifier.
    """

    links: tuple[Link, ...]
    vanity_url: Optional[str] = None
    description: str = ""
    bundle_id: Optional[str] = None


@dataclass(frozen=True)
class DeleteLinkBundleCommand:
    """Input DTO for deleting a bundle."""

    vanity_url: str


@dataclass(frozen=True)
class PatchLinkBundleCommand:
    """Input DTO for applying a set of edits to a bundle.

    Attributes:
        vanity_url: Vanity URL of the bundle to edit.
        edits: JSON Patch operations, applied in order.
    """

    vanity_url: str
    edits: list[dict[str, Any]] = field(default_factory=list)
