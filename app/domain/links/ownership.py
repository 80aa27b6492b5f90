"""
Ownership rules for link bundles.

Identity handles are opaque tokens. They are compared case-insensitively
and an empty handle never identifies anyone.
"""

from typing import Optional

from app.domain.links.entities import LinkBundle


def normalize_handle(handle: Optional[str]) -> str:
    """Return the canonical form of a user handle ("" when absent)."""
    return (handle or "").strip().casefold()


def same_user(handle: Optional[str], other: Optional[str]) -> bool:
    """Return True if both handles are present and name the same user."""
    left = normalize_handle(handle)
    return bool(left) and left == normalize_handle(other)


def is_owner(handle: Optional[str], bundle: LinkBundle) -> bool:
    """Return True if ``handle`` owns ``bundle``."""
    return same_user(handle, bundle.user_id)
