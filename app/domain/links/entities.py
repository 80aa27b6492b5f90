"""
Domain entities for the links bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from typing import Optional
from uuid import uuid4


def new_bundle_id() -> str:
    """Return a fresh identifier for a bundle the caller did not name."""
    return uuid4().hex


@dataclass(frozen=True)
class Link:
    """A single link inside a bundle."""

    id: str
    url: str
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None


@dataclass(frozen=True)
class LinkBundle:
    """A named, owned collection of links published under a vanity URL.

    The vanity URL is the public lookup key and is unique across all
    bundles. ``user_id`` is always assigned from the resolved caller
    identity, never from request input.
    """

    id: str = field(default_factory=new_bundle_id)
    user_id: str = ""
    vanity_url: str = ""
    description: str = ""
    links: tuple[Link, ...] = ()

    @property
    def link_count(self) -> int:
        """Return the number of links in the bundle."""
        return len(self.links)
