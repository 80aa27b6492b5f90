"""
Document form of link bundles.

Bundles are stored and patched as JSON documents with camelCase keys.
These models convert between that form and the domain entities, and
validate documents produced by edits.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.domain.links.entities import Link, LinkBundle

_DOCUMENT_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="forbid",
)


class LinkDocument(BaseModel):
    """Stored form of a single link."""

    model_config = _DOCUMENT_CONFIG

    id: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None

    @classmethod
    def from_entity(cls, link: Link) -> "LinkDocument":
        return cls(
            id=link.id,
            url=link.url,
            title=link.title,
            description=link.description,
            image=link.image,
        )

    def to_entity(self) -> Link:
        return Link(
            id=self.id,
            url=self.url,
            title=self.title,
            description=self.description,
            image=self.image,
        )


class LinkBundleDocument(BaseModel):
    """Stored form of a bundle."""

    model_config = _DOCUMENT_CONFIG

    id: str = Field(..., min_length=1)
    user_id: str
    vanity_url: str
    description: str = ""
    links: list[LinkDocument]

    @classmethod
    def from_entity(cls, bundle: LinkBundle) -> "LinkBundleDocument":
        return cls(
            id=bundle.id,
            user_id=bundle.user_id,
            vanity_url=bundle.vanity_url,
            description=bundle.description,
            links=[LinkDocument.from_entity(link) for link in bundle.links],
        )

    def to_entity(self) -> LinkBundle:
        return LinkBundle(
            id=self.id,
            user_id=self.user_id,
            vanity_url=self.vanity_url,
            description=self.description,
            links=tuple(link.to_entity() for link in self.links),
        )
