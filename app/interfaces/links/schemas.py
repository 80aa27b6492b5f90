"""
Pydantic schemas for link bundle API request/response validation.

These schemas enforce input validation and define the API contract.
Keys are camelCase on the wire; snake_case is accepted on input.
No business logic belongs here.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.application.links.dtos import LinkBundleSummary
from app.domain.links.entities import Link, LinkBundle


class CamelModel(BaseModel):
    """Base schema serialising field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LinkSchema(CamelModel):
    """A single link, as sent and returned by the API."""

    id: str = Field(..., min_length=1, description="Link identifier")
    url: str = Field(..., min_length=1, description="Target URL")
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None

    @classmethod
    def from_entity(cls, link: Link) -> "LinkSchema":
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


class CreateLinkBundleRequest(CamelModel):
    """Request schema for creating a bundle.

    Attributes:
        id: Optional bundle identifier; generated when omitted.
        user_id: Accepted for compatibility and ignored. The owner is
            always the authenticated caller.
        vanity_url: Optional vanity URL; a random one is generated when blank.
        description: Free-text description.
        links: Links to publish. An empty list is rejected with 400.
    """

    id: Optional[str] = Field(default=None, min_length=1)
    user_id: Optional[str] = None
    vanity_url: Optional[str] = None
    description: str = ""
    links: list[LinkSchema] = Field(default_factory=list)


class LinkBundleResponse(CamelModel):
    """Response schema for a full bundle."""

    id: str
    user_id: str
    vanity_url: str
    description: str
    links: list[LinkSchema]

    @classmethod
    def from_entity(cls, bundle: LinkBundle) -> "LinkBundleResponse":
        return cls(
            id=bundle.id,
            user_id=bundle.user_id,
            vanity_url=bundle.vanity_url,
            description=bundle.description,
            links=[LinkSchema.from_entity(link) for link in bundle.links],
        )


class LinkBundleSummaryItem(CamelModel):
    """A bundle as listed for its owner: no link contents."""

    user_id: str
    vanity_url: str
    description: str
    link_count: int

    @classmethod
    def from_summary(cls, summary: LinkBundleSummary) -> "LinkBundleSummaryItem":
        return cls(
            user_id=summary.user_id,
            vanity_url=summary.vanity_url,
            description=summary.description,
            link_count=summary.link_count,
        )


class JsonPatchOperation(BaseModel):
    """One RFC 6902 operation of a PATCH request body."""

    model_config = ConfigDict(populate_by_name=True)

    op: Literal["add", "remove", "replace", "move", "copy", "test"]
    path: str
    value: Any = None
    from_: Optional[str] = Field(default=None, alias="from")

    def to_edit(self) -> dict[str, Any]:
        """Return the operation as a plain JSON Patch dict.

        A null ``from`` is left out, so move and copy without a source are
        rejected by the patcher as malformed. A null ``value`` is kept.
        """
        edit = self.model_dump(by_alias=True, exclude_unset=True)
        if edit.get("from") is None:
            edit.pop("from", None)
        return edit
