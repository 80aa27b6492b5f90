"""
Builders for link bundle test data.
"""

from typing import Optional

from app.domain.links.entities import Link, LinkBundle


def make_link(link_id: str = "sample", url: str = "https://example.com") -> Link:
    return Link(id=link_id, url=url, title="Example")


def make_bundle(
    vanity_url: str = "samplelink",
    user_id: str = "userhash",
    bundle_id: str = "bundle-1",
    links: Optional[tuple[Link, ...]] = None,
) -> LinkBundle:
    return LinkBundle(
        id=bundle_id,
        user_id=user_id,
        vanity_url=vanity_url,
        description="Sample bundle",
        links=links if links is not None else (make_link(),),
    )
