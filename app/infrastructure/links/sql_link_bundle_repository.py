"""
Adapter: Link bundle repository over SQL.

Implements LinkBundleRepository port.
Reads/writes the link_bundles table. Links are stored as a JSON array
in a text column; vanity URL uniqueness comes from the table's unique
constraint.
"""

import json
import logging
from typing import Any, Optional

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from app.domain.links.entities import LinkBundle
from app.domain.links.errors import DuplicateLinkBundleError, LinkBundleStoreError
from app.domain.links.ports import LinkBundleRepository
from app.infrastructure.links.documents import LinkDocument

logger = logging.getLogger(__name__)

_COLUMNS = "id, user_id, vanity_url, description, links"


def _row_to_bundle(row: Any) -> LinkBundle:
    """Map a link_bundles row to a LinkBundle entity."""
    return LinkBundle(
        id=row[0],
        user_id=row[1],
        vanity_url=row[2],
        description=row[3],
        links=tuple(
            LinkDocument.model_validate(item).to_entity()
            for item in json.loads(row[4])
        ),
    )


def _bundle_params(bundle: LinkBundle) -> dict[str, Any]:
    """Map a LinkBundle entity to statement parameters."""
    links = [
        LinkDocument.from_entity(link).model_dump(by_alias=True)
        for link in bundle.links
    ]
    return {
        "id": bundle.id,
        "user_id": bundle.user_id,
        "vanity_url": bundle.vanity_url,
        "description": bundle.description,
        "links": json.dumps(links),
    }


class SqlLinkBundleRepository(LinkBundleRepository):
    """SQLAlchemy (asyncio) adapter for the link_bundles table."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def _fetch(self, operation: str, query: str, params: dict[str, Any]) -> list[Any]:
        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(text(query), params)
                return list(result.fetchall())
        except SQLAlchemyError as exc:
            logger.error("Bundle store %s failed: %s", operation, type(exc).__name__)
            raise LinkBundleStoreError(operation, str(exc)) from exc

    async def _write(self, operation: str, query: str, params: dict[str, Any]) -> int:
        try:
            async with self._engine.begin() as conn:
                result = await conn.execute(text(query), params)
                return result.rowcount
        except IntegrityError as exc:
            raise DuplicateLinkBundleError(params["id"], str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            logger.error("Bundle store %s failed: %s", operation, type(exc).__name__)
            raise LinkBundleStoreError(operation, str(exc)) from exc

    async def exists_by_id(self, bundle_id: str) -> bool:
        """Return True if a bundle with this identifier is stored."""
        rows = await self._fetch(
            "exists_by_id",
            "SELECT 1 FROM link_bundles WHERE id = :id",
            {"id": bundle_id},
        )
        return bool(rows)

    async def list_all(self) -> list[LinkBundle]:
        """Return every stored bundle ordered by vanity URL."""
        rows = await self._fetch(
            "list_all",
            f"SELECT {_COLUMNS} FROM link_bundles ORDER BY vanity_url ASC",
            {},
        )
        return [_row_to_bundle(r) for r in rows]

    async def find_by_vanity_url(self, vanity_url: str) -> Optional[LinkBundle]:
        """Return the bundle published under a vanity URL, or None."""
        rows = await self._fetch(
            "find_by_vanity_url",
            f"SELECT {_COLUMNS} FROM link_bundles WHERE vanity_url = :vanity_url",
            {"vanity_url": vanity_url},
        )
        if not rows:
            return None
        return _row_to_bundle(rows[0])

    async def find_by_user(self, user_id: str) -> list[LinkBundle]:
        """Return all bundles owned by a user, ordered by vanity URL."""
        rows = await self._fetch(
            "find_by_user",
            f"""
            SELECT {_COLUMNS}
            FROM link_bundles
            WHERE user_id = :user_id
            ORDER BY vanity_url ASC
            """,
            {"user_id": user_id},
        )
        return [_row_to_bundle(r) for r in rows]

    async def create(self, bundle: LinkBundle) -> None:
        """Insert a new bundle."""
        await self._write(
            "create",
            """
            INSERT INTO link_bundles (id, user_id, vanity_url, description, links)
            VALUES (:id, :user_id, :vanity_url, :description, :links)
            """,
            _bundle_params(bundle),
        )
        logger.debug("Inserted link bundle id=%s", bundle.id)

    async def update(self, bundle: LinkBundle) -> None:
        """Replace the stored bundle with the same identifier."""
        updated = await self._write(
            "update",
            """
            UPDATE link_bundles
            SET user_id = :user_id,
                vanity_url = :vanity_url,
                description = :description,
                links = :links
            WHERE id = :id
            """,
            _bundle_params(bundle),
        )
        if updated == 0:
            raise LinkBundleStoreError("update", f"no row with id {bundle.id}")

    async def delete(self, bundle: LinkBundle) -> None:
        """Remove the stored bundle with the same identifier."""
        await self._write(
            "delete",
            "DELETE FROM link_bundles WHERE id = :id",
            {"id": bundle.id},
        )
