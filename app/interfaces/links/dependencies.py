"""
Dependency injection for the links bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the links context.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine

from app.application.links.create_link_bundle import CreateLinkBundleUseCase
from app.application.links.delete_link_bundle import DeleteLinkBundleUseCase
from app.application.links.get_link_bundle import GetLinkBundleUseCase
from app.application.links.list_link_bundles import ListLinkBundlesUseCase
from app.application.links.list_user_link_bundles import ListUserLinkBundlesUseCase
from app.application.links.patch_link_bundle import PatchLinkBundleUseCase
from app.core.config import settings
from app.domain.links.ports import IdentityResolver, LinkBundlePatcher, LinkBundleRepository
from app.infrastructure.links.header_identity_resolver import HeaderIdentityResolver
from app.infrastructure.links.json_patch_applier import JsonPatchApplier
from app.infrastructure.links.sql_link_bundle_repository import SqlLinkBundleRepository


def get_db_engine(request: Request) -> AsyncEngine:
    """Return the engine opened by the application lifespan."""
    return request.app.state.db_engine


def get_link_bundle_repository(
    engine: AsyncEngine = Depends(get_db_engine),
) -> LinkBundleRepository:
    """Build the bundle store adapter."""
    return SqlLinkBundleRepository(engine=engine)


def get_identity_resolver(request: Request) -> IdentityResolver:
    """Build the identity resolver for the current request."""
    return HeaderIdentityResolver(
        request.headers,
        principal_header=settings.identity_header,
        provider_header=settings.identity_provider_header,
    )


def get_link_bundle_patcher() -> LinkBundlePatcher:
    """Build the patch applier."""
    return JsonPatchApplier()


def get_list_link_bundles_use_case(
    repo: LinkBundleRepository = Depends(get_link_bundle_repository),
) -> ListLinkBundlesUseCase:
    """Build ListLinkBundlesUseCase with its infrastructure dependencies."""
    return ListLinkBundlesUseCase(repo=repo)


def get_link_bundle_use_case(
    repo: LinkBundleRepository = Depends(get_link_bundle_repository),
) -> GetLinkBundleUseCase:
    """Build GetLinkBundleUseCase with its infrastructure dependencies."""
    return GetLinkBundleUseCase(repo=repo)


def get_list_user_link_bundles_use_case(
    repo: LinkBundleRepository = Depends(get_link_bundle_repository),
    identity: IdentityResolver = Depends(get_identity_resolver),
) -> ListUserLinkBundlesUseCase:
    """Build ListUserLinkBundlesUseCase with its infrastructure dependencies."""
    return ListUserLinkBundlesUseCase(repo=repo, identity=identity)


def get_create_link_bundle_use_case(
    repo: LinkBundleRepository = Depends(get_link_bundle_repository),
    identity: IdentityResolver = Depends(get_identity_resolver),
) -> CreateLinkBundleUseCase:
    """Build CreateLinkBundleUseCase with its infrastructure dependencies."""
    return CreateLinkBundleUseCase(repo=repo, identity=identity)


def get_delete_link_bundle_use_case(
    repo: LinkBundleRepository = Depends(get_link_bundle_repository),
    identity: IdentityResolver = Depends(get_identity_resolver),
) -> DeleteLinkBundleUseCase:
    """Build DeleteLinkBundleUseCase with its infrastructure dependencies."""
    return DeleteLinkBundleUseCase(repo=repo, identity=identity)


def get_patch_link_bundle_use_case(
    repo: LinkBundleRepository = Depends(get_link_bundle_repository),
    identity: IdentityResolver = Depends(get_identity_resolver),
    patcher: LinkBundlePatcher = Depends(get_link_bundle_patcher),
) -> PatchLinkBundleUseCase:
    """Build PatchLinkBundleUseCase with its infrastructure dependencies."""
    return PatchLinkBundleUseCase(repo=repo, identity=identity, patcher=patcher)
