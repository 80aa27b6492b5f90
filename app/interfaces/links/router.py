"""
FastAPI router for the links bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from urllib.parse import quote

from fastapi import APIRouter, Depends, Request, Response

from app.application.links.create_link_bundle import CreateLinkBundleUseCase
from app.application.links.delete_link_bundle import DeleteLinkBundleUseCase
from app.application.links.dtos import (
    CreateLinkBundleCommand,
    DeleteLinkBundleCommand,
    GetLinkBundleQuery,
    ListUserLinkBundlesQuery,
    PatchLinkBundleCommand,
)
from app.application.links.get_link_bundle import GetLinkBundleUseCase
from app.application.links.list_link_bundles import ListLinkBundlesUseCase
from app.application.links.list_user_link_bundles import ListUserLinkBundlesUseCase
from app.application.links.patch_link_bundle import PatchLinkBundleUseCase
from app.interfaces.links.dependencies import (
    get_create_link_bundle_use_case,
    get_delete_link_bundle_use_case,
    get_link_bundle_use_case,
    get_list_link_bundles_use_case,
    get_list_user_link_bundles_use_case,
    get_patch_link_bundle_use_case,
)
from app.interfaces.links.schemas import (
    CreateLinkBundleRequest,
    JsonPatchOperation,
    LinkBundleResponse,
    LinkBundleSummaryItem,
)
from app.interfaces.schemas import ErrorResponse

router = APIRouter(prefix="/links", tags=["links"])

HTTP_201 = 201
HTTP_204 = 204


@router.get(
    "",
    response_model=list[LinkBundleResponse],
    summary="List all link bundles",
    description="Legacy endpoint returning every bundle, without authorization.",
    deprecated=True,
)
async def list_link_bundles(
    use_case: ListLinkBundlesUseCase = Depends(get_list_link_bundles_use_case),
) -> list[LinkBundleResponse]:
    """Return every stored bundle."""
    bundles = await use_case.execute()
    return [LinkBundleResponse.from_entity(b) for b in bundles]


@router.get(
    "/user/{user_id}",
    response_model=list[LinkBundleSummaryItem],
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="List a user's link bundles",
    description="List the caller's own bundles, without their links.",
)
async def list_user_link_bundles(
    user_id: str,
    use_case: ListUserLinkBundlesUseCase = Depends(get_list_user_link_bundles_use_case),
) -> list[LinkBundleSummaryItem]:
    """Return a summary of each bundle owned by ``user_id``."""
    summaries = await use_case.execute(ListUserLinkBundlesQuery(user_id=user_id))
    return [LinkBundleSummaryItem.from_summary(s) for s in summaries]


@router.get(
    "/{vanity_url:path}",
    response_model=LinkBundleResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a link bundle",
    description="Look up a bundle by its vanity URL.",
)
async def get_link_bundle(
    vanity_url: str,
    use_case: GetLinkBundleUseCase = Depends(get_link_bundle_use_case),
) -> LinkBundleResponse:
    """Return the bundle published under ``vanity_url``."""
    bundle = await use_case.execute(GetLinkBundleQuery(vanity_url=vanity_url))
    return LinkBundleResponse.from_entity(bundle)


@router.post(
    "",
    response_model=LinkBundleResponse,
    status_code=HTTP_201,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Create a link bundle",
    description="Create a bundle owned by the caller. A vanity URL is generated when none is given.",
)
async def create_link_bundle(
    payload: CreateLinkBundleRequest,
    request: Request,
    response: Response,
    use_case: CreateLinkBundleUseCase = Depends(get_create_link_bundle_use_case),
) -> LinkBundleResponse:
    """Create a bundle and point ``Location`` at its lookup URL."""
    command = CreateLinkBundleCommand(
        links=tuple(link.to_entity() for link in payload.links),
        vanity_url=payload.vanity_url,
        description=payload.description,
        bundle_id=payload.id,
    )
    bundle = await use_case.execute(command)
    # Header values are latin-1; vanity URLs may hold any Unicode word character.
    response.headers["Location"] = str(
        request.url_for("get_link_bundle", vanity_url=quote(bundle.vanity_url, safe="/"))
    )
    return LinkBundleResponse.from_entity(bundle)


@router.delete(
    "/{vanity_url:path}",
    status_code=HTTP_204,
    response_class=Response,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Delete a link bundle",
    description="Delete a bundle. Only its owner may do this.",
)
async def delete_link_bundle(
    vanity_url: str,
    use_case: DeleteLinkBundleUseCase = Depends(get_delete_link_bundle_use_case),
) -> Response:
    """Delete the bundle published under ``vanity_url``."""
    await use_case.execute(DeleteLinkBundleCommand(vanity_url=vanity_url))
    return Response(status_code=HTTP_204)


@router.patch(
    "/{vanity_url:path}",
    status_code=HTTP_204,
    response_class=Response,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Patch a link bundle",
    description="Apply a JSON Patch document to a bundle. Only its owner may do this.",
)
async def patch_link_bundle(
    vanity_url: str,
    operations: list[JsonPatchOperation],
    use_case: PatchLinkBundleUseCase = Depends(get_patch_link_bundle_use_case),
) -> Response:
    """Apply ``operations`` to the bundle published under ``vanity_url``."""
    command = PatchLinkBundleCommand(
        vanity_url=vanity_url,
        edits=[op.to_edit() for op in operations],
    )
    await use_case.execute(command)
    return Response(status_code=HTTP_204)
