"""
Export Router - Build and download ProPresenter archives.

Provides:
- POST /export/propresenter - Build the playlist zip and return it as a download
- GET /export/translations - Selectable Bible translations
- GET /export/profiles - Available output profiles
"""

from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response
from loguru import logger

from ...config import BIBLE_TRANSLATIONS, PROFILES
from ...exceptions import ExportError
from ...exporter import generate_archive
from ..dependencies import get_export_config, settings
from ..schemas import ErrorResponse, ExportRequest, ProfilesResponse, TranslationsResponse


router = APIRouter(prefix="/export", tags=["Export"])


# =============================================================================
# METADATA ENDPOINTS
# =============================================================================


@router.get(
    "/translations",
    response_model=TranslationsResponse,
    summary="List Bible translations",
)
async def list_translations() -> TranslationsResponse:
    return TranslationsResponse(
        translations=BIBLE_TRANSLATIONS,
        default=BIBLE_TRANSLATIONS[0],
    )


@router.get(
    "/profiles",
    response_model=ProfilesResponse,
    summary="List output profiles",
)
async def list_profiles() -> ProfilesResponse:
    return ProfilesResponse(profiles=list(PROFILES), default=settings.DEFAULT_PROFILE)


# =============================================================================
# DOWNLOAD ENDPOINT
# =============================================================================


@router.post(
    "/propresenter",
    summary="Download ProPresenter playlist",
    response_class=Response,
    responses={
        200: {"content": {"application/zip": {}}, "description": "Zip archive"},
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def export_propresenter(request: ExportRequest) -> Response:
    """
    Build the ProPresenter bundle for the given schedule.

    The zip contains one .pro6 file per song/scripture entry and a single
    .pro6plx playlist. Nothing is returned unless the whole archive was built.
    """
    if not request.entries:
        raise HTTPException(status_code=400, detail="Playlist is empty")

    loading = [entry.title for entry in request.entries if entry.is_loading]
    if loading:
        raise HTTPException(
            status_code=409,
            detail=f"Content still loading for: {', '.join(loading)}",
        )

    try:
        config = get_export_config(request.profile or "")
    except KeyError as e:
        raise HTTPException(status_code=400, detail=str(e.args[0]))

    try:
        result = await run_in_threadpool(
            generate_archive, request.entries, request.translation, config
        )
    except ExportError as e:
        logger.error(f"Export failed: {e}")
        raise HTTPException(status_code=500, detail="Failed to create the playlist zip")

    logger.info(f"📥 Download: {result.filename} ({len(result.content)} bytes)")
    return Response(
        content=result.content,
        media_type=result.media_type,
        headers={"Content-Disposition": f'attachment; filename="{result.filename}"'},
    )
