"""Mind-map endpoints for the API."""

from typing import Union

from fastapi import APIRouter, Response, status
from fastapi.responses import JSONResponse

from outline2mm.config import MINDMAP_FILENAME, MINDMAP_MEDIA_TYPE
from outline2mm.utils.logging_config import get_logger
from server.mindmap_processor import build_markdown_preview, build_mindmap_file
from server.models import ErrorResponse, MarkdownResponse, MindmapRequest, OutlineRequest
from server.server_config import DOWNLOAD_ERROR_MESSAGE

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/api/mindmap/download",
    response_model=None,
    responses={
        status.HTTP_200_OK: {"content": {MINDMAP_MEDIA_TYPE: {}}, "description": "Freemind document"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def download_mindmap(
    mindmap_request: MindmapRequest,
) -> Union[Response, JSONResponse]:  # noqa: FA100 (future-rewritable-type-annotation) (pydantic)
    """Download outline notation as a Freemind mind map.

    **This endpoint converts the outline to a ``.mm`` document** and returns it
    as an attachment. Nothing is returned but a generic error message if the
    document cannot be built.

    **Parameters**

    - **mindmap_request** (`MindmapRequest`): Outline notation starting with the start marker

    **Returns**

    - **Response**: The document with media type ``application/x-freemind``
    - **JSONResponse**: **500** - the document could not be generated

    """
    try:
        content = build_mindmap_file(mindmap_request.outline)
    except Exception:
        logger.exception(
            "Mind map generation failed",
            extra={"outline_chars": len(mindmap_request.outline)},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=DOWNLOAD_ERROR_MESSAGE).model_dump(),
        )

    return Response(
        content=content,
        media_type=MINDMAP_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{MINDMAP_FILENAME}"'},
    )


@router.post("/api/mindmap/markdown", response_model=MarkdownResponse)
async def mindmap_markdown(outline_request: OutlineRequest) -> MarkdownResponse:
    """Render outline notation as Markdown headings.

    **Parameters**

    - **outline_request** (`OutlineRequest`): Outline notation

    **Returns**

    - **MarkdownResponse**: Markdown headings and the heading count

    """
    return build_markdown_preview(outline_request.outline)
