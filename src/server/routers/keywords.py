"""Keyword extraction endpoint for the API."""

from fastapi import APIRouter

from outline2mm.keywords import extract_keywords
from outline2mm.utils.logging_config import get_logger
from server.models import KeywordsRequest, KeywordsResponse

logger = get_logger(__name__)

router = APIRouter()


@router.post("/api/keywords", response_model=KeywordsResponse)
async def api_keywords(keywords_request: KeywordsRequest) -> KeywordsResponse:
    """Extract keywords from a language-model completion.

    **This endpoint never fails on malformed model output;** text that cannot be
    read as a keyword list yields an empty list.

    **Parameters**

    - **keywords_request** (`KeywordsRequest`): Raw completion text and options

    **Returns**

    - **KeywordsResponse**: Extracted keywords in their original order

    """
    keywords = extract_keywords(keywords_request.text, deduplicate=keywords_request.deduplicate)
    logger.info(
        "Keywords extracted",
        extra={"input_chars": len(keywords_request.text), "keywords": len(keywords)},
    )
    return KeywordsResponse(keywords=keywords)
