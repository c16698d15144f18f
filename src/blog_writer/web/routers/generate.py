"""
Generate Router
===============
POST /api/generate: validate, build prompts, relay the provider stream.
GET  /api/post-types: catalog shown next to the input form.
"""
from __future__ import annotations

from typing import Iterator, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, StreamingResponse
from starlette.concurrency import run_in_threadpool

from blog_writer.common.errors import (
    AUTH_ERROR_MESSAGE,
    GENERATION_ERROR_PREFIX,
    BlogWriterError,
    ProviderAuthError,
    RequestValidationError,
    classify_provider_exception,
)
from blog_writer.common.logging import setup_logging
from blog_writer.common.models import GenerationRequest
from blog_writer.content_writer import (
    EBOOK_CONTENT_RECOMMENDATIONS,
    POST_TYPES,
    ContentWriter,
)
from blog_writer.web.dependencies import get_writer

logger = setup_logging(module_name="web.generate")

router = APIRouter()

STREAM_MEDIA_TYPE = "text/plain; charset=utf-8"


def error_response(exc: BlogWriterError) -> JSONResponse:
    """Map a BlogWriterError onto the {error} JSON body and its status code."""
    if isinstance(exc, RequestValidationError):
        message = exc.message
    elif isinstance(exc, ProviderAuthError):
        message = AUTH_ERROR_MESSAGE
    else:
        message = f"{GENERATION_ERROR_PREFIX}: {exc.message}"
    return JSONResponse(status_code=exc.status_code, content={"error": message})


def _relay(first: Optional[str], chunks: Iterator[str]) -> Iterator[str]:
    """Yield the primed first chunk, then the rest of the provider stream."""
    try:
        if first:
            yield first
        for chunk in chunks:
            yield chunk
    except BlogWriterError as exc:
        # Headers are already sent; aborting the body is the only signal left.
        logger.error("Provider stream broke mid-response: %s", exc.message)
        raise
    finally:
        close = getattr(chunks, "close", None)
        if close is not None:
            close()


@router.post("/generate")
async def generate(request: Request, writer: ContentWriter = Depends(get_writer)):
    """
    Generate a blog post and stream it back as plain text.

    - **postType**: challenge | info | daily | ebook
    - **keyword**: main keyword / topic (required)
    - **context**: my situation / experience (optional)
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    try:
        generation_request = GenerationRequest.from_payload(payload)
    except RequestValidationError as exc:
        logger.warning("Rejected generation request: %s", exc.message)
        return error_response(exc)

    chunks = writer.generate(generation_request)
    try:
        # Pull the first chunk before responding so connection-time
        # failures still get a proper status code.
        first = await run_in_threadpool(next, chunks, None)
    except Exception as exc:
        error = classify_provider_exception(exc)
        logger.error("글 생성 오류 (%s): %s", error.__class__.__name__, error.message)
        return error_response(error)

    return StreamingResponse(_relay(first, chunks), media_type=STREAM_MEDIA_TYPE)


@router.get("/post-types")
async def list_post_types():
    """Post type catalog: names, placeholders and default image ideas."""
    return {
        "postTypes": [info.to_dict() for info in POST_TYPES.values()],
        "ebookContentRecommendations": list(EBOOK_CONTENT_RECOMMENDATIONS),
    }
