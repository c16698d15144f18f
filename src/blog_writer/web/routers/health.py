"""
Health Router
=============
Liveness endpoint.
"""
from fastapi import APIRouter, Depends

from blog_writer import __version__
from blog_writer.common.models import HealthResponse
from blog_writer.content_writer import ContentWriter
from blog_writer.web.dependencies import get_writer

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(writer: ContentWriter = Depends(get_writer)):
    """Report that the API is up and which provider it talks to."""
    return HealthResponse(version=__version__, provider=writer.config.provider.value)
