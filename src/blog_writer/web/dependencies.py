"""Shared FastAPI dependencies."""

from __future__ import annotations

from functools import lru_cache

from blog_writer.content_writer import ContentWriter


@lru_cache(maxsize=1)
def get_writer() -> ContentWriter:
    """One ContentWriter per process; it holds no per-request state."""
    return ContentWriter()
