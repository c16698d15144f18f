# Content Writer: prompt templates per post type + streaming LLM writer
"""
Content Writer module for generating Korean side-hustle blog posts.

The prompt builders turn (post type, keyword, context) into a system and
user prompt; the writer streams the provider's answer chunk by chunk.
"""

from .catalog import EBOOK_CONTENT_RECOMMENDATIONS, POST_TYPES, image_recommendations
from .models import LLMProvider, PostTypeInfo, WriterConfig
from .prompts import (
    NO_FRAMEWORK_TOKEN,
    SUGGESTIONS_MARKER,
    build_user_prompt,
    get_system_prompt,
)
from .writer import ContentWriter

__all__ = [
    "ContentWriter",
    "EBOOK_CONTENT_RECOMMENDATIONS",
    "LLMProvider",
    "NO_FRAMEWORK_TOKEN",
    "POST_TYPES",
    "PostTypeInfo",
    "SUGGESTIONS_MARKER",
    "WriterConfig",
    "build_user_prompt",
    "get_system_prompt",
    "image_recommendations",
]
