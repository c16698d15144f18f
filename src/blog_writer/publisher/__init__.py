# Publisher: suggestion parsing, post-processing and HTML preview
"""
Publisher module for turning generated text into the result screen.

Splits off the AI suggestion block, extracts the title, builds keyword
variants, converts HTML to plain text for copying and renders an HTML
preview.
"""

from .models import AISuggestions, ParsedOutput, ResultView, TITLE_NOT_FOUND
from .processor import (
    PostProcessor,
    build_result_view,
    display_images,
    extract_title,
    generate_keywords,
    html_to_plain_text,
    sanitize_html,
)
from .renderer import PreviewRenderer, save_preview
from .suggestions import parse_ai_suggestions, strip_suggestions

__all__ = [
    "AISuggestions",
    "ParsedOutput",
    "PostProcessor",
    "PreviewRenderer",
    "ResultView",
    "TITLE_NOT_FOUND",
    "build_result_view",
    "display_images",
    "extract_title",
    "generate_keywords",
    "html_to_plain_text",
    "parse_ai_suggestions",
    "sanitize_html",
    "save_preview",
    "strip_suggestions",
]
