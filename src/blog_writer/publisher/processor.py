"""Post-processor: turns generated HTML into what the result screen shows.

Handles:
- Title extraction (first <h2>)
- Recommended keyword variants
- HTML -> plain text for the copy action
- Sanitizing the body before it is rendered in a document
- Choosing AI or default image recommendations
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

from blog_writer.common.logging import setup_logging
from blog_writer.common.models import PostType
from blog_writer.content_writer.catalog import image_recommendations

from .models import AISuggestions, ResultView
from .suggestions import parse_ai_suggestions

logger = setup_logging(module_name="publisher.processor")

KEYWORD_SUFFIXES = ("후기", "방법", "수익", "현실", "팁")
MAX_KEYWORDS = 5

_TITLE_PATTERN = re.compile(r"<h2[^>]*>(.*?)</h2>", re.IGNORECASE | re.DOTALL)
# Real tag syntax only; a bare "<" or ">" in prose is text.
_TAG_PATTERN = re.compile(r"</?[A-Za-z!][^>]*>")

# Applied in order; entities last so decoded "<" never becomes a tag.
# &amp; goes after the others so "&amp;lt;" decodes once, to "&lt;".
_PLAIN_TEXT_STEPS: tuple[tuple[re.Pattern, str], ...] = (
    (re.compile(r"<h[1-6](\s[^>]*)?>", re.IGNORECASE), "\n\n"),
    (re.compile(r"</h[1-6]>", re.IGNORECASE), "\n"),
    (re.compile(r"<p(\s[^>]*)?>", re.IGNORECASE), ""),
    (re.compile(r"</p>", re.IGNORECASE), "\n\n"),
    (re.compile(r"<li(\s[^>]*)?>", re.IGNORECASE), "- "),
    (re.compile(r"</li>", re.IGNORECASE), "\n"),
    (re.compile(r"<br\s*/?>", re.IGNORECASE), "\n"),
    (_TAG_PATTERN, ""),
    (re.compile(r"&nbsp;"), " "),
    (re.compile(r"&lt;"), "<"),
    (re.compile(r"&gt;"), ">"),
    (re.compile(r"&quot;"), '"'),
    (re.compile(r"&amp;"), "&"),
    (re.compile(r"\n{3,}"), "\n\n"),
)

_UNSAFE_TAGS = ["script", "style", "iframe", "object", "embed"]


def extract_title(html: str) -> str:
    """Inner text of the first <h2>, tags stripped; '' when there is none."""
    match = _TITLE_PATTERN.search(html or "")
    if not match:
        return ""
    return _TAG_PATTERN.sub("", match.group(1)).strip()


def generate_keywords(keyword: str) -> list[str]:
    """Recommended keywords: the keyword itself plus fixed suffix variants.

    >>> generate_keywords("side hustle")[:2]
    ['side hustle', 'side hustle 후기']
    """
    base = (keyword or "").strip()
    if not base:
        return []
    variations = [base] + [f"{base} {suffix}" for suffix in KEYWORD_SUFFIXES]
    return variations[:MAX_KEYWORDS]


def html_to_plain_text(html: str) -> str:
    """Convert generated HTML to plain text, keeping paragraph breaks.

    Re-applying it to its own output changes nothing, except where an
    entity decodes into real tag syntax (``&lt;b&gt;`` becomes ``<b>``,
    which a second pass strips) or into another entity (``&amp;lt;``).
    """
    text = html or ""
    for pattern, replacement in _PLAIN_TEXT_STEPS:
        text = pattern.sub(replacement, text)
    return text.strip()


def sanitize_html(html: str) -> str:
    """Drop script-like elements, event handlers and javascript: URLs."""
    if not html:
        return ""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup.find_all(_UNSAFE_TAGS):
        tag.decompose()
    for tag in soup.find_all(True):
        for attr in list(tag.attrs):
            value = tag.attrs[attr]
            if attr.lower().startswith("on"):
                del tag.attrs[attr]
            elif isinstance(value, str) and value.strip().lower().startswith("javascript:"):
                del tag.attrs[attr]
    return str(soup)


def display_images(post_type: PostType | str, suggestions: AISuggestions) -> tuple[list[str], bool]:
    """Images to recommend and whether they came from the AI block.

    E-book chapters use the model's image ideas when it gave any; every
    other case falls back to the fixed per-type list.
    """
    if post_type == PostType.EBOOK and suggestions.images:
        return list(suggestions.images), True
    return image_recommendations(post_type), False


class PostProcessor:
    """Builds the result view for generated content.

    Pipeline:
    1. Split off the AI suggestion block
    2. Extract title and keyword variants
    3. Sanitize the body for display and derive the plain-text copy
    4. Pick image recommendations
    """

    def build_view(self, content: str, post_type: PostType, keyword: str) -> ResultView:
        """Run the full post-processing pipeline on (possibly partial) content."""
        parsed = parse_ai_suggestions(content)
        images, images_from_ai = display_images(post_type, parsed.suggestions)

        view = ResultView(
            post_type=post_type,
            keyword=keyword.strip(),
            title=extract_title(content),
            keywords=generate_keywords(keyword),
            body_html=sanitize_html(parsed.body),
            plain_text=html_to_plain_text(parsed.body),
            suggestions=parsed.suggestions,
            images=images,
            images_from_ai=images_from_ai,
        )
        logger.debug("Built result view: title=%r, %d images", view.title, len(images))
        return view


def build_result_view(content: str, post_type: PostType, keyword: str) -> ResultView:
    """Convenience wrapper around PostProcessor.build_view."""
    return PostProcessor().build_view(content, post_type, keyword)
