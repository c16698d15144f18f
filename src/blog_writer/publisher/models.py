"""Data models for the publisher module."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from blog_writer.common.models import PostType

TITLE_NOT_FOUND = "제목을 추출할 수 없습니다"


@dataclass
class AISuggestions:
    """Recommendation block the model appends to an e-book chapter."""
    framework: Optional[str] = None
    improve: Optional[str] = None
    images: list[str] = field(default_factory=list)

    @property
    def has_recommendations(self) -> bool:
        """True when there is a framework or an improvement note to show."""
        return bool(self.framework or self.improve)

    @property
    def is_empty(self) -> bool:
        return not self.has_recommendations and not self.images


@dataclass
class ParsedOutput:
    """Generated text split into the displayable body and the suggestion block."""
    body: str
    suggestions: AISuggestions = field(default_factory=AISuggestions)


@dataclass
class ResultView:
    """Everything the result screen shows for one generated post."""
    post_type: PostType
    keyword: str
    title: str
    keywords: list[str]
    body_html: str
    plain_text: str
    suggestions: AISuggestions
    images: list[str]
    images_from_ai: bool = False

    @property
    def display_title(self) -> str:
        return self.title or TITLE_NOT_FOUND

    @property
    def show_ai_suggestions(self) -> bool:
        """The AI recommendation card is only shown for e-book chapters."""
        return self.post_type == PostType.EBOOK and self.suggestions.has_recommendations
