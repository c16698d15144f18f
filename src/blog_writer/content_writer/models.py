"""Data models for the content writer module."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from blog_writer.common.models import PostType


class LLMProvider(str, Enum):
    """Supported LLM providers."""
    OPENAI = "openai"
    ANTHROPIC = "anthropic"


@dataclass
class WriterConfig:
    """Configuration for the content writer."""
    provider: LLMProvider = LLMProvider.OPENAI
    model: str = ""  # Empty = use default from settings
    temperature: float = 0.7
    max_tokens: int = 4096


@dataclass(frozen=True)
class PostTypeInfo:
    """Display metadata for one post type (shown next to the input form)."""
    post_type: PostType
    name: str
    emoji: str
    description: str
    placeholder_keyword: str
    placeholder_context: str
    image_recommendations: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "postType": self.post_type.value,
            "name": self.name,
            "emoji": self.emoji,
            "description": self.description,
            "placeholder": {
                "keyword": self.placeholder_keyword,
                "context": self.placeholder_context,
            },
            "imageRecommendations": list(self.image_recommendations),
        }
