"""Shared Pydantic data models for the blog writer.

These models define the data contract between the generation API and
its clients. Both sides import from here.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from .errors import (
    INVALID_POST_TYPE_MESSAGE,
    MISSING_FIELDS_MESSAGE,
    RequestValidationError,
)


# === Enums ===

class PostType(str, Enum):
    """Blog post categories the prompt templates know about."""
    CHALLENGE = "challenge"  # 부업 도전기
    INFO = "info"  # 정보/가이드
    DAILY = "daily"  # 일상/에세이
    EBOOK = "ebook"  # 전자책 챕터

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


# === Request ===

class GenerationRequest(BaseModel):
    """Validated input of POST /api/generate.

    The wire format uses camelCase (``postType``); both spellings are accepted.
    """
    post_type: PostType = Field(alias="postType")
    keyword: str = Field(min_length=1)
    context: Optional[str] = None

    model_config = {"populate_by_name": True}

    @field_validator("keyword", mode="before")
    @classmethod
    def _strip_keyword(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("context", mode="before")
    @classmethod
    def _blank_context_is_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @classmethod
    def from_payload(cls, payload: Any) -> GenerationRequest:
        """Validate a decoded JSON body.

        Raises:
            RequestValidationError: Missing post type / keyword, or unknown post type.
        """
        if not isinstance(payload, dict):
            raise RequestValidationError(MISSING_FIELDS_MESSAGE)

        post_type = payload.get("postType", payload.get("post_type"))
        keyword = payload.get("keyword")
        context = payload.get("context")

        if not post_type or not isinstance(keyword, str) or not keyword.strip():
            raise RequestValidationError(MISSING_FIELDS_MESSAGE)
        if post_type not in PostType.values():
            raise RequestValidationError(INVALID_POST_TYPE_MESSAGE)
        if context is not None and not isinstance(context, str):
            context = str(context)

        return cls(post_type=PostType(post_type), keyword=keyword, context=context)

    def to_payload(self) -> dict[str, str]:
        """Serialize to the wire format sent by clients."""
        payload = {"postType": self.post_type.value, "keyword": self.keyword}
        payload["context"] = self.context or ""
        return payload


class ErrorResponse(BaseModel):
    """JSON body of every non-200 API response."""
    error: str


class HealthResponse(BaseModel):
    """Response of GET /health."""
    status: str = "ok"
    version: str
    provider: str
