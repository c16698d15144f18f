"""Error taxonomy for the blog writer.

Server side:
- RequestValidationError -> 400 (missing or invalid request fields)
- ProviderAuthError      -> 401 (LLM API key missing or rejected)
- ProviderError          -> 500 (any other generation failure)

Client side:
- GenerationFailed       -> the API answered with a non-200 status
- StreamReadError        -> the response stream broke mid-read

None of these are retried automatically.
"""

from __future__ import annotations

# Substrings in a provider error message that identify a credential failure.
AUTH_ERROR_MARKERS = ("api key", "api_key", "api-key", "authentication")

MISSING_FIELDS_MESSAGE = "글 유형과 키워드는 필수입니다."
INVALID_POST_TYPE_MESSAGE = "유효하지 않은 글 유형입니다."
AUTH_ERROR_MESSAGE = "AI API 키가 설정되지 않았거나 유효하지 않습니다. .env 파일을 확인해주세요."
GENERATION_ERROR_PREFIX = "글 생성 중 오류가 발생했습니다"


class BlogWriterError(Exception):
    """Base class for all blog writer errors."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RequestValidationError(BlogWriterError):
    """A generation request is missing a field or names an unknown post type."""

    status_code = 400


class ProviderAuthError(BlogWriterError):
    """The LLM provider rejected (or never received) the API key."""

    status_code = 401


class ProviderError(BlogWriterError):
    """Any other failure while talking to the LLM provider."""

    status_code = 500


class GenerationFailed(BlogWriterError):
    """The generation API answered with an error response."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class StreamReadError(BlogWriterError):
    """Reading the response stream failed; ``partial`` holds what arrived."""

    def __init__(self, message: str, partial: str = ""):
        super().__init__(message)
        self.partial = partial


def is_auth_error(message: str) -> bool:
    """Return True if a provider error message looks like a credential failure."""
    lowered = (message or "").lower()
    return any(marker in lowered for marker in AUTH_ERROR_MARKERS)


def classify_provider_exception(exc: Exception) -> BlogWriterError:
    """Map an arbitrary provider exception onto ProviderAuthError / ProviderError."""
    if isinstance(exc, BlogWriterError):
        return exc
    message = str(exc) or exc.__class__.__name__
    if is_auth_error(message):
        return ProviderAuthError(message)
    return ProviderError(message)
