"""Display state of one writer session.

The state is an immutable snapshot; every change goes through one of the
transition functions below, which return a new snapshot. Chunks and
errors carry the id of the request that produced them, and anything
from a request other than the current one is dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from blog_writer.common.models import PostType
from blog_writer.publisher.models import ParsedOutput, ResultView
from blog_writer.publisher.processor import build_result_view
from blog_writer.publisher.suggestions import parse_ai_suggestions

EMPTY_KEYWORD_MESSAGE = "키워드/주제를 입력해주세요"

# Copy targets that show a confirmation flag
COPY_CONTENT = "content"
COPY_TITLE = "title"
COPY_KEYWORDS = "keywords"
COPY_TARGETS = (COPY_CONTENT, COPY_TITLE, COPY_KEYWORDS)


@dataclass(frozen=True)
class DisplayState:
    """Snapshot of what the result screen shows."""
    post_type: PostType = PostType.CHALLENGE
    keyword: str = ""
    context: str = ""
    content: str = ""
    is_loading: bool = False
    error: str = ""
    copied: frozenset[str] = field(default_factory=frozenset)
    request_id: int = 0

    @property
    def has_content(self) -> bool:
        return bool(self.content)

    @property
    def parsed(self) -> ParsedOutput:
        """Body and suggestions, recomputed from the current content."""
        return parse_ai_suggestions(self.content)

    def view(self) -> ResultView:
        return build_result_view(self.content, self.post_type, self.keyword)

    def is_copied(self, target: str) -> bool:
        return target in self.copied


def set_input(
    state: DisplayState,
    *,
    post_type: PostType | None = None,
    keyword: str | None = None,
    context: str | None = None,
) -> DisplayState:
    """Update the form fields; content and flags are untouched."""
    return replace(
        state,
        post_type=post_type if post_type is not None else state.post_type,
        keyword=keyword if keyword is not None else state.keyword,
        context=context if context is not None else state.context,
    )


def start_generation(state: DisplayState) -> DisplayState:
    """Begin a new request: clear content and error, bump the request id.

    An empty keyword never starts a request; it only sets the error.
    """
    if not state.keyword.strip():
        return replace(state, error=EMPTY_KEYWORD_MESSAGE)
    return replace(
        state,
        content="",
        error="",
        is_loading=True,
        copied=frozenset(),
        request_id=state.request_id + 1,
    )


def append_chunk(state: DisplayState, request_id: int, text: str) -> DisplayState:
    """Append decoded text from the current request."""
    if request_id != state.request_id or not text:
        return state
    return replace(state, content=state.content + text)


def set_error(state: DisplayState, request_id: int, message: str) -> DisplayState:
    """Record a failure; whatever content already arrived is kept."""
    if request_id != state.request_id:
        return state
    return replace(state, error=message, is_loading=False)


def finish_generation(state: DisplayState, request_id: int) -> DisplayState:
    if request_id != state.request_id:
        return state
    return replace(state, is_loading=False)


def mark_copied(state: DisplayState, target: str) -> DisplayState:
    if target not in COPY_TARGETS:
        raise ValueError(f"Unknown copy target: {target}")
    return replace(state, copied=state.copied | {target})


def clear_copied(state: DisplayState, target: str) -> DisplayState:
    return replace(state, copied=state.copied - {target})


def reset(state: DisplayState) -> DisplayState:
    """Start over with an empty form; the selected post type stays.

    The request id moves on so a stream still in flight stops landing here.
    """
    return DisplayState(post_type=state.post_type, request_id=state.request_id + 1)
