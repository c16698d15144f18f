"""Writer session: drives the display state through one or more generations.

A new generation replaces any generation still in flight: the previous
request's cancellation token is set, its stream stops being read, and
its late chunks are ignored by the state transitions.
"""

from __future__ import annotations

import threading
from typing import Callable, Optional, Protocol

from blog_writer.common.errors import BlogWriterError
from blog_writer.common.logging import setup_logging
from blog_writer.common.models import GenerationRequest, PostType
from blog_writer.publisher.processor import extract_title, generate_keywords, html_to_plain_text

from . import state as transitions
from .state import COPY_CONTENT, COPY_KEYWORDS, COPY_TITLE, DisplayState
from .stream import consume_stream

logger = setup_logging(module_name="client.session")

COPY_CONFIRMATION_SECONDS = 2.0


class StreamingClient(Protocol):
    def stream(self, request: GenerationRequest): ...


class WriterSession:
    """Holds the current DisplayState and performs the user actions.

    Args:
        client: Anything with ``stream(request) -> Iterable[bytes]``
        clipboard: Callable that writes text to the clipboard
        on_change: Called with every new state snapshot
        confirmation_seconds: How long copy confirmations stay on (0 = until cleared)
    """

    def __init__(
        self,
        client: StreamingClient,
        clipboard: Optional[Callable[[str], None]] = None,
        on_change: Optional[Callable[[DisplayState], None]] = None,
        confirmation_seconds: float = COPY_CONFIRMATION_SECONDS,
    ) -> None:
        self._client = client
        self._clipboard = clipboard
        self._on_change = on_change
        self._confirmation_seconds = confirmation_seconds
        self._lock = threading.RLock()
        self._state = DisplayState()
        self._cancel_token: Optional[threading.Event] = None

    @property
    def state(self) -> DisplayState:
        return self._state

    def _dispatch(self, transition, *args, **kwargs) -> DisplayState:
        with self._lock:
            new_state = transition(self._state, *args, **kwargs)
            changed = new_state is not self._state
            self._state = new_state
        if changed and self._on_change is not None:
            self._on_change(new_state)
        return new_state

    # --- Input ---

    def update_input(
        self,
        post_type: PostType | str | None = None,
        keyword: str | None = None,
        context: str | None = None,
    ) -> DisplayState:
        return self._dispatch(
            transitions.set_input,
            post_type=PostType(post_type) if post_type is not None else None,
            keyword=keyword,
            context=context,
        )

    # --- Generation ---

    def generate(self) -> DisplayState:
        """Run one generation to completion (or failure) and return the final state."""
        started = self._dispatch(transitions.start_generation)
        if not started.is_loading:
            return started

        request_id = started.request_id
        token = threading.Event()
        with self._lock:
            if self._cancel_token is not None:
                logger.info("Replacing in-flight generation with request %d", request_id)
                self._cancel_token.set()
            self._cancel_token = token

        request = GenerationRequest(
            post_type=started.post_type,
            keyword=started.keyword,
            context=started.context,
        )
        try:
            chunks = self._client.stream(request)
            consume_stream(
                chunks,
                on_chunk=lambda text: self._dispatch(transitions.append_chunk, request_id, text),
                should_stop=token.is_set,
            )
            self._dispatch(transitions.finish_generation, request_id)
        except BlogWriterError as exc:
            logger.error("Generation %d failed: %s", request_id, exc.message)
            self._dispatch(transitions.set_error, request_id, exc.message)
        finally:
            with self._lock:
                if self._cancel_token is token:
                    self._cancel_token = None
        return self._state

    def cancel(self) -> None:
        """Stop reading the stream of the generation in flight, if any."""
        with self._lock:
            if self._cancel_token is not None:
                self._cancel_token.set()

    def reset(self) -> DisplayState:
        self.cancel()
        return self._dispatch(transitions.reset)

    # --- Copy actions ---

    def copy_content(self) -> str:
        """Copy the body as plain text, without the AI suggestion block."""
        text = html_to_plain_text(self._state.parsed.body)
        if self._write_clipboard(text):
            self._confirm(COPY_CONTENT)
        return text

    def copy_title(self) -> str:
        title = extract_title(self._state.content)
        if title and self._write_clipboard(title):
            self._confirm(COPY_TITLE)
        return title

    def copy_keywords(self) -> str:
        keywords = ", ".join(generate_keywords(self._state.keyword))
        if self._write_clipboard(keywords):
            self._confirm(COPY_KEYWORDS)
        return keywords

    def _write_clipboard(self, text: str) -> bool:
        if self._clipboard is None:
            return True
        try:
            self._clipboard(text)
        except Exception as exc:
            logger.error("복사 실패: %s", exc)
            return False
        return True

    def _confirm(self, target: str) -> None:
        self._dispatch(transitions.mark_copied, target)
        if self._confirmation_seconds > 0:
            timer = threading.Timer(
                self._confirmation_seconds,
                self._dispatch,
                args=(transitions.clear_copied, target),
            )
            timer.daemon = True
            timer.start()
