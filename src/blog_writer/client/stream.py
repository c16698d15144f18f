"""Incremental reader for the streamed generation response."""

from __future__ import annotations

import codecs
from typing import Callable, Iterable, Optional

from blog_writer.common.errors import BlogWriterError, StreamReadError
from blog_writer.common.logging import setup_logging

logger = setup_logging(module_name="client.stream")

ChunkCallback = Callable[[str], None]


def consume_stream(
    chunks: Iterable[bytes],
    on_chunk: Optional[ChunkCallback] = None,
    should_stop: Optional[Callable[[], bool]] = None,
    encoding: str = "utf-8",
) -> str:
    """Decode a byte stream chunk by chunk and return the accumulated text.

    A multi-byte character split across two chunks is held back by the
    incremental decoder until it is complete, so callers never see half
    a character.

    Args:
        chunks: Iterable of raw byte chunks (e.g. ``Response.iter_content()``)
        on_chunk: Called with each newly decoded piece of text
        should_stop: Polled before every read; returning True stops early
        encoding: Body encoding

    Returns:
        Everything decoded up to the end of the stream (or the stop)

    Raises:
        StreamReadError: A read failed; ``partial`` holds the text received so far
    """
    decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
    pieces: list[str] = []

    def emit(text: str) -> None:
        if not text:
            return
        pieces.append(text)
        if on_chunk is not None:
            on_chunk(text)

    iterator = iter(chunks)
    try:
        while True:
            if should_stop is not None and should_stop():
                logger.info("Stream consumer stopped early after %d chars", sum(map(len, pieces)))
                break
            try:
                chunk = next(iterator)
            except StopIteration:
                emit(decoder.decode(b"", final=True))
                break
            except BlogWriterError:
                raise
            except Exception as exc:
                partial = "".join(pieces) + decoder.decode(b"", final=True)
                raise StreamReadError(str(exc) or exc.__class__.__name__, partial=partial) from exc
            if chunk:
                emit(decoder.decode(chunk))
    finally:
        close = getattr(iterator, "close", None)
        if close is not None:
            close()

    return "".join(pieces)
