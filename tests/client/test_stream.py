"""Tests for the incremental stream consumer."""

import pytest

from blog_writer.common.errors import GenerationFailed, StreamReadError
from blog_writer.client.stream import consume_stream


def _broken_stream(*chunks, error=ConnectionError("connection reset")):
    yield from chunks
    raise error


class TestConsumeStream:
    def test_concatenates_chunks(self):
        assert consume_stream([b"<h2>", b"title", b"</h2>"]) == "<h2>title</h2>"

    def test_multibyte_character_split_across_chunks(self):
        data = "부업 후기".encode("utf-8")
        # Split inside the first character (3 bytes in UTF-8)
        seen = []
        text = consume_stream([data[:1], data[1:4], data[4:]], on_chunk=seen.append)

        assert text == "부업 후기"
        assert "".join(seen) == "부업 후기"
        assert all("�" not in piece for piece in seen)

    def test_every_split_point_decodes(self):
        data = "미리캔버스 😀 부업".encode("utf-8")
        for cut in range(len(data) + 1):
            assert consume_stream([data[:cut], data[cut:]]) == "미리캔버스 😀 부업"

    def test_on_chunk_receives_deltas_only(self):
        seen = []
        consume_stream([b"a", b"", b"bc"], on_chunk=seen.append)
        assert seen == ["a", "bc"]

    def test_empty_stream(self):
        assert consume_stream([]) == ""

    def test_read_failure_keeps_partial_text(self):
        with pytest.raises(StreamReadError) as exc_info:
            consume_stream(_broken_stream(b"<h2>", b"half"))

        assert exc_info.value.partial == "<h2>half"
        assert "connection reset" in exc_info.value.message

    def test_blog_writer_errors_pass_through(self):
        with pytest.raises(GenerationFailed):
            consume_stream(_broken_stream(b"x", error=GenerationFailed("boom", status_code=500)))

    def test_should_stop_is_polled_before_each_read(self):
        reads = []

        def chunks():
            for piece in (b"one", b"two", b"three"):
                reads.append(piece)
                yield piece

        text = consume_stream(chunks(), should_stop=lambda: len(reads) >= 2)

        assert text == "onetwo"
        assert reads == [b"one", b"two"]

    def test_iterator_is_closed_on_stop(self):
        closed = []
        seen = []

        def chunks():
            try:
                yield b"a"
                yield b"b"
            finally:
                closed.append(True)

        text = consume_stream(chunks(), on_chunk=seen.append, should_stop=lambda: bool(seen))

        assert text == "a"
        assert closed == [True]

    def test_invalid_bytes_are_replaced(self):
        assert consume_stream([b"ok", b"\xff"]) == "ok�"
