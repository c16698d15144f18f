"""HTTP client for the generation API, plus an in-process equivalent."""

from __future__ import annotations

from typing import Any, Iterator

import requests

from blog_writer.common.config import Settings, settings as default_settings
from blog_writer.common.errors import GenerationFailed
from blog_writer.common.logging import setup_logging
from blog_writer.common.models import GenerationRequest
from blog_writer.content_writer import ContentWriter

logger = setup_logging(module_name="client.api")

DEFAULT_ERROR_MESSAGE = "생성 중 오류가 발생했습니다"
CONNECTION_ERROR_MESSAGE = "서버에 연결할 수 없습니다"


class GenerateClient:
    """Calls POST /api/generate and hands back the raw body stream.

    Usage:
        client = GenerateClient("http://127.0.0.1:8000")
        for chunk in client.stream(request):
            ...
    """

    def __init__(
        self,
        server_url: str | None = None,
        settings: Settings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self.server_url = (server_url or self.settings.client.server_url).rstrip("/")
        self._session = session or requests.Session()

    @property
    def _timeout(self) -> tuple[float, float]:
        return (self.settings.client.connect_timeout, self.settings.client.read_timeout)

    def stream(self, request: GenerationRequest) -> Iterator[bytes]:
        """Start a generation and return an iterator over body chunks.

        Raises:
            GenerationFailed: Connection failure or non-200 response; the
                message is the server's ``error`` field when it sent one.
        """
        url = f"{self.server_url}/api/generate"
        try:
            resp = self._session.post(
                url,
                json=request.to_payload(),
                stream=True,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.error("Could not reach %s: %s", url, exc)
            raise GenerationFailed(f"{CONNECTION_ERROR_MESSAGE}: {exc}", status_code=0) from exc

        if resp.status_code != 200:
            message = self._error_message(resp)
            resp.close()
            logger.error("Generation failed (%d): %s", resp.status_code, message)
            raise GenerationFailed(message, status_code=resp.status_code)

        return self._iter_body(resp)

    def post_types(self) -> dict[str, Any]:
        """Fetch the post type catalog from GET /api/post-types."""
        resp = self._session.get(f"{self.server_url}/api/post-types", timeout=self._timeout)
        resp.raise_for_status()
        return resp.json()

    def _iter_body(self, resp: requests.Response) -> Iterator[bytes]:
        try:
            yield from resp.iter_content(chunk_size=self.settings.client.chunk_size)
        finally:
            resp.close()

    @staticmethod
    def _error_message(resp: requests.Response) -> str:
        try:
            data = resp.json()
        except ValueError:
            return DEFAULT_ERROR_MESSAGE
        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
        return DEFAULT_ERROR_MESSAGE


class LocalGenerateClient:
    """Same interface as GenerateClient, but calls the writer in-process.

    Useful for the CLI when no API server is running.
    """

    def __init__(self, writer: ContentWriter | None = None) -> None:
        self.writer = writer or ContentWriter()

    def stream(self, request: GenerationRequest) -> Iterator[bytes]:
        for text in self.writer.generate(request):
            yield text.encode("utf-8")
