"""End-to-end: API stream -> writer session -> result view.

The provider is faked at the writer dependency; everything between the
HTTP body and the rendered preview is real.
"""

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from blog_writer.common.config import Settings
from blog_writer.common.errors import AUTH_ERROR_MESSAGE, GenerationFailed, ProviderAuthError
from blog_writer.common.models import PostType
from blog_writer.content_writer.models import LLMProvider
from blog_writer.client.session import WriterSession
from blog_writer.publisher.renderer import PreviewRenderer
from blog_writer.web.dependencies import get_writer
from blog_writer.web.main import create_app


class ScriptedWriter:
    def __init__(self, text, error=None):
        self.text = text
        self.error = error
        self.config = SimpleNamespace(provider=LLMProvider.ANTHROPIC)

    def generate(self, request):
        return self._stream()

    def _stream(self):
        if self.error is not None:
            raise self.error
        for start in range(0, len(self.text), 11):
            yield self.text[start:start + 11]


class ApiAdapter:
    """Same surface as GenerateClient, backed by FastAPI's TestClient."""

    def __init__(self, test_client, chunk_size=7):
        self.test_client = test_client
        self.chunk_size = chunk_size

    def stream(self, request):
        resp = self.test_client.post("/api/generate", json=request.to_payload())
        if resp.status_code != 200:
            raise GenerationFailed(resp.json()["error"], status_code=resp.status_code)
        body = resp.content
        return iter([body[i:i + self.chunk_size] for i in range(0, len(body), self.chunk_size)])


@pytest.fixture
def make_session():
    def _make(writer):
        app = create_app(Settings())
        app.dependency_overrides[get_writer] = lambda: writer
        return WriterSession(ApiAdapter(TestClient(app)), confirmation_seconds=0)

    return _make


class TestEndToEnd:
    def test_ebook_generation(self, make_session, sample_ebook_output):
        session = make_session(ScriptedWriter(sample_ebook_output))
        session.update_input(post_type=PostType.EBOOK, keyword="업무 인수분해 기술", context="사수 없음")

        state = session.generate()

        assert state.error == ""
        assert state.content == sample_ebook_output
        view = state.view()
        assert view.title == "업무 인수분해 기술"
        assert view.show_ai_suggestions
        assert view.images == ["3단계 프로세스 도식", "실제 작업 화면 캡처", "결과물 스크린샷"]

        html = PreviewRenderer().render(view)
        assert "Why-Output-Task 3단계" in html
        assert "<!-- AI_SUGGESTIONS -->" not in html

    def test_auth_failure_reaches_display(self, make_session):
        session = make_session(ScriptedWriter("", error=ProviderAuthError("missing api key")))
        session.update_input(post_type=PostType.DAILY, keyword="산책")

        state = session.generate()

        assert state.error == AUTH_ERROR_MESSAGE
        assert state.content == ""
        assert not state.is_loading
