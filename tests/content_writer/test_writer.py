"""Tests for the streaming ContentWriter.

Tests cover:
- Writer configuration from settings
- Prompt resolution per request
- OpenAI / Anthropic streaming with mocked SDK clients
- Error classification (auth vs. generic provider failure)
"""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from blog_writer.common.config import Settings
from blog_writer.common.errors import (
    ProviderAuthError,
    ProviderError,
    classify_provider_exception,
    is_auth_error,
)
from blog_writer.common.models import GenerationRequest, PostType
from blog_writer.content_writer.models import LLMProvider, WriterConfig
from blog_writer.content_writer.prompts import build_user_prompt, get_system_prompt
from blog_writer.content_writer.writer import ContentWriter


def _openai_chunk(text):
    return SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=text))])


@pytest.fixture
def writer(test_settings) -> ContentWriter:
    return ContentWriter(settings=test_settings)


# === Test: Configuration ===


class TestWriterConfig:
    def test_default_config_from_settings(self, test_settings):
        writer = ContentWriter(settings=test_settings)
        assert writer.config.provider == LLMProvider.OPENAI
        assert writer.config.temperature == 0.7
        assert writer.model == "gpt-4o"

    def test_anthropic_model_from_settings(self, test_settings):
        writer = ContentWriter(config=WriterConfig(provider=LLMProvider.ANTHROPIC), settings=test_settings)
        assert writer.model == test_settings.llm.anthropic_model

    def test_explicit_model_wins(self, test_settings):
        writer = ContentWriter(config=WriterConfig(model="gpt-4o-mini"), settings=test_settings)
        assert writer.model == "gpt-4o-mini"

    def test_unknown_provider_falls_back_to_openai(self):
        settings = Settings()
        settings.llm.provider = "gemini"
        writer = ContentWriter(settings=settings)
        assert writer.config.provider == LLMProvider.OPENAI


# === Test: Prompt Resolution ===


class TestGenerate:
    def test_generate_passes_resolved_prompts(self, writer, challenge_request):
        with patch.object(ContentWriter, "stream", return_value=iter(["a"])) as mock_stream:
            chunks = list(writer.generate(challenge_request))

        assert chunks == ["a"]
        mock_stream.assert_called_once_with(
            get_system_prompt(PostType.CHALLENGE),
            build_user_prompt(PostType.CHALLENGE, challenge_request.keyword, challenge_request.context),
        )

    def test_generate_without_context(self, writer):
        request = GenerationRequest(post_type=PostType.DAILY, keyword="evening routine")
        with patch.object(ContentWriter, "stream", return_value=iter([])) as mock_stream:
            list(writer.generate(request))

        _, user_prompt = mock_stream.call_args.args
        assert "evening routine" in user_prompt
        assert "내 상황/경험 (이 내용을" not in user_prompt


# === Test: Provider Streaming ===


class TestOpenAIStreaming:
    @patch.dict("os.environ", {"OPENAI_API_KEY": "sk-test"})
    @patch("openai.OpenAI")
    def test_yields_deltas_in_order(self, mock_openai, writer):
        stream = MagicMock()
        stream.__iter__.return_value = iter([
            _openai_chunk("<h2>"),
            _openai_chunk(None),
            SimpleNamespace(choices=[]),
            _openai_chunk("제목</h2>"),
        ])
        mock_openai.return_value.chat.completions.create.return_value = stream

        chunks = list(writer.stream("system", "user"))

        assert chunks == ["<h2>", "제목</h2>"]
        kwargs = mock_openai.return_value.chat.completions.create.call_args.kwargs
        assert kwargs["stream"] is True
        assert kwargs["model"] == "gpt-4o"
        assert kwargs["messages"][0] == {"role": "system", "content": "system"}
        assert kwargs["messages"][1] == {"role": "user", "content": "user"}
        stream.close.assert_called_once()

    @patch.dict("os.environ", {"OPENAI_API_KEY": ""})
    def test_missing_key_is_auth_error(self, writer):
        with pytest.raises(ProviderAuthError):
            list(writer.stream("system", "user"))

    @patch.dict("os.environ", {"OPENAI_API_KEY": "sk-bad"})
    @patch("openai.OpenAI")
    def test_rejected_key_is_auth_error(self, mock_openai, writer):
        mock_openai.return_value.chat.completions.create.side_effect = RuntimeError(
            "Incorrect API key provided: sk-bad"
        )
        with pytest.raises(ProviderAuthError):
            list(writer.stream("system", "user"))

    @patch.dict("os.environ", {"OPENAI_API_KEY": "sk-test"})
    @patch("openai.OpenAI")
    def test_other_failure_is_provider_error(self, mock_openai, writer):
        mock_openai.return_value.chat.completions.create.side_effect = RuntimeError("model overloaded")
        with pytest.raises(ProviderError, match="model overloaded"):
            list(writer.stream("system", "user"))


class TestAnthropicStreaming:
    @patch.dict("os.environ", {"ANTHROPIC_API_KEY": "sk-ant-test"})
    @patch("anthropic.Anthropic")
    def test_yields_text_stream(self, mock_anthropic, test_settings):
        stream = MagicMock()
        stream.text_stream = iter(["<h2>", "", "제목</h2>"])
        mock_anthropic.return_value.messages.stream.return_value.__enter__.return_value = stream

        writer = ContentWriter(config=WriterConfig(provider=LLMProvider.ANTHROPIC), settings=test_settings)
        chunks = list(writer.stream("system", "user"))

        assert chunks == ["<h2>", "제목</h2>"]
        kwargs = mock_anthropic.return_value.messages.stream.call_args.kwargs
        assert kwargs["system"] == "system"
        assert kwargs["messages"] == [{"role": "user", "content": "user"}]

    @patch.dict("os.environ", {"ANTHROPIC_API_KEY": ""})
    def test_missing_key_is_auth_error(self, test_settings):
        writer = ContentWriter(config=WriterConfig(provider=LLMProvider.ANTHROPIC), settings=test_settings)
        with pytest.raises(ProviderAuthError):
            list(writer.stream("system", "user"))


# === Test: Error Classification ===


class TestErrorClassification:
    @pytest.mark.parametrize("message", [
        "Incorrect API key provided",
        "invalid x-api-key",
        "ANTHROPIC_API_KEY is missing",
        "authentication_error: invalid token",
        "Authentication failed",
    ])
    def test_auth_messages(self, message):
        assert is_auth_error(message)

    @pytest.mark.parametrize("message", ["rate limit exceeded", "timeout", ""])
    def test_non_auth_messages(self, message):
        assert not is_auth_error(message)

    def test_classify_keeps_known_errors(self):
        error = ProviderError("boom")
        assert classify_provider_exception(error) is error

    def test_classify_empty_message_uses_class_name(self):
        error = classify_provider_exception(TimeoutError())
        assert isinstance(error, ProviderError)
        assert error.message == "TimeoutError"
