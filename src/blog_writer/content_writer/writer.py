"""Content Writer: streams blog post text from an LLM provider.

The writer resolves the prompts for a post type and relays the provider's
token stream as an iterator of text chunks. It never buffers the whole
output and never edits what the model writes.

Usage:
    writer = ContentWriter()
    for chunk in writer.generate(request):
        ...
"""

from __future__ import annotations

from typing import Iterator

from blog_writer.common.config import (
    Settings,
    get_anthropic_api_key,
    get_openai_api_key,
)
from blog_writer.common.errors import BlogWriterError, classify_provider_exception
from blog_writer.common.logging import setup_logging
from blog_writer.common.models import GenerationRequest

from .models import LLMProvider, WriterConfig
from .prompts import build_user_prompt, get_system_prompt

logger = setup_logging(module_name="content_writer")


def _config_from_settings(settings: Settings) -> WriterConfig:
    try:
        provider = LLMProvider(settings.llm.provider)
    except ValueError:
        logger.warning("Unknown AI provider %r, falling back to openai", settings.llm.provider)
        provider = LLMProvider.OPENAI
    return WriterConfig(
        provider=provider,
        temperature=settings.llm.temperature,
        max_tokens=settings.llm.max_tokens,
    )


class ContentWriter:
    """Streams generated blog content from OpenAI or Anthropic.

    Provider errors are converted into ProviderAuthError (credential
    problems, recognised by the error message) or ProviderError.
    """

    def __init__(self, config: WriterConfig | None = None, settings: Settings | None = None):
        self.settings = settings or Settings.load()
        self.config = config or _config_from_settings(self.settings)

    @property
    def model(self) -> str:
        """Model identifier sent to the provider."""
        if self.config.model:
            return self.config.model
        if self.config.provider == LLMProvider.ANTHROPIC:
            return self.settings.llm.anthropic_model
        return self.settings.llm.openai_model

    def generate(self, request: GenerationRequest) -> Iterator[str]:
        """Resolve prompts for a validated request and stream the result.

        Args:
            request: Validated generation request

        Returns:
            Iterator over text chunks as the provider produces them
        """
        system_prompt = get_system_prompt(request.post_type)
        user_prompt = build_user_prompt(request.post_type, request.keyword, request.context)

        logger.info(
            "Generating %s post for %r (context: %s, model: %s)",
            request.post_type.value,
            request.keyword,
            "yes" if request.context else "no",
            self.model,
        )
        return self.stream(system_prompt, user_prompt)

    def stream(self, system_prompt: str, user_prompt: str) -> Iterator[str]:
        """Call the configured provider and yield text deltas.

        Raises:
            ProviderAuthError: Missing or rejected API key
            ProviderError: Any other provider failure
        """
        try:
            if self.config.provider == LLMProvider.ANTHROPIC:
                yield from self._stream_anthropic(system_prompt, user_prompt)
            else:
                yield from self._stream_openai(system_prompt, user_prompt)
        except BlogWriterError:
            raise
        except Exception as exc:
            raise classify_provider_exception(exc) from exc

    # --- Provider Integration ---

    def _stream_openai(self, system_prompt: str, user_prompt: str) -> Iterator[str]:
        """Stream from the OpenAI chat completions API."""
        import openai

        client = openai.OpenAI(api_key=get_openai_api_key())

        stream = client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
            stream=True,
        )
        try:
            for chunk in stream:
                if not chunk.choices:
                    continue
                delta = chunk.choices[0].delta.content
                if delta:
                    yield delta
        finally:
            stream.close()

    def _stream_anthropic(self, system_prompt: str, user_prompt: str) -> Iterator[str]:
        """Stream from the Anthropic messages API."""
        import anthropic

        client = anthropic.Anthropic(api_key=get_anthropic_api_key())

        with client.messages.stream(
            model=self.model,
            max_tokens=self.config.max_tokens,
            system=system_prompt,
            messages=[
                {"role": "user", "content": user_prompt},
            ],
            temperature=self.config.temperature,
        ) as stream:
            for text in stream.text_stream:
                if text:
                    yield text
