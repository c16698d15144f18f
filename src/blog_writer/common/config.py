"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
Environment variables win over the YAML file.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .errors import ProviderAuthError

# === Paths ===
PROJECT_ROOT = Path(__file__).resolve().parents[3]
CONFIG_DIR = PROJECT_ROOT / "config"

# Load .env (then .env.local, which wins) from project root
load_dotenv(PROJECT_ROOT / ".env")
load_dotenv(PROJECT_ROOT / ".env.local", override=True)


class LLMSettings(BaseModel):
    """LLM API settings."""
    provider: str = "openai"  # "openai" or "anthropic"
    openai_model: str = "gpt-4o"
    anthropic_model: str = "claude-sonnet-4-5-20250929"
    max_tokens: int = 4096
    temperature: float = 0.7


class ServerSettings(BaseModel):
    """HTTP server settings for the generation API."""
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])


class ClientSettings(BaseModel):
    """Settings for the streaming CLI client."""
    server_url: str = "http://127.0.0.1:8000"
    connect_timeout: float = 10.0
    read_timeout: float = 120.0
    chunk_size: int = 1024


class Settings(BaseModel):
    """Top-level application settings."""
    llm: LLMSettings = Field(default_factory=LLMSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    client: ClientSettings = Field(default_factory=ClientSettings)

    @classmethod
    def load(cls, settings_path: Path | None = None) -> Settings:
        """Load settings from config/settings.yaml, then apply env overrides."""
        settings_path = settings_path or CONFIG_DIR / "settings.yaml"
        data: dict = {}
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        loaded = cls(**data)
        loaded._apply_env_overrides()
        return loaded

    def _apply_env_overrides(self) -> None:
        if os.getenv("AI_PROVIDER"):
            self.llm.provider = os.environ["AI_PROVIDER"].strip().lower()
        if os.getenv("OPENAI_MODEL"):
            self.llm.openai_model = os.environ["OPENAI_MODEL"]
        if os.getenv("ANTHROPIC_MODEL"):
            self.llm.anthropic_model = os.environ["ANTHROPIC_MODEL"]
        if os.getenv("BLOG_WRITER_HOST"):
            self.server.host = os.environ["BLOG_WRITER_HOST"]
        if os.getenv("BLOG_WRITER_PORT"):
            self.server.port = int(os.environ["BLOG_WRITER_PORT"])
        if os.getenv("BLOG_WRITER_CORS_ORIGINS"):
            self.server.cors_origins = [
                o.strip() for o in os.environ["BLOG_WRITER_CORS_ORIGINS"].split(",") if o.strip()
            ]
        if os.getenv("BLOG_WRITER_SERVER_URL"):
            self.client.server_url = os.environ["BLOG_WRITER_SERVER_URL"]


def get_openai_api_key() -> str:
    """Get OpenAI API key from environment."""
    key = os.getenv("OPENAI_API_KEY", "")
    if not key:
        raise ProviderAuthError("OpenAI API key not set (OPENAI_API_KEY)")
    return key


def get_anthropic_api_key() -> str:
    """Get Anthropic API key from environment."""
    key = os.getenv("ANTHROPIC_API_KEY", "")
    if not key:
        raise ProviderAuthError("Anthropic API key not set (ANTHROPIC_API_KEY)")
    return key


# Singleton settings instance
settings = Settings.load()
