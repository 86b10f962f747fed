"""Configuration management for the DigiForm path engine service."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file (only if accessible)
try:
    load_dotenv()
except (PermissionError, OSError):
    # Sandboxed environments may not expose .env; rely on the process environment
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Supabase configuration (required for sync-backed project data)
    SUPABASE_URL: str = Field(..., description="Supabase project URL")
    SUPABASE_SERVICE_ROLE_KEY: str = Field(..., description="Supabase service role key")

    # OpenAI configuration (optional, justification enhancement is opt-in)
    OPENAI_API_KEY: str = Field(default="", description="OpenAI API key")

    # Environment
    PATH_ENGINE_ENV: str = Field(default="dev", description="Environment: dev, test, staging, prod")

    # Justification enhancement
    PATH_ENHANCE_ENABLED: bool = Field(
        default=False, description="Rewrite recommendation justifications with an LLM"
    )
    PATH_ENHANCE_MODEL: str = Field(
        default="gpt-4o-mini", description="Model for justification enhancement"
    )
    PATH_ENHANCE_TEMPERATURE: float = Field(
        default=0.6, description="Sampling temperature for justification enhancement"
    )
    PATH_ENHANCE_MAX_TOKENS: int = Field(
        default=500, description="Max output tokens for the enhanced justification"
    )
    PATH_ENHANCE_TIMEOUT_SECONDS: float = Field(
        default=20.0, description="Give up on enhancement after this many seconds"
    )
    PATH_ENHANCE_MAX_RESPONSES: int = Field(
        default=10, description="Assessment responses previewed in the enhancement prompt"
    )
    PATH_ENHANCE_PREVIEW_CHARS: int = Field(
        default=100, description="Characters kept per previewed response"
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance

    Raises:
        ValidationError: If required environment variables are missing
    """
    return Settings()
