"""Configuration management for Project Crafter."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file (only if accessible)
try:
    load_dotenv()
except (PermissionError, OSError):
    # In sandboxed environments, .env might not be accessible
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Environment
    CRAFTER_ENV: str = Field(default="dev", description="Environment: dev, test, prod")

    # LLM provider selection
    LLM_PROVIDER: str = Field(default="openai", description="LLM backend: openai or anthropic")

    # OpenAI configuration
    OPENAI_API_KEY: str | None = Field(default=None, description="OpenAI API key")
    OPENAI_MODEL: str = Field(default="gpt-4o-mini", description="OpenAI chat model")

    # Anthropic configuration
    ANTHROPIC_API_KEY: str | None = Field(default=None, description="Anthropic API key")
    ANTHROPIC_MODEL: str = Field(
        default="claude-sonnet-4-20250514", description="Anthropic messages model"
    )

    # Generation tuning
    GENERATION_MAX_TOKENS: int = Field(default=4096, description="Max tokens per generation")
    PROFILE_TEMPERATURE: float = Field(
        default=0.3, description="Temperature for profile analysis"
    )
    SUGGESTION_TEMPERATURE: float = Field(
        default=0.7, description="Temperature for listing suggestion stages"
    )
    PROMPT_VERSION: str = Field(default="catalog_v1", description="Prompt version for tracking")
    STAGE_TIMEOUT_SECONDS: int = Field(
        default=600, description="Age after which an in-flight stage is treated as abandoned"
    )

    # Wizard state store
    WIZARD_STORE_BACKEND: str = Field(default="memory", description="Store: memory or supabase")
    SUPABASE_URL: str | None = Field(default=None, description="Supabase project URL")
    SUPABASE_SERVICE_ROLE_KEY: str | None = Field(
        default=None, description="Supabase service role key"
    )

    # Notion export
    NOTION_API_KEY: str | None = Field(default=None, description="Notion integration token")
    NOTION_VERSION: str = Field(default="2022-06-28", description="Notion API version header")

    # Upload limits
    MAX_UPLOAD_BYTES: int = Field(default=5_000_000, description="Max resume upload size in bytes")
    MIN_RESUME_CHARS: int = Field(
        default=100, description="Minimum characters of extracted resume text"
    )

    # Pricing
    DEFAULT_TARGET_HOURLY_RATE: float = Field(
        default=100, description="Target hourly rate when the user has not set one"
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance
    """
    return Settings()
