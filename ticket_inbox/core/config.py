"""
Configuration management using Pydantic Settings.
Loads settings from environment variables and .env files.
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class JiraSettings(BaseSettings):
    """Jira Cloud configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="JIRA_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    base_url: str = Field(
        default="",
        validation_alias=AliasChoices("JIRA_URL", "JIRA_BASE_URL"),
        description="Jira base URL, e.g. https://your-domain.atlassian.net",
    )
    email: str = Field(default="", description="Jira account email")
    api_token: str = Field(default="", description="Jira API token")
    max_results: int = Field(default=50, ge=1, le=50, description="Max tickets per search")
    timeout: float = Field(default=15.0, description="Request timeout in seconds")


class AnthropicSettings(BaseSettings):
    """Anthropic Messages API configuration settings."""

    model_config = SettingsConfigDict(env_prefix="ANTHROPIC_", env_file=".env", extra="ignore")

    api_key: str = Field(default="", description="Anthropic API key")
    model: str = Field(default="claude-sonnet-4-20250514", description="Model used for summaries")
    max_tokens: int = Field(default=2000, description="Max tokens per response")
    timeout: float = Field(default=60.0, description="Request timeout in seconds")


class DatabaseSettings(BaseSettings):
    """Summary cache store configuration settings."""

    model_config = SettingsConfigDict(env_prefix="DATABASE_", env_file=".env", extra="ignore")

    url: str = Field(
        default="sqlite+aiosqlite:///./ticket_inbox.db",
        description="SQLAlchemy async connection URL",
    )
    echo: bool = Field(default=False, description="Echo SQL statements")
    timeout: float = Field(default=10.0, description="Per-operation timeout in seconds")

    @field_validator("url")
    @classmethod
    def use_async_driver(cls, v: str) -> str:
        # Hosted Postgres URLs come without a driver suffix
        if v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql+asyncpg://", 1)
        if v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v


class SecuritySettings(BaseSettings):
    """Security configuration."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    allowed_origins: str = Field(
        default="http://localhost:3000,https://www.figma.com",
        description="Comma separated CORS allowed origins",
    )

    @property
    def origin_list(self) -> list[str]:
        """Allowed origins as a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


class Settings(BaseSettings):
    """Main application settings aggregating all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="ticket-inbox", description="Application name")
    service_name: str = Field(default="Ticket Inbox API", description="Service name for health checks")
    app_env: str = Field(default="development", description="Environment (development/staging/production)")
    debug: bool = Field(default=True, description="Debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, description="Server port")

    # Sub-settings
    jira: JiraSettings = Field(default_factory=JiraSettings)
    anthropic: AnthropicSettings = Field(default_factory=AnthropicSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)

    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        allowed = {"development", "staging", "production"}
        if v.lower() not in allowed:
            raise ValueError(f"app_env must be one of {allowed}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v.upper()

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    def missing_inbox_settings(self) -> list[str]:
        """
        List the environment variables the inbox needs but which are unset.

        Returns:
            Variable names, in the order they are checked
        """
        required = [
            ("JIRA_URL", self.jira.base_url),
            ("JIRA_EMAIL", self.jira.email),
            ("JIRA_API_TOKEN", self.jira.api_token),
            ("ANTHROPIC_API_KEY", self.anthropic.api_key),
        ]
        return [name for name, value in required if not value]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


# Convenience function for accessing settings
settings = get_settings()
