"""Application configuration loaded from environment and config files."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class LLMConfig(BaseSettings):
    """LLM provider configuration."""

    model_config = {"env_prefix": "LAWVELY_LLM_"}

    provider: str = "openai"
    base_url: str = "https://api.openai.com"
    model: str = "gpt-3.5-turbo"
    api_key: str | None = None
    timeout_seconds: int = 30
    max_retries: int = 1
    max_tokens: int = 400
    temperature: float = 0.7


class SourceConfig(BaseSettings):
    """Settings for fetching legislation text from external sources."""

    model_config = {"env_prefix": "LAWVELY_SOURCE_"}

    timeout_seconds: int = 30
    user_agent: str = "lawvely/0.1 (+legislation summaries)"
    seed_urls: list[str] = Field(
        default_factory=lambda: [
            "https://www.legislation.gov.uk/ukpga/Geo6/14-15/35/contents",
            "https://www.legislation.gov.uk/ukpga/2019/4/contents",
            "https://www.legislation.gov.uk/uksi/1992/3013/made/data.xht?view=snippet&wrap=true",
            "https://www.legislation.gov.uk/ukpga/2018/21/data.xht?view=snippet&wrap=true",
        ]
    )


class DatabaseConfig(BaseSettings):
    """Database configuration. An empty URL selects the in-memory stores."""

    model_config = {"env_prefix": "LAWVELY_DB_"}

    database_url: str | None = None
    echo: bool = False
    pool_size: int = 5


class AuthConfig(BaseSettings):
    """Authentication configuration."""

    model_config = {"env_prefix": "LAWVELY_AUTH_"}

    provider: str = "mock"
    fixtures_path: str = "config/auth_fixtures.yml"
    token_expiry_minutes: int = 60


class Settings(BaseSettings):
    """Root application settings."""

    model_config = {"env_prefix": "LAWVELY_"}

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"]
    )

    llm: LLMConfig = Field(default_factory=LLMConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)
    db: DatabaseConfig = Field(default_factory=DatabaseConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
