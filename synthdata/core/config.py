from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SYNTHDATA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Synthetic Data Generator"
    debug: bool = False
    log_level: str = "INFO"
    json_logs: bool = True

    # API
    frontend_url: str = "http://localhost:3000"

    # Generation backend: "template" is deterministic and needs no credentials
    generator_backend: Literal["template", "anthropic"] = "template"

    # Anthropic
    anthropic_api_key: str = ""
    generation_model: str = "claude-sonnet-4-20250514"
    generation_max_tokens: int = 4096
    seed_example_count: int = 5

    # Documents
    document_author: str = "AI Generator"
    artifact_name_prefix: str = "Training Data"

    # Demo-only delay for the template backend (seconds)
    template_latency_seconds: float = 0.0


@lru_cache
def get_settings() -> Settings:
    return Settings()
