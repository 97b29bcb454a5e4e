"""Blogsum configuration — loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # --- Blog source ----------------------------------------------------
    blog_base_url: str = "https://aspire.dev/"
    http_timeout_seconds: float = 60.0
    user_agent: str = "Blogsum/0.1"

    # --- LLM provider --------------------------------------------------
    llm_provider: str = "github"  # "github" | "openai" | "azure" | "local"
    llm_temperature: float | None = None

    # GitHub Models
    github_token: str = ""
    github_models_endpoint: str = "https://models.github.ai/inference"
    github_model: str = "openai/gpt-4o-mini"

    # OpenAI
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"

    # Azure OpenAI
    azure_openai_endpoint: str = ""
    azure_openai_api_key: str = ""
    azure_openai_deployment: str = ""

    # Local / Ollama
    local_llm_base_url: str = "http://localhost:11434/v1"
    local_llm_model: str = "llama3"

    # --- Server ---------------------------------------------------------
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"
    allowed_origins: str = "*"  # comma-separated origins


settings = Settings()
