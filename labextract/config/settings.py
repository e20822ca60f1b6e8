from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    reference_window_chars: int = 100
    fallback_min_markers: int = 3
    fallback_max_text_chars: int = 12000

    fallback_provider: str = "none"

    fallback_openai_api_key: str = ""
    fallback_openai_model_name: str = "gpt-3.5-turbo"
    fallback_openai_timeout_seconds: int = 30
    fallback_openai_temperature: float = 0.1
