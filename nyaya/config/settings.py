from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SYSTEM_PROMPT = (
    "You are a legal AI assistant specialized in Indian law. "
    "Provide accurate, helpful legal guidance."
)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", protected_namespaces=()
    )

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000
    api_prefix: str = "/api"
    frontend_url: str = "http://localhost:5173"

    max_upload_bytes: int = 10 * 1024 * 1024

    pdf_engine: str = "pdfplumber"

    model_provider: str = "grok"
    model_api_key: str = ""
    model_name: str = ""
    model_base_url: str = ""
    model_timeout_seconds: int = 60
    model_temperature: float = 0.7
    model_max_retries: int = 0
    model_system_prompt: str = DEFAULT_SYSTEM_PROMPT
