from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    storage_disk: str = "local"
    storage_root: str = "/app/files"
    storage_public_base_url: str = ""

    pdf_min_content_length: int = 50
    office_min_content_length: int = 50
    recognition_min_content_length: int = 100

    recognition_provider: str = "none"
    recognition_api_key: str = ""
    recognition_model_name: str = "google/gemini-2.5-flash"
    recognition_base_url: str = ""
    recognition_timeout_seconds: int = 30
    recognition_max_retries: int = 0
