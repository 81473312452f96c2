from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3001
    cors_origin: str = "http://localhost:3000"

    upload_dir: str = "uploads/"
    max_file_size: int = 5 * 1024 * 1024

    pdf_engine: str = "pdfplumber"

    summarization_provider: str = "groq"

    groq_api_key: str = Field(min_length=1)
    groq_model_name: str = "meta-llama/llama-4-scout-17b-16e-instruct"
    groq_base_url: str = "https://api.groq.com/openai/v1"
    groq_timeout_seconds: int = 60

    summary_temperature: float = 0.7
    summary_max_tokens: int = 1024
    summary_top_p: float = 0.95
