"""Application configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Tranzio Translator"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    frontend_port: int = 3000

    # CORS - built from frontend_port when not set
    cors_origins: list[str] = []

    # Glossary storage
    glossary_path: Path = Path("./data/glossary.json")

    # Model invocation
    llm_provider: str = "gemini"
    llm_model: str = "gemini-2.0-flash"
    llm_base_url: Optional[str] = None
    llm_temperature: float = 0.7
    llm_max_output_tokens: int = 500
    llm_timeout_seconds: Optional[float] = 60.0
    llm_max_attempts: int = 3  # Gateway-level attempts for transient provider errors

    # Pipeline behaviour
    use_function_calling: bool = True
    record_translations: bool = False  # Write model translations back to the glossary

    # LLM API Keys
    openai_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None
    deepseek_api_key: Optional[str] = None
    openrouter_api_key: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        if not self.cors_origins:
            self.cors_origins = [
                f"http://localhost:{self.frontend_port}",
                f"http://127.0.0.1:{self.frontend_port}",
            ]

    def get_api_key(self, provider: str) -> Optional[str]:
        """Get API key for a provider."""
        key_map = {
            "openai": self.openai_api_key,
            "anthropic": self.anthropic_api_key,
            "gemini": self.gemini_api_key,
            "deepseek": self.deepseek_api_key,
            "openrouter": self.openrouter_api_key,
        }
        return key_map.get(provider.lower())


settings = Settings()
