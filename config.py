"""
Detector de Idiomas — Application Settings
Loaded via pydantic-settings from environment variables / .env file.
Only runtime concerns live here: the scoring weights, the 70% threshold and
the 10-char minimum are fixed constants in scoring.engine / nlp.language_detector.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_env: str = "development"
    debug: bool = True
    log_level: str = "INFO"
    max_text_length: int = 100_000     # HTTP request bodies / uploads only


@lru_cache
def get_settings() -> Settings:
    """Return a cached singleton Settings instance."""
    return Settings()
