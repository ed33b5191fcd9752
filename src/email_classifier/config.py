"""
Configuration settings for the Email Classifier service.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # === Application ===
    APP_NAME: str = "Email Classifier"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # === OpenAI Configuration ===
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    OPENAI_MODEL: str = "gpt-4o"
    OPENAI_TIMEOUT: int = 60  # seconds
    
    # === LLM Generation Parameters ===
    LLM_TEMPERATURE: float = 0.1  # Low for determinism
    
    # === Demo Mode ===
    # Keys equal to the placeholder or containing the marker run the keyword classifier
    DEMO_API_KEY_PLACEHOLDER: str = "default_key"
    NON_PRODUCTION_KEY_MARKER: str = "sk-or-v1"
    
    # === Prompts ===
    PROMPT_TEMPLATES_DIR: str = str(PACKAGE_DIR / "prompts")
    
    # === Input Processing ===
    MIN_EMAIL_LENGTH: int = 10  # chars
    
    # === Persistence ===
    STORAGE_BACKEND: str = "memory"  # "memory" or "redis"
    REDIS_URL: str = "redis://redis:6379/0"
    REDIS_MAX_CONNECTIONS: int = 50
    RESULT_TTL_SECONDS: int = 604800  # 7 days
    HISTORY_LIMIT: int = 50
    
    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


# Global settings instance
settings = Settings()
