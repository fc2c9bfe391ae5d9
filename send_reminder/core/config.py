"""
Application configuration with environment variables.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings
from pydantic import ConfigDict, field_validator
from typing import Optional, List


class Settings(BaseSettings):
    model_config = ConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "send-reminder"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Supabase backend (no defaults - both required at request time)
    SUPABASE_URL: Optional[str] = None
    SUPABASE_ANON_KEY: Optional[str] = None

    # Target table for demo automation runs
    WORKFLOW_RUNS_TABLE: str = "workflow_runs"

    # CORS - middleware is only installed when origins are configured
    CORS_ORIGINS: List[str] = []

    @field_validator('SUPABASE_URL', 'SUPABASE_ANON_KEY', mode='before')
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat empty or whitespace-only values as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('SUPABASE_URL')
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return v.strip().rstrip("/")

    @property
    def is_configured(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_ANON_KEY)

    def missing_config_message(self) -> str:
        return "Missing SUPABASE_URL or SUPABASE_ANON_KEY"


@lru_cache
def get_settings() -> Settings:
    """Settings for the running process, read once."""
    return Settings()
