from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Ticket Purchase Service'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Logging
    LOG_TO_FILE: bool = False  # Production uses stdout only

    # Purchase rules
    MAX_TICKETS_PER_PURCHASE: int = 20

    @field_validator('MAX_TICKETS_PER_PURCHASE')
    @classmethod
    def validate_max_tickets(cls, v: int) -> int:
        if v < 1:
            raise ValueError('MAX_TICKETS_PER_PURCHASE must be at least 1')
        return v


settings = Settings()  # type: ignore
