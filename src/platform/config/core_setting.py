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

    PROJECT_NAME: str = 'Cinema Tickets'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # DEBUG enables @Logger.io arg/return logging
    LOG_TO_FILE: bool = False  # Write rotated log files under LOG_DIR

    # Purchase policy
    MAX_TICKETS_PER_PURCHASE: int = 20

    # Unit prices (integer currency units)
    ADULT_TICKET_PRICE: int = 20
    CHILD_TICKET_PRICE: int = 10
    INFANT_TICKET_PRICE: int = 0

    @field_validator('MAX_TICKETS_PER_PURCHASE')
    @classmethod
    def check_max_tickets(cls, v: int) -> int:
        if v < 1:
            raise ValueError('MAX_TICKETS_PER_PURCHASE must be at least 1')
        return v

    @field_validator('ADULT_TICKET_PRICE', 'CHILD_TICKET_PRICE', 'INFANT_TICKET_PRICE')
    @classmethod
    def check_ticket_price(cls, v: int) -> int:
        if v < 0:
            raise ValueError('Ticket price cannot be negative')
        return v


settings = Settings()  # type: ignore
