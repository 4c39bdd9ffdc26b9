"""Service settings, read from the environment or a .env file."""
from decimal import Decimal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SQLITE_DEFAULT = "sqlite+aiosqlite:///./bank.db"


def _normalize_database_url(url: str) -> str:
    """Route plain Postgres URLs to the asyncpg driver; the async engine cannot use psycopg2."""
    if not url or url == SQLITE_DEFAULT:
        return url
    if url.startswith("postgres://"):
        return "postgresql+asyncpg://" + url[len("postgres://") :]
    if url.startswith("postgresql://") and "+asyncpg" not in url:
        return "postgresql+asyncpg://" + url[len("postgresql://") :]
    return url


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Accounts and transactions live here; a local SQLite file unless DATABASE_URL is set
    database_url: str = SQLITE_DEFAULT

    # Service
    app_name: str = "Bank Transaction Service"
    debug: bool = False
    log_level: str = "INFO"

    # Flat fee charged per ATM operation
    atm_deposit_fee: Decimal = Field(Decimal("2.00"), ge=0)
    atm_withdrawal_fee: Decimal = Field(Decimal("1.00"), ge=0)

    @field_validator("database_url", mode="before")
    @classmethod
    def use_async_driver(cls, v: str | None) -> str:
        if v is None or (isinstance(v, str) and v.strip() == ""):
            return SQLITE_DEFAULT
        return _normalize_database_url(v) if isinstance(v, str) else v


settings = Settings()
