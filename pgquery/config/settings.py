import re
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from psycopg.conninfo import make_conninfo
from typing import Any, Optional

DEFAULT_DB_PORT = 5432
LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class Settings(BaseSettings):
    # PostgreSQL Configuration
    db_user: Optional[str] = None
    db_password: Optional[str] = None
    db_host: Optional[str] = None
    db_port: int = DEFAULT_DB_PORT
    db_name: Optional[str] = None

    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("db_port", mode="before")
    @classmethod
    def _parse_db_port(cls, value: Any) -> int:
        # Only the leading digits count ("5433abc" -> 5433);
        # unset or non-numeric values fall back to the PostgreSQL default
        if isinstance(value, int):
            return value
        match = LEADING_INT.match(str(value)) if value is not None else None
        if match is None:
            return DEFAULT_DB_PORT
        return int(match.group(1))

    def conninfo(self) -> str:
        """Build a libpq connection string, skipping unset parameters"""
        params = {
            "user": self.db_user,
            "password": self.db_password,
            "host": self.db_host,
            "port": self.db_port,
            "dbname": self.db_name,
        }
        return make_conninfo("", **{k: v for k, v in params.items() if v is not None})


settings = Settings()
