"""Object API service configuration.

All configuration is read from environment variables, optionally loaded from a
local `.env` file in the working directory. The database connection is built
from its parts (`DB_USER`, `DB_PASSWORD`, `DB_HOST`, `DB_PORT`, `DB_NAME`);
a complete `DATABASE_URL` takes precedence when it is set.

Settings are parsed once per process via `get_settings()` and then passed
explicitly to the pieces that need them (`db.connect`, `main.main`).
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    """Service settings from environment variables (case-insensitive)."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Database connection pieces
    db_user: str = ""
    db_password: str = ""
    db_host: str = ""
    db_port: int | None = None
    db_name: str = ""
    db_driver: str = "postgresql+psycopg2"

    # Full SQLAlchemy URL; overrides the pieces above when non-empty
    database_url: str = ""

    # HTTP listener
    app_host: str = "0.0.0.0"
    app_port: int = 8080

    log_level: str = "INFO"

    @field_validator("db_port", mode="before")
    @classmethod
    def blank_port_is_unset(cls, v):
        """`DB_PORT=` in a .env file means no port, not a parse error."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def db_url(self) -> URL:
        """Build the SQLAlchemy connection URL.

        Returns:
            sqlalchemy.engine.URL: `DATABASE_URL` when set, otherwise
            `<driver>://<user>:<password>@<host>:<port>/<name>` assembled from
            the `DB_*` variables. Credentials are escaped by `URL.create`.
        """
        if self.database_url:
            return make_url(self.database_url)

        return URL.create(
            self.db_driver,
            username=self.db_user or None,
            password=self.db_password or None,
            host=self.db_host or None,
            port=self.db_port,
            database=self.db_name or None,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
