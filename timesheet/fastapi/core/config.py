from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url


class Settings(BaseSettings):
    # Environment mode: 'dev' or 'prod'
    ENV_MODE: str = 'dev'

    # Application settings
    APP_NAME: str = "Timesheet API"
    APP_VERSION: str = "1.0.0"

    # Server settings (read by run_server.py)
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Store URL and access key (read from .env file)
    DATABASE_URL: str = ''
    DATABASE_KEY: str = ''

    # Create the clock_records table on startup when missing
    AUTO_CREATE_TABLES: bool = True

    # Comma-separated list of allowed origins, "*" for all
    CORS_ORIGINS: str = '*'

    LOG_LEVEL: str = 'INFO'

    model_config = SettingsConfigDict(env_file=".env", extra='allow')

    @property
    def cors_origins(self) -> List[str]:
        origins = [origin.strip() for origin in self.CORS_ORIGINS.split(",")]
        return [origin for origin in origins if origin]

    @property
    def ASYNC_DB_URL(self) -> str:
        if not self.DATABASE_URL:
            if self.ENV_MODE == "dev":
                # Fall back to SQLite for dev mode if no store URL provided
                return "sqlite+aiosqlite:///./dev.db"
            raise ValueError("DATABASE_URL must be set when ENV_MODE is 'prod'")

        if "://" not in self.DATABASE_URL:
            raise ValueError(
                "DATABASE_URL must include a scheme, e.g. postgresql://host/db"
            )

        scheme, rest = self.DATABASE_URL.split("://", 1)
        if scheme in ("postgres", "postgresql"):
            url = f"postgresql+asyncpg://{rest}"
        else:
            # Already names an async driver, e.g. sqlite+aiosqlite
            url = self.DATABASE_URL

        if self.DATABASE_KEY:
            url = make_url(url).set(password=self.DATABASE_KEY).render_as_string(hide_password=False)
        return url

    @property
    def SAFE_DB_URL(self) -> str:
        """Store URL with the password masked, for logging."""
        return make_url(self.ASYNC_DB_URL).render_as_string(hide_password=True)


class DevSettings(Settings):
    # Environment mode: 'dev' or 'prod'
    ENV_MODE: str = 'dev'

    model_config = SettingsConfigDict(env_file=".env", extra='allow')


class ProdSettings(Settings):
    # Environment mode: 'dev' or 'prod'
    ENV_MODE: str = 'prod'

    AUTO_CREATE_TABLES: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra='allow')


def get_settings(env_mode: str = "dev"):
    if env_mode == "dev":
        return DevSettings()
    return ProdSettings()
