"""Runtime settings read from environment variables and .env."""

from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Procurement Records API"
    app_env: str = "development"
    app_port: int = 5000

    # Database (SQLite for local dev; any SQLAlchemy async URL works)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./vendors.db",
        alias="DATABASE_URL",
    )

    # HTTP surface
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    api_prefix: str = Field(default="", alias="API_PREFIX")  # "" mounts routes at root

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

settings = Settings()
