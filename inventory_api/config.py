from functools import lru_cache
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables (and `.env`).

    Database connection parameters keep the names used by the deployment
    environment: HOST, USER, DATABASE_PASSWORD and DATABASE.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # HTTP server
    PORT: int = 80
    BIND_HOST: str = "0.0.0.0"
    CORS_ORIGINS: list[str] = ["*"]

    # Database
    HOST: str = "localhost"
    DB_PORT: int = 3306
    USER: str = "myuser"
    DATABASE_PASSWORD: str = "mypassword"
    DATABASE: str = "myapp"
    DATABASE_URL: Optional[str] = None
    POOL_SIZE: int = Field(10, ge=1)
    POOL_TIMEOUT: Optional[float] = None

    # Runtime behaviour
    ENVIRONMENT: str = "development"
    EXPOSE_ERROR_DETAILS: Optional[bool] = None
    STRICT_STARTUP: bool = False
    LOG_LEVEL: str = "INFO"

    @model_validator(mode="after")
    def _fill_derived(self) -> "Settings":
        if self.DATABASE_URL is None:
            self.DATABASE_URL = URL.create(
                "mysql+pymysql",
                username=self.USER,
                password=self.DATABASE_PASSWORD,
                host=self.HOST,
                port=self.DB_PORT,
                database=self.DATABASE,
            ).render_as_string(hide_password=False)
        if self.EXPOSE_ERROR_DETAILS is None:
            self.EXPOSE_ERROR_DETAILS = self.ENVIRONMENT == "development"
        return self


@lru_cache()
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
