# todolist/config.py
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # PostgreSQL
    POSTGRES_USER: str = Field("todo_user")
    POSTGRES_PASSWORD: str = Field("StrongPassword123!")
    POSTGRES_DB: str = Field("todolist")
    POSTGRES_HOST: str = Field("localhost")
    POSTGRES_PORT: int = Field(5432)
    # Full SQLAlchemy URL; wins over the POSTGRES_* parts (e.g. sqlite for local runs)
    DATABASE_URL: Optional[str] = Field(None)

    # JWT / Auth
    JWT_SECRET_KEY: str = Field("dev-secret-change-me-at-least-32-chars")   # override in env for prod
    JWT_ALGORITHM: str = Field("HS256")
    JWT_ISSUER: str = Field("TodoListAPI")
    JWT_AUDIENCE: str = Field("TodoListClient")
    JWT_EXPIRATION_MINUTES: int = Field(60, ge=1)

    # HTTP
    CORS_ORIGINS: str = Field("http://localhost:4200,https://localhost:4200")

    # Bootstrap / logging
    SEED_DEMO_DATA: bool = Field(True)
    LOG_LEVEL: str = Field("INFO")

    # Load from environment and (optionally) a .env file
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid LOG_LEVEL '{v}'")
        return upper

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg2://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

def settings() -> Settings:
    return Settings()
