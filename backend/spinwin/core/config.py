from functools import lru_cache

from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    DATABASE_URL: str = "sqlite:///./dev.db"
    DATABASE_SSLMODE: str | None = None
    ADMIN_PASSWORD: str = "supersecret123"
    GOOGLE_CREDENTIALS: str | None = None
    SPREADSHEET_ID: str = ""
    SHEETS_RANGE: str = "Sheet1!A:D"
    DEFAULT_LOCALE: str = "en"
    LOG_LEVEL: str = "INFO"

    model_config = ConfigDict(env_file = ".env")

    @field_validator("DATABASE_URL")
    @classmethod
    def normalize_postgres_scheme(cls, v: str) -> str:
        # Hosting platforms hand out postgres://, SQLAlchemy only knows postgresql://
        if v.startswith("postgres://"):
            return "postgresql://" + v[len("postgres://"):]
        return v

@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
