from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    DATABASE_URL: str
    ENVIRONMENT: str = "development"
    PROJECT_NAME: str = "Orders API"
    API_V1_PREFIX: str = "/api/v1"
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"
    SQL_ECHO: bool = False
    # Solo se aplica a conexiones PostgreSQL
    DB_STATEMENT_TIMEOUT_MS: int = 5000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


settings = Settings()
