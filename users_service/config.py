from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./users.db"
    LOG_LEVEL: str = "INFO"
    STORAGE_BACKEND: Literal["sqlalchemy", "memory"] = "sqlalchemy"
    LIST_WRAPPED: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
