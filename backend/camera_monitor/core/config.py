from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[2]


def _default_sqlite_url() -> str:
	db_path = BASE_DIR / "cameras.db"
	return f"sqlite:///{db_path.as_posix()}"


class Settings(BaseSettings):
	model_config = SettingsConfigDict(
		env_file=str(BASE_DIR / ".env"),
		env_file_encoding="utf-8",
		extra="ignore",
	)

	PROJECT_NAME: str = "Camera Monitor API"
	API_PREFIX: str = "/api"
	LOG_LEVEL: str = "INFO"

	DATABASE_URL: str = _default_sqlite_url()

	API_BASE_URL: str = "http://localhost:8000"
	HTTP_TIMEOUT: float = 10.0
	EXPORT_DIR: str = "."

	CORS_ORIGINS: List[str] = Field(
		default_factory=lambda: [
			"http://localhost:3000",
			"http://127.0.0.1:3000",
			"http://localhost:5173",
			"http://127.0.0.1:5173",
		]
	)


@lru_cache
def get_settings() -> Settings:
	return Settings()
