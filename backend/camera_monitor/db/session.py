from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from camera_monitor.core.config import get_settings


def _engine_kwargs(url: str) -> dict:
	if url.startswith("sqlite"):
		return {"connect_args": {"check_same_thread": False}}
	return {"pool_pre_ping": True}


settings = get_settings()
engine = create_engine(settings.DATABASE_URL, **_engine_kwargs(settings.DATABASE_URL))
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db() -> Iterator[Session]:
	db = SessionLocal()
	try:
		yield db
	finally:
		db.close()
