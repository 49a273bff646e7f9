"""
Shared pytest fixtures.
Every test runs against its own in-memory SQLite database; the app's
session dependency and camera service are overridden to use it.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from camera_monitor.api.deps import get_camera_service
from camera_monitor.db.base import Base
from camera_monitor.db.session import get_db
from camera_monitor.main import create_app
from camera_monitor.models import camera  # noqa: F401
from camera_monitor.repositories.camera_repo import CameraRepository
from camera_monitor.services.camera_service import CameraService

from factories import StepClock


@pytest.fixture
def engine():
	engine = create_engine(
		"sqlite://",
		connect_args={"check_same_thread": False},
		poolclass=StaticPool,
	)
	Base.metadata.create_all(bind=engine)
	yield engine
	engine.dispose()


@pytest.fixture
def session_factory(engine):
	return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
	session = session_factory()
	try:
		yield session
	finally:
		session.close()


@pytest.fixture
def clock():
	return StepClock()


@pytest.fixture
def repo(clock):
	return CameraRepository(clock=clock)


@pytest.fixture
def app(session_factory, repo):
	app = create_app()

	def override_get_db():
		session = session_factory()
		try:
			yield session
		finally:
			session.close()

	service = CameraService(repo)
	app.dependency_overrides[get_db] = override_get_db
	app.dependency_overrides[get_camera_service] = lambda: service
	yield app
	app.dependency_overrides.clear()


@pytest.fixture
def client(app):
	return TestClient(app)
