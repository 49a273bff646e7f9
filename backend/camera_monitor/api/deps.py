from fastapi import Depends
from sqlalchemy.orm import Session

from camera_monitor.db.session import get_db
from camera_monitor.services.camera_service import CameraService

_camera_service = CameraService()


def get_db_session(db: Session = Depends(get_db)) -> Session:
	return db


def get_camera_service() -> CameraService:
	return _camera_service
