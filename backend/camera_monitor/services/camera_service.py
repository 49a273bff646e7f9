import logging
from typing import Any, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from camera_monitor.core.errors import NoFieldsToUpdate, StorageError
from camera_monitor.models.camera import Camera
from camera_monitor.repositories.camera_repo import CameraRepository
from camera_monitor.schemas.camera import is_stored_id, validate_create, validate_update

logger = logging.getLogger(__name__)


class CameraService:
	def __init__(self, repo: CameraRepository | None = None) -> None:
		self.repo = repo or CameraRepository()

	def list_cameras(self, db: Session) -> List[Camera]:
		try:
			return self.repo.list_all(db)
		except SQLAlchemyError as exc:
			raise self._storage_failure(db, "Failed to fetch cameras") from exc

	def create_camera(self, db: Session, data: Any) -> Camera | None:
		payload = validate_create(data)
		try:
			camera_id = self.repo.insert(db, payload.column_values())
			logger.info("Created camera %s (%s)", camera_id, payload.name)
			return self.repo.get_by_id(db, camera_id)
		except SQLAlchemyError as exc:
			raise self._storage_failure(db, "Failed to create camera") from exc

	def update_camera(self, db: Session, camera_id: int, data: Any) -> Camera | None:
		changes = validate_update(data).changes()
		if not changes:
			raise NoFieldsToUpdate()
		if not is_stored_id(camera_id):
			return None
		try:
			self.repo.update_by_id(db, camera_id, changes)
			logger.info("Updated camera %s: %s", camera_id, ", ".join(changes))
			return self.repo.get_by_id(db, camera_id)
		except SQLAlchemyError as exc:
			raise self._storage_failure(db, "Failed to update camera") from exc

	def delete_camera(self, db: Session, camera_id: int) -> None:
		if not is_stored_id(camera_id):
			return
		try:
			self.repo.delete_by_id(db, camera_id)
			logger.info("Deleted camera %s", camera_id)
		except SQLAlchemyError as exc:
			raise self._storage_failure(db, "Failed to delete camera") from exc

	def _storage_failure(self, db: Session, message: str) -> StorageError:
		logger.exception(message)
		try:
			db.rollback()
		except SQLAlchemyError:
			logger.exception("Rollback after storage failure also failed")
		return StorageError(message)
