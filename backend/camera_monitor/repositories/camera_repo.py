from datetime import datetime, timezone
from typing import Any, Callable, Dict, List

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from camera_monitor.models.camera import Camera
from camera_monitor.schemas.camera import CAMERA_FIELDS


def utcnow() -> datetime:
	return datetime.now(timezone.utc)


class CameraRepository:
	"""Parametrized statements against the ``cameras`` table.

	Each call commits on its own; nothing here spans more than one statement.
	Missing ids are not an error for ``update_by_id`` / ``delete_by_id``.
	"""

	def __init__(self, clock: Callable[[], datetime] = utcnow) -> None:
		self.clock = clock

	def insert(self, db: Session, fields: Dict[str, Any]) -> int:
		now = self.clock()
		camera = Camera(
			**{name: fields[name] for name in CAMERA_FIELDS},
			created_at=now,
			updated_at=now,
		)
		db.add(camera)
		db.flush()
		camera_id = camera.id
		db.commit()
		return camera_id

	def update_by_id(self, db: Session, camera_id: int, fields: Dict[str, Any]) -> None:
		values = {name: fields[name] for name in CAMERA_FIELDS if name in fields}
		db.execute(
			update(Camera)
			.where(Camera.id == camera_id)
			.values(**values, updated_at=self.clock())
		)
		db.commit()

	def delete_by_id(self, db: Session, camera_id: int) -> None:
		db.execute(delete(Camera).where(Camera.id == camera_id))
		db.commit()

	def get_by_id(self, db: Session, camera_id: int) -> Camera | None:
		return db.execute(
			select(Camera).where(Camera.id == camera_id).execution_options(populate_existing=True)
		).scalar_one_or_none()

	def list_all(self, db: Session) -> List[Camera]:
		return list(
			db.execute(
				select(Camera).order_by(Camera.created_at.desc(), Camera.id.desc())
			).scalars()
		)
