from sqlalchemy import Column, DateTime, Integer, String

from camera_monitor.db.base import Base


class Camera(Base):
	__tablename__ = "cameras"

	id = Column(Integer, primary_key=True, index=True)
	name = Column(String, nullable=False)
	ip = Column(String, nullable=False)
	serial = Column(String, nullable=False)
	location = Column(String, nullable=False)
	store = Column(String, nullable=False, index=True)
	status = Column(String(16), nullable=False)
	channels_total = Column(Integer, nullable=False, default=0)
	channels_working = Column(Integer, nullable=False, default=0)
	channels_blackscreen = Column(Integer, nullable=False, default=0)
	created_at = Column(DateTime(timezone=True), nullable=False)
	updated_at = Column(DateTime(timezone=True), nullable=False)
