import logging

from camera_monitor.core.config import get_settings


def configure_logging() -> None:
	settings = get_settings()
	logging.basicConfig(
		level=settings.LOG_LEVEL,
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)
