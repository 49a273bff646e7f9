import csv
import io
import logging
from datetime import date
from pathlib import Path
from typing import Iterable, List

from camera_monitor.core.config import get_settings
from camera_monitor.schemas.camera import CameraRead, CameraStatus

logger = logging.getLogger(__name__)

EXPORT_HEADER = [
	"Nome",
	"IP",
	"Serial",
	"Localização",
	"Loja",
	"Status",
	"Canais Total",
	"Canais Funcionando",
	"Canais TelaPreta",
]


def export_rows(cameras: Iterable[CameraRead]) -> List[List[str]]:
	rows = [list(EXPORT_HEADER)]
	for camera in cameras:
		rows.append(
			[
				camera.name,
				camera.ip,
				camera.serial,
				camera.location,
				camera.store,
				CameraStatus(camera.status).value,
				str(camera.channels_total),
				str(camera.channels_working),
				str(camera.channels_blackscreen),
			]
		)
	return rows


def to_csv(cameras: Iterable[CameraRead]) -> str:
	"""Every value quoted, embedded quotes doubled, rows joined by ``\\n``."""
	buffer = io.StringIO()
	writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
	writer.writerows(export_rows(cameras))
	return buffer.getvalue().rstrip("\n")


def export_filename(day: date | None = None) -> str:
	day = day or date.today()
	return f"relatorio_cameras_{day.isoformat()}.csv"


def write_export(
	cameras: Iterable[CameraRead],
	directory: str | Path | None = None,
	day: date | None = None,
) -> Path:
	if directory is None:
		directory = get_settings().EXPORT_DIR
	path = Path(directory) / export_filename(day)
	path.write_text(to_csv(cameras), encoding="utf-8")
	logger.info("Wrote camera export %s", path)
	return path
