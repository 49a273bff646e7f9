from dataclasses import dataclass, field
from typing import Iterable

from camera_monitor.schemas.camera import CameraRead, CameraStatus


@dataclass
class ChannelTotals:
	total: int = 0
	working: int = 0
	blackscreen: int = 0


@dataclass
class DashboardMetrics:
	total: int = 0
	online: int = 0
	offline: int = 0
	aviso: int = 0
	erro: int = 0
	reparo: int = 0
	channels: ChannelTotals = field(default_factory=ChannelTotals)

	def count(self, status: CameraStatus | str) -> int:
		return getattr(self, CameraStatus(status).value)


def compute_metrics(cameras: Iterable[CameraRead]) -> DashboardMetrics:
	"""Status counters and channel sums for the metric tiles, in one pass."""
	metrics = DashboardMetrics()
	for camera in cameras:
		metrics.total += 1
		status = CameraStatus(camera.status).value
		setattr(metrics, status, getattr(metrics, status) + 1)
		metrics.channels.total += camera.channels_total
		metrics.channels.working += camera.channels_working
		metrics.channels.blackscreen += camera.channels_blackscreen
	return metrics
