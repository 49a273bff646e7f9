from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List

from camera_monitor.schemas.camera import CameraRead, CameraStatus

ALL_STORES = "all"


class QuickFilter(str, Enum):
	ALL = "all"
	ONLINE = "online"
	OFFLINE = "offline"
	AVISO = "aviso"
	ERRO = "erro"
	REPARO = "reparo"
	WORKING = "working"
	BLACKSCREEN = "blackscreen"


@dataclass(frozen=True)
class DashboardFilters:
	"""Filter state of the dashboard.

	``quick`` is the metric-tile filter and ``status`` the dropdown; both
	apply when both are set, so conflicting statuses match nothing.
	"""

	quick: QuickFilter = QuickFilter.ALL
	status: CameraStatus | None = None
	store: str = ALL_STORES
	query: str = ""


def stores(cameras: Iterable[CameraRead]) -> List[str]:
	"""Store dropdown options: the sentinel, then stores by first appearance."""
	seen = dict.fromkeys(camera.store for camera in cameras)
	return [ALL_STORES, *seen]


def matches_quick(camera: CameraRead, quick: QuickFilter) -> bool:
	quick = QuickFilter(quick)
	if quick is QuickFilter.ALL:
		return True
	if quick is QuickFilter.WORKING:
		return camera.channels_working > 0
	if quick is QuickFilter.BLACKSCREEN:
		return camera.channels_blackscreen > 0
	return camera.status == quick.value


def matches_status(camera: CameraRead, status: CameraStatus | None) -> bool:
	if status is None:
		return True
	return camera.status == CameraStatus(status).value


def matches_store(camera: CameraRead, store: str) -> bool:
	return store == ALL_STORES or camera.store == store


def matches_query(camera: CameraRead, query: str) -> bool:
	if not query:
		return True
	haystack = " ".join(
		[camera.name, camera.ip, camera.serial, camera.location, camera.store]
	)
	return query.lower() in haystack.lower()


def matches(camera: CameraRead, filters: DashboardFilters) -> bool:
	return (
		matches_quick(camera, filters.quick)
		and matches_status(camera, filters.status)
		and matches_store(camera, filters.store)
		and matches_query(camera, filters.query)
	)


def apply_filters(cameras: Iterable[CameraRead], filters: DashboardFilters) -> List[CameraRead]:
	return [camera for camera in cameras if matches(camera, filters)]
