import logging
from typing import Any, Dict, List

import requests

from camera_monitor.core.config import get_settings
from camera_monitor.core.errors import CameraClientError
from camera_monitor.schemas.camera import CameraRead

logger = logging.getLogger(__name__)


class CameraStore:
	"""Client-side mirror of the camera list for one dashboard page.

	``open()`` does the initial fetch and ``close()`` releases the HTTP
	session; use it as a context manager to tie both to the page lifetime.
	Mutations only touch the local list after the server has accepted them.
	"""

	def __init__(
		self,
		base_url: str | None = None,
		session: Any = None,
		timeout: float | None = None,
	) -> None:
		settings = get_settings()
		self.base_url = (settings.API_BASE_URL if base_url is None else base_url).rstrip("/")
		self.prefix = settings.API_PREFIX.rstrip("/")
		self.timeout = settings.HTTP_TIMEOUT if timeout is None else timeout
		self._owns_session = session is None
		self.session = session if session is not None else requests.Session()
		self.cameras: List[CameraRead] = []
		self.loading = False
		self.error: str | None = None

	def __enter__(self) -> "CameraStore":
		self.open()
		return self

	def __exit__(self, *exc_info: Any) -> None:
		self.close()

	@property
	def url(self) -> str:
		return f"{self.base_url}{self.prefix}/cameras"

	def open(self) -> None:
		self.fetch()

	def close(self) -> None:
		if self._owns_session:
			self.session.close()

	def fetch(self) -> List[CameraRead]:
		self.loading = True
		try:
			response = self.session.get(self.url, timeout=self.timeout)
			data = self._json(response, "Failed to fetch cameras")
			self.cameras = [CameraRead.model_validate(item) for item in data.get("cameras") or []]
			self.error = None
		except (CameraClientError, requests.RequestException, ValueError) as exc:
			logger.warning("Camera fetch failed: %s", exc)
			self.error = str(exc) or "An error occurred"
			self.cameras = []
		finally:
			self.loading = False
		return self.cameras

	refetch = fetch

	def add(self, data: Dict[str, Any]) -> CameraRead:
		camera = self._camera(
			self._send("post", self.url, "Failed to add camera", json=data),
			"Failed to add camera",
		)
		self.cameras = [camera, *self.cameras]
		return camera

	def update(self, camera_id: int, data: Dict[str, Any]) -> CameraRead | None:
		payload = self._send(
			"put", f"{self.url}/{camera_id}", "Failed to update camera", json=data
		)
		camera = self._camera(payload, "Failed to update camera") if payload.get("camera") else None
		if camera is None:
			self.cameras = [item for item in self.cameras if item.id != camera_id]
		else:
			self.cameras = [camera if item.id == camera_id else item for item in self.cameras]
		return camera

	def delete(self, camera_id: int) -> None:
		self._send("delete", f"{self.url}/{camera_id}", "Failed to delete camera")
		self.cameras = [item for item in self.cameras if item.id != camera_id]

	def _send(self, method: str, url: str, failure: str, **kwargs: Any) -> Dict[str, Any]:
		try:
			response = getattr(self.session, method)(url, timeout=self.timeout, **kwargs)
		except requests.RequestException as exc:
			logger.warning("%s: %s", failure, exc)
			raise CameraClientError(failure) from exc
		return self._json(response, failure)

	def _json(self, response: Any, failure: str) -> Dict[str, Any]:
		if response.status_code >= 400:
			logger.warning("%s: HTTP %s", failure, response.status_code)
			raise CameraClientError(failure)
		try:
			data = response.json()
		except ValueError as exc:
			raise CameraClientError(failure) from exc
		if not isinstance(data, dict):
			raise CameraClientError(failure)
		return data

	def _camera(self, payload: Dict[str, Any], failure: str) -> CameraRead:
		try:
			return CameraRead.model_validate(payload.get("camera"))
		except ValueError as exc:
			raise CameraClientError(failure) from exc
