from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class FieldViolation:
	field: str
	message: str

	def as_dict(self) -> Dict[str, str]:
		return {"field": self.field, "message": self.message}


class CameraError(Exception):
	"""Base class for errors raised by the camera API layer."""

	status_code = 500
	message = "Unexpected error"

	def __init__(self, message: str | None = None) -> None:
		if message is not None:
			self.message = message
		super().__init__(self.message)

	def to_payload(self) -> Dict[str, Any]:
		return {"error": self.message}


class ValidationError(CameraError):
	"""A create or update payload failed field validation.

	Raised before any storage call is made; carries every violation found so
	the caller can report them all at once.
	"""

	status_code = 400
	message = "Invalid camera data"

	def __init__(self, violations: List[FieldViolation]) -> None:
		super().__init__()
		self.violations = list(violations)

	def to_payload(self) -> Dict[str, Any]:
		return {
			"error": self.message,
			"details": [violation.as_dict() for violation in self.violations],
		}


class NoFieldsToUpdate(CameraError):
	status_code = 400
	message = "No fields to update"


class StorageError(CameraError):
	"""The persistence layer failed; the message is safe to show to clients."""

	status_code = 500
	message = "Storage failure"


class CameraClientError(Exception):
	pass
