from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Dict, List

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from camera_monitor.core.errors import FieldViolation, ValidationError


class CameraStatus(str, Enum):
	ONLINE = "online"
	OFFLINE = "offline"
	AVISO = "aviso"
	ERRO = "erro"
	REPARO = "reparo"


# Client-supplied columns, in the order they are written to storage.
CAMERA_FIELDS = (
	"name",
	"ip",
	"serial",
	"location",
	"store",
	"status",
	"channels_total",
	"channels_working",
	"channels_blackscreen",
)

# Signed 64-bit range of an INTEGER column.
MIN_STORED_INT = -(2**63)
MAX_STORED_INT = 2**63 - 1


def _whole_number(value: Any) -> Any:
	# JSON 4.0 is the same number as 4.
	if isinstance(value, float) and value.is_integer():
		return int(value)
	return value


def is_stored_id(camera_id: int) -> bool:
	return MIN_STORED_INT <= camera_id <= MAX_STORED_INT


NonEmptyStr = Annotated[str, Field(strict=True, min_length=1)]
ChannelCount = Annotated[
	int, BeforeValidator(_whole_number), Field(strict=True, ge=0, le=MAX_STORED_INT)
]


class CameraBase(BaseModel):
	name: NonEmptyStr
	ip: NonEmptyStr
	serial: NonEmptyStr
	location: NonEmptyStr
	store: NonEmptyStr
	status: CameraStatus
	channels_total: ChannelCount
	channels_working: ChannelCount
	channels_blackscreen: ChannelCount


class CameraCreate(CameraBase):
	def column_values(self) -> Dict[str, Any]:
		data = self.model_dump(mode="json")
		return {field: data[field] for field in CAMERA_FIELDS}


class CameraUpdate(BaseModel):
	"""Partial camera payload.

	Fields left out of the request stay unset; an explicit ``null`` is
	rejected, the same as any other wrongly typed value.
	"""

	name: NonEmptyStr = None
	ip: NonEmptyStr = None
	serial: NonEmptyStr = None
	location: NonEmptyStr = None
	store: NonEmptyStr = None
	status: CameraStatus = None
	channels_total: ChannelCount = None
	channels_working: ChannelCount = None
	channels_blackscreen: ChannelCount = None

	def changes(self) -> Dict[str, Any]:
		data = self.model_dump(mode="json", exclude_unset=True)
		return {field: data[field] for field in CAMERA_FIELDS if field in data}


class CameraRead(CameraBase):
	id: int
	created_at: datetime
	updated_at: datetime

	model_config = ConfigDict(from_attributes=True)


class CameraListResponse(BaseModel):
	cameras: List[CameraRead]


class CameraResponse(BaseModel):
	camera: CameraRead | None = None


class DeleteResponse(BaseModel):
	success: bool = True


def _violations(exc: PydanticValidationError) -> List[FieldViolation]:
	violations = []
	for error in exc.errors():
		location = ".".join(str(part) for part in error.get("loc", ())) or "body"
		violations.append(FieldViolation(field=location, message=error.get("msg", "")))
	return violations


def _require_object(data: Any) -> None:
	if not isinstance(data, dict):
		raise ValidationError([FieldViolation(field="body", message="Expected a JSON object")])


def validate_create(data: Any) -> CameraCreate:
	_require_object(data)
	try:
		return CameraCreate.model_validate(data)
	except PydanticValidationError as exc:
		raise ValidationError(_violations(exc)) from exc


def validate_update(data: Any) -> CameraUpdate:
	_require_object(data)
	try:
		return CameraUpdate.model_validate(data)
	except PydanticValidationError as exc:
		raise ValidationError(_violations(exc)) from exc
