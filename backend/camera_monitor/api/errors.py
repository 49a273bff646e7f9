from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from camera_monitor.core.errors import CameraError, FieldViolation, ValidationError


async def camera_error_handler(request: Request, exc: CameraError) -> JSONResponse:
	return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def request_validation_handler(
	request: Request, exc: RequestValidationError
) -> JSONResponse:
	violations = [
		FieldViolation(
			field=".".join(str(part) for part in error.get("loc", ())),
			message=error.get("msg", ""),
		)
		for error in exc.errors()
	]
	return JSONResponse(status_code=400, content=ValidationError(violations).to_payload())


def register_exception_handlers(app: FastAPI) -> None:
	app.add_exception_handler(CameraError, camera_error_handler)
	app.add_exception_handler(RequestValidationError, request_validation_handler)
