from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from camera_monitor.api.deps import get_camera_service, get_db_session
from camera_monitor.models.camera import Camera
from camera_monitor.schemas.camera import (
	CameraListResponse,
	CameraRead,
	CameraResponse,
	DeleteResponse,
)
from camera_monitor.services.camera_service import CameraService

router = APIRouter()


def _read(camera: Camera | None) -> CameraRead | None:
	return CameraRead.model_validate(camera) if camera is not None else None


@router.get("", response_model=CameraListResponse)
def list_cameras(
	db: Session = Depends(get_db_session),
	service: CameraService = Depends(get_camera_service),
):
	return CameraListResponse(
		cameras=[CameraRead.model_validate(camera) for camera in service.list_cameras(db)]
	)


@router.post("", response_model=CameraResponse)
def create_camera(
	payload: Any = Body(None),
	db: Session = Depends(get_db_session),
	service: CameraService = Depends(get_camera_service),
):
	return CameraResponse(camera=_read(service.create_camera(db, payload)))


@router.put("/{camera_id}", response_model=CameraResponse)
def update_camera(
	camera_id: int,
	payload: Any = Body(None),
	db: Session = Depends(get_db_session),
	service: CameraService = Depends(get_camera_service),
):
	return CameraResponse(camera=_read(service.update_camera(db, camera_id, payload)))


@router.delete("/{camera_id}", response_model=DeleteResponse)
def delete_camera(
	camera_id: int,
	db: Session = Depends(get_db_session),
	service: CameraService = Depends(get_camera_service),
):
	service.delete_camera(db, camera_id)
	return DeleteResponse(success=True)
