from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from camera_monitor.api.errors import register_exception_handlers
from camera_monitor.api.v1.api import api_router
from camera_monitor.core.config import get_settings
from camera_monitor.core.logging import configure_logging
from camera_monitor.db.base import Base
from camera_monitor.db.session import engine
from camera_monitor.models import camera  # noqa: F401


def create_app() -> FastAPI:
	settings = get_settings()
	configure_logging()

	app = FastAPI(title=settings.PROJECT_NAME)
	app.add_middleware(
		CORSMiddleware,
		allow_origins=settings.CORS_ORIGINS,
		allow_credentials=True,
		allow_methods=["*"],
		allow_headers=["*"],
	)
	register_exception_handlers(app)

	app.include_router(api_router, prefix=settings.API_PREFIX)

	@app.on_event("startup")
	def on_startup() -> None:
		Base.metadata.create_all(bind=engine)

	@app.get("/health")
	def health_check():
		return {"status": "ok"}

	return app


app = create_app()
