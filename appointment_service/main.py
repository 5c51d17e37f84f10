# appointment_service/main.py
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from src.adapters.api import router
from src.common.config import Settings
from src.domain.services.appointment_service import AppointmentService
from src.infrastructure.memory.in_memory_appointment_repository import (
    InMemoryAppointmentRepository,
)

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings):
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[AppointmentService] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings)

    app = FastAPI(
        title=settings.title,
        root_path=settings.root_path,
        debug=settings.is_test,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST"],
    )
    app.state.settings = settings
    app.state.appointment_service = service or AppointmentService(
        InMemoryAppointmentRepository()
    )
    app.include_router(router)

    logger.info(f"Appointment service started in {settings.app_env} mode")
    return app


app = create_app()
