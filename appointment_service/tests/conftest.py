from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from main import create_app
from src.common.clock import fixed_clock
from src.common.config import Settings
from src.domain.services.appointment_service import AppointmentService
from src.infrastructure.memory.in_memory_appointment_repository import (
    InMemoryAppointmentRepository,
)

NOW = datetime(2026, 10, 19, 12, 0)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def repository():
    return InMemoryAppointmentRepository()


@pytest.fixture
def service(repository, now):
    return AppointmentService(repository, clock=fixed_clock(now))


@pytest.fixture
def client(service):
    app = create_app(Settings(app_env="test"), service=service)
    with TestClient(app) as client:
        yield client
