import logging
from typing import List

from src.common.dto import Appointment
from src.ports.appointment_repository import AppointmentRepositoryPort

logger = logging.getLogger(__name__)


class InMemoryAppointmentRepository(AppointmentRepositoryPort):
    def __init__(self):
        self._appointments: List[Appointment] = []

    async def add_appointment(self, appointment: Appointment) -> None:
        self._appointments.append(appointment)
        logger.info(
            f"Appointment stored: {appointment.date} {appointment.time}"
        )

    async def get_appointments(self) -> List[Appointment]:
        return list(self._appointments)

    async def has_appointment(self, date: str, time: str) -> bool:
        return any(
            appt.date == date and appt.time == time
            for appt in self._appointments
        )

    async def clear(self) -> None:
        logger.info(f"Clearing {len(self._appointments)} stored appointments")
        self._appointments.clear()
