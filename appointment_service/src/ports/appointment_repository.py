from abc import ABC, abstractmethod
from typing import List

from src.common.dto import Appointment


class AppointmentRepositoryPort(ABC):
    @abstractmethod
    async def add_appointment(self, appointment: Appointment) -> None:
        pass

    @abstractmethod
    async def get_appointments(self) -> List[Appointment]:
        pass

    @abstractmethod
    async def has_appointment(self, date: str, time: str) -> bool:
        pass

    @abstractmethod
    async def clear(self) -> None:
        pass
