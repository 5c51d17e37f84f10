import asyncio
import logging
from datetime import datetime
from typing import List, Optional

from src.common.clock import Clock, system_clock
from src.common.dto import Appointment, BookingFailure, BookingResult
from src.ports.appointment_repository import AppointmentRepositoryPort

logger = logging.getLogger(__name__)


DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%Y.%m.%d",
    "%d %b %Y",
    "%d %B %Y",
    "%b %d %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%B %d, %Y",
)

TIME_FORMATS = ("%H:%M", "%H:%M:%S", "%I:%M %p", "%I:%M%p", "%I %p", "%I%p")


def _to_local_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def _parse_with_formats(date: str, time: str) -> Optional[datetime]:
    for date_format in DATE_FORMATS:
        if not time:
            candidates = [(date, date_format)]
        else:
            candidates = [
                (f"{date} {time}", f"{date_format} {time_format}")
                for time_format in TIME_FORMATS
            ]
        for value, pattern in candidates:
            try:
                return datetime.strptime(value, pattern)
            except ValueError:
                continue
    return None


def parse_appointment_datetime(date: str, time: str) -> Optional[datetime]:
    """Combine form date and time into a naive local datetime.

    ISO 8601 is tried first, then a few common written date forms such as
    ``2030/04/01`` or ``1 Apr 2030``. Values carrying a UTC offset are
    converted to local time. Returns None when the pair does not describe a
    valid point in time. A blank time means the start of the day.
    """
    date = (date or "").strip()
    time = (time or "").strip()
    if not date:
        return None
    value = f"{date} {time}" if time else date
    if value.endswith(("Z", "z")):
        value = f"{value[:-1]}+00:00"
    try:
        return _to_local_naive(datetime.fromisoformat(value))
    except ValueError:
        return _parse_with_formats(date, time)


class AppointmentService:
    def __init__(
        self,
        repository: AppointmentRepositoryPort,
        clock: Clock = system_clock,
    ):
        self.repository = repository
        self.clock = clock
        self._lock = asyncio.Lock()

    def is_in_past(self, date: str, time: str) -> bool:
        appointment_date_time = parse_appointment_datetime(date, time)
        if appointment_date_time is None:
            logger.debug(
                f"Could not parse appointment date/time: {date!r} {time!r}"
            )
            return False
        return appointment_date_time < self.clock()

    async def book(self, date: str, time: str) -> BookingResult:
        logger.info(f"Attempting to book appointment: {date} {time}")
        async with self._lock:
            if self.is_in_past(date, time):
                logger.warning(
                    f"Rejected appointment in the past: {date} {time}"
                )
                return BookingResult.rejected(BookingFailure.PAST_DATE)

            if await self.repository.has_appointment(date, time):
                logger.warning(
                    f"Rejected appointment, slot unavailable: {date} {time}"
                )
                return BookingResult.rejected(BookingFailure.UNAVAILABLE)

            await self.repository.add_appointment(
                Appointment(date=date, time=time)
            )
        logger.info(f"Appointment booked successfully: {date} {time}")
        return BookingResult.booked()

    async def list(self) -> List[Appointment]:
        return await self.repository.get_appointments()

    async def reset(self) -> None:
        async with self._lock:
            await self.repository.clear()
