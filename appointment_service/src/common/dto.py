from enum import Enum
from typing import Optional

from pydantic import BaseModel


class Appointment(BaseModel):
    date: str
    time: str

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [{"date": "2030-04-01", "time": "14:00"}]
        },
    }


class BookingFailure(str, Enum):
    PAST_DATE = "past_date"
    UNAVAILABLE = "unavailable"


BOOKED_MESSAGE = "Appointment booked successfully"

FAILURE_MESSAGES = {
    BookingFailure.PAST_DATE: "Cannot book appointments in the past",
    BookingFailure.UNAVAILABLE: "The selected time is unavailable",
}


class BookingResult(BaseModel):
    success: bool
    message: str
    failure: Optional[BookingFailure] = None

    @classmethod
    def booked(cls) -> "BookingResult":
        return cls(success=True, message=BOOKED_MESSAGE)

    @classmethod
    def rejected(cls, failure: BookingFailure) -> "BookingResult":
        return cls(
            success=False, message=FAILURE_MESSAGES[failure], failure=failure
        )
