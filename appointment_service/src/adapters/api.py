import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from src.adapters.flash import error_message, notice_message
from src.domain.services.appointment_service import AppointmentService

logger = logging.getLogger(__name__)

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def get_appointment_service(request: Request) -> AppointmentService:
    return request.app.state.appointment_service


@router.get("/", response_class=HTMLResponse)
async def booking_form(request: Request, error: Optional[str] = None):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": request.app.title,
            "error": error_message(error),
        },
    )


@router.get("/appointments", response_class=HTMLResponse)
async def list_appointments(
    request: Request,
    notice: Optional[str] = None,
    service: AppointmentService = Depends(get_appointment_service),
):
    logger.info("Received request to list appointments")
    appointments = await service.list()
    logger.info(f"Retrieved {len(appointments)} appointments")
    return templates.TemplateResponse(
        request,
        "appointments.html",
        {
            "title": request.app.title,
            "message": notice_message(notice),
            "appointments": appointments,
        },
    )


@router.post("/appointments")
async def create_appointment(
    request: Request,
    date: str = Form(...),
    time: str = Form(...),
    service: AppointmentService = Depends(get_appointment_service),
):
    logger.info("Received request to book appointment")
    result = await service.book(date, time)
    if not result.success:
        logger.warning(f"Failed to book appointment. Reason: {result.message}")
        url = request.url_for("booking_form").include_query_params(
            error=result.failure.value
        )
        return RedirectResponse(url=str(url), status_code=303)
    logger.info("Successfully booked appointment")
    url = request.url_for("list_appointments").include_query_params(
        notice="booked"
    )
    return RedirectResponse(url=str(url), status_code=303)
