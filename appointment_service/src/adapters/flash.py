from typing import Optional

from src.common.dto import BOOKED_MESSAGE, FAILURE_MESSAGES

# One-shot notices travel across redirects as short query codes so the
# target page renders them from the request alone.
NOTICES = {"booked": BOOKED_MESSAGE}

ERRORS = {
    failure.value: message for failure, message in FAILURE_MESSAGES.items()
}


def notice_message(code: Optional[str]) -> Optional[str]:
    return NOTICES.get(code) if code else None


def error_message(code: Optional[str]) -> Optional[str]:
    return ERRORS.get(code) if code else None
