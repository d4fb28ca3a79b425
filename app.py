from fastapi import FastAPI, Body, Cookie, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from collections import deque
from typing import Deque, List, Dict, Any, Optional
import itertools
import logging
import threading
import uuid

from booking_api.config import get_settings
from booking_api.models import Booking, BookingPatch, Credentials

app = FastAPI(title="Mock restful-booker API (bookings)")

logger = logging.getLogger(__name__)

_store_lock = threading.Lock()
_ids = itertools.count(1)

MAX_TOKENS = 1000

bookings: Dict[int, Dict[str, Any]] = {}
# oldest tokens drop out once MAX_TOKENS are live
tokens: Deque[str] = deque(maxlen=MAX_TOKENS)


def text_response(status_code: int, text: str) -> PlainTextResponse:
    return PlainTextResponse(text, status_code=status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """
    The real service answers a malformed create with 500 and a malformed
    update with 400, both as plain text.
    """
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    if request.method == "POST":
        return text_response(500, "Internal Server Error")
    return text_response(400, "Bad Request")


def is_authorised(token: Optional[str]) -> bool:
    if not token:
        return False
    with _store_lock:
        return token in tokens


def find_booking(booking_id: int) -> Optional[Dict[str, Any]]:
    return bookings.get(booking_id)


def merge_patch(existing: Dict[str, Any], patch: BookingPatch) -> Dict[str, Any]:
    """Apply only the keys present in the patch; booking dates merge per date."""
    updates = patch.model_dump(exclude_unset=True)
    merged = dict(existing)
    dates = updates.pop("bookingdates", None)
    merged.update({k: v for k, v in updates.items() if v is not None})
    if dates:
        merged_dates = dict(existing.get("bookingdates", {}))
        merged_dates.update({k: v for k, v in dates.items() if v is not None})
        merged["bookingdates"] = merged_dates
    return merged


@app.get("/ping")
def health_check():
    return text_response(201, "Created")


@app.post("/auth")
def create_token(creds: Credentials):
    settings = get_settings()
    if creds.username == settings.booker_username and creds.password == settings.booker_password:
        token = uuid.uuid4().hex[:15]
        with _store_lock:
            tokens.append(token)
        return {"token": token}
    return {"reason": "Bad credentials"}


@app.get("/booking", response_model=List[dict])
def get_booking_ids(
    firstname: Optional[str] = Query(None),
    lastname: Optional[str] = Query(None),
    checkin: Optional[str] = Query(None),
    checkout: Optional[str] = Query(None),
):
    with _store_lock:
        items = list(bookings.items())
    matches = []
    for booking_id, b in items:
        if firstname and b["firstname"] != firstname:
            continue
        if lastname and b["lastname"] != lastname:
            continue
        if checkin and b["bookingdates"]["checkin"] < checkin:
            continue
        if checkout and b["bookingdates"]["checkout"] > checkout:
            continue
        matches.append({"bookingid": booking_id})
    return matches


@app.get("/booking/{booking_id}")
def get_booking(booking_id: int):
    b = find_booking(booking_id)
    if not b:
        return text_response(404, "Not Found")
    return b


@app.post("/booking")
def create_booking(booking: Booking):
    data = booking.model_dump()
    with _store_lock:
        booking_id = next(_ids)
        bookings[booking_id] = data
    logger.info("Created booking %s", booking_id)
    return {"bookingid": booking_id, "booking": data}


@app.put("/booking/{booking_id}")
def update_booking(booking_id: int, booking: Booking, token: Optional[str] = Cookie(None)):
    if not is_authorised(token):
        return text_response(403, "Forbidden")
    with _store_lock:
        if booking_id not in bookings:
            return text_response(405, "Method Not Allowed")
        bookings[booking_id] = booking.model_dump()
        return bookings[booking_id]


@app.patch("/booking/{booking_id}")
def partial_update_booking(
    booking_id: int,
    patch: Optional[BookingPatch] = Body(None),
    token: Optional[str] = Cookie(None),
):
    if not is_authorised(token):
        return text_response(403, "Forbidden")
    with _store_lock:
        existing = find_booking(booking_id)
        if not existing:
            return text_response(405, "Method Not Allowed")
        bookings[booking_id] = merge_patch(existing, patch or BookingPatch())
        return bookings[booking_id]


@app.delete("/booking/{booking_id}")
def delete_booking(booking_id: int, token: Optional[str] = Cookie(None)):
    if not is_authorised(token):
        return text_response(403, "Forbidden")
    with _store_lock:
        if bookings.pop(booking_id, None) is None:
            return text_response(405, "Method Not Allowed")
    logger.info("Deleted booking %s", booking_id)
    return text_response(201, "Created")
