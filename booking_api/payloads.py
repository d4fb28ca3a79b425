from datetime import date, timedelta
from typing import Any, Dict

from faker import Faker

from booking_api.config import get_settings
from booking_api.models import Booking, BookingDates, Credentials

fake = Faker()

MIN_PRICE = 500
MAX_PRICE = 2000
MAX_NIGHTS = 14


def first_name() -> str:
    return fake.first_name()


def last_name() -> str:
    return fake.last_name()


def total_price() -> int:
    return fake.pyint(min_value=MIN_PRICE, max_value=MAX_PRICE)


def deposit_paid() -> bool:
    return fake.pybool()


def sentence(words: int = 3) -> str:
    return fake.sentence(nb_words=words)


def checkin_date() -> str:
    return fake.date_between(start_date="+1d", end_date="+1y").isoformat()


def checkout_date(checkin: str) -> str:
    """A date 1 to 14 nights after checkin."""
    start = date.fromisoformat(checkin)
    return (start + timedelta(days=fake.pyint(min_value=1, max_value=MAX_NIGHTS))).isoformat()


def booking_dates() -> Dict[str, str]:
    checkin = checkin_date()
    return {"checkin": checkin, "checkout": checkout_date(checkin)}


def generate_booking() -> Dict[str, Any]:
    """Random booking request body with every field populated."""
    booking = Booking(
        firstname=first_name(),
        lastname=last_name(),
        totalprice=total_price(),
        depositpaid=deposit_paid(),
        bookingdates=BookingDates(**booking_dates()),
        additionalneeds=sentence(3),
    )
    return booking.model_dump()


def credentials() -> Dict[str, Any]:
    settings = get_settings()
    return Credentials(
        username=settings.booker_username,
        password=settings.booker_password,
    ).model_dump()
