from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Fieldname = Literal[
    "firstname",
    "lastname",
    "totalprice",
    "depositpaid",
    "bookingdates",
    "bookingdates.checkin",
    "bookingdates.checkout",
    "additionalneeds",
    "all",
]


class BookingDates(BaseModel):
    checkin: str
    checkout: str


class Booking(BaseModel):
    firstname: str
    lastname: str
    totalprice: int
    depositpaid: bool
    bookingdates: BookingDates
    additionalneeds: Optional[str] = None


class BookingDatesPatch(BaseModel):
    checkin: Optional[str] = None
    checkout: Optional[str] = None


class BookingPatch(BaseModel):
    """Partial booking; only the keys that were sent are applied."""
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    totalprice: Optional[int] = None
    depositpaid: Optional[bool] = None
    bookingdates: Optional[BookingDatesPatch] = None
    additionalneeds: Optional[str] = None


class BookingResponse(BaseModel):
    bookingid: int
    booking: Booking


class BookingNumberDetails(BaseModel):
    bookingid: int


class Credentials(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class TokenResponse(BaseModel):
    token: str


class PatchTestCase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    description: str
    fields_to_update: List[str] = Field(default_factory=list, alias="fieldsToUpdate")
    expected_status: int = Field(..., alias="expectedStatus")
