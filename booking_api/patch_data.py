import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Union, get_args

from booking_api import payloads
from booking_api.models import Fieldname, PatchTestCase

logger = logging.getLogger(__name__)

KNOWN_FIELDS = set(get_args(Fieldname))

FIELD_GENERATORS: Dict[str, Callable[[], Any]] = {
    "firstname": payloads.first_name,
    "lastname": payloads.last_name,
    "totalprice": payloads.total_price,
    "depositpaid": payloads.deposit_paid,
    "additionalneeds": lambda: payloads.sentence(7),
}

DATE_FIELDS = {
    "bookingdates.checkin": "checkin",
    "bookingdates.checkout": "checkout",
}


class PatchDataHelper:
    """Loads PATCH scenarios from a JSON file of the form {"testCases": [...]}."""

    def __init__(self, json_file_path: Union[str, Path]):
        self.json_file_path = Path(json_file_path).resolve()

    def get_patch_test_cases(self) -> List[PatchTestCase]:
        try:
            with open(self.json_file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            raw_cases = (data.get("testCases") or []) if isinstance(data, dict) else []
            if not isinstance(raw_cases, list):
                logger.error("Error reading the patch test case file %s: testCases is not a list", self.json_file_path)
                return []
            return [PatchTestCase.model_validate(c) for c in raw_cases]
        except (OSError, ValueError) as exc:
            # ValueError covers JSONDecodeError, UnicodeDecodeError and ValidationError
            logger.error("Error reading the patch test case file %s: %s", self.json_file_path, exc)
            return []


def create_patch_request(fields_to_update: Optional[Iterable[str]] = None) -> Dict[str, Any]:
    """
    Build a PATCH body holding only the requested fields.

    "all" anywhere in the list yields a full booking. "bookingdates" fills both
    dates, "bookingdates.checkin"/"bookingdates.checkout" fill just that key.
    Unknown names are ignored.
    """
    fields = list(fields_to_update or [])
    if not fields:
        return {}

    if "all" in fields:
        return payloads.generate_booking()

    patch_data: Dict[str, Any] = {}
    requested_dates = set()
    for field in fields:
        if field not in KNOWN_FIELDS:
            continue
        if field in DATE_FIELDS:
            requested_dates.add(DATE_FIELDS[field])
        elif field == "bookingdates":
            requested_dates.update(DATE_FIELDS.values())
        elif field in FIELD_GENERATORS:
            patch_data[field] = FIELD_GENERATORS[field]()

    # dates are drawn together so a requested checkout always follows checkin
    if requested_dates:
        dates = payloads.booking_dates()
        patch_data["bookingdates"] = {k: v for k, v in dates.items() if k in requested_dates}

    return patch_data
