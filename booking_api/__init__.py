"""Helpers for exercising the booking HTTP service: payload generation and an async call wrapper."""

from booking_api.api_helper import ApiHelper
from booking_api.patch_data import PatchDataHelper, create_patch_request
from booking_api.payloads import credentials, generate_booking

__all__ = [
    "ApiHelper",
    "PatchDataHelper",
    "create_patch_request",
    "credentials",
    "generate_booking",
]
