"""Async wrapper around the booking service endpoints."""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

import httpx

from booking_api.models import BookingNumberDetails, BookingResponse, TokenResponse
from booking_api.patch_data import create_patch_request
from booking_api.payloads import credentials, generate_booking

logger = logging.getLogger(__name__)


@dataclass
class CreateResult:
    response: httpx.Response
    booking_id: int
    booking_data: Dict[str, Any]
    request_body: Dict[str, Any]


@dataclass
class GetResult:
    response: httpx.Response
    response_data: Dict[str, Any]


@dataclass
class SearchResult:
    response: httpx.Response
    response_data: List[Dict[str, Any]] = field(default_factory=list)


@dataclass
class UpdateResult:
    response: httpx.Response
    updated_data: Dict[str, Any]
    request_body: Dict[str, Any]


@dataclass
class PatchResult:
    response: httpx.Response
    response_data: Dict[str, Any]
    patch_data: Dict[str, Any]


def _dump(data: Any) -> str:
    return json.dumps(data, indent=2)


def auth_headers(token: Optional[str]) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Cookie": f"token={token}",
    }


class ApiHelper:
    """
    Issues requests against the booking service through an httpx.AsyncClient
    whose base_url points at the target.
    """

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def health_check(self) -> httpx.Response:
        return await self.client.get("/ping")

    async def create_booking(self, request_body: Optional[Dict[str, Any]] = None) -> CreateResult:
        if request_body is None:
            request_body = generate_booking()
        response = await self.client.post("/booking", json=request_body)
        booking_data = response.json()
        logger.info("POST response: %s", _dump(booking_data))
        return CreateResult(
            response=response,
            booking_id=BookingResponse.model_validate(booking_data).bookingid,
            booking_data=booking_data,
            request_body=request_body,
        )

    async def get_booking(self, booking_id: int) -> GetResult:
        response = await self.client.get(f"/booking/{booking_id}")
        response_data = response.json()
        logger.info("GET response: %s", _dump(response_data))
        return GetResult(response=response, response_data=response_data)

    async def get_booking_by_name(self, firstname: str, lastname: str) -> SearchResult:
        response = await self.client.get(
            "/booking", params={"firstname": firstname, "lastname": lastname}
        )
        response_data = [BookingNumberDetails.model_validate(b).model_dump() for b in response.json()]
        logger.info("GET (search) response: %s", _dump(response_data))
        return SearchResult(response=response, response_data=response_data)

    async def generate_token(self, creds: Optional[Dict[str, Any]] = None) -> Optional[str]:
        response = await self.client.post("/auth", json=creds if creds is not None else credentials())
        token_data = response.json()
        logger.info("TOKEN POST: %s", _dump(token_data))
        if "token" not in token_data:
            return None
        return TokenResponse.model_validate(token_data).token

    async def update_booking(
        self,
        booking_id: int,
        token: Optional[str],
        request_body: Optional[Dict[str, Any]] = None,
    ) -> UpdateResult:
        if request_body is None:
            request_body = generate_booking()
        response = await self.client.put(
            f"/booking/{booking_id}", headers=auth_headers(token), json=request_body
        )
        updated_data = response.json()
        logger.info("PUT response: %s", _dump(updated_data))
        return UpdateResult(response=response, updated_data=updated_data, request_body=request_body)

    async def patch_booking(
        self,
        booking_id: int,
        token: Optional[str],
        fields_to_update: Optional[Iterable[str]] = None,
    ) -> PatchResult:
        patch_data = create_patch_request(fields_to_update)
        logger.info("PATCH data: %s", _dump(patch_data))

        response = await self.client.patch(
            f"/booking/{booking_id}", headers=auth_headers(token), json=patch_data
        )

        # error bodies are plain text, only a 200 carries JSON
        response_data: Dict[str, Any] = {}
        if response.status_code == 200:
            response_data = response.json()
            logger.info("PATCH response: %s", _dump(response_data))
        return PatchResult(response=response, response_data=response_data, patch_data=patch_data)

    async def delete_booking(self, booking_id: int, token: Optional[str]) -> httpx.Response:
        return await self.client.delete(f"/booking/{booking_id}", headers=auth_headers(token))
