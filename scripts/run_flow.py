import asyncio
import json
import logging
import sys

import httpx

from booking_api.api_helper import ApiHelper
from booking_api.config import get_settings

OUTPUT_FILE = "validation-output.json"


async def run_flow(base_url: str):
    val = []

    async with httpx.AsyncClient(base_url=base_url, timeout=get_settings().request_timeout) as client:
        api = ApiHelper(client)

        r = await api.health_check()
        val.append({"request": "/ping", "status_code": r.status_code})

        created = await api.create_booking()
        val.append({"request": {"endpoint": "/booking", "body": created.request_body}, "status_code": created.response.status_code, "response": created.booking_data})
        booking_id = created.booking_id

        got = await api.get_booking(booking_id)
        val.append({"request": f"/booking/{booking_id}", "status_code": got.response.status_code, "response": got.response_data})

        body = created.request_body
        found = await api.get_booking_by_name(body["firstname"], body["lastname"])
        val.append({"request": {"endpoint": "/booking", "params": {"firstname": body["firstname"], "lastname": body["lastname"]}}, "status_code": found.response.status_code, "response": found.response_data})

        token = await api.generate_token()

        updated = await api.update_booking(booking_id, token)
        val.append({"request": {"endpoint": f"/booking/{booking_id}", "body": updated.request_body}, "status_code": updated.response.status_code, "response": updated.updated_data})

        patched = await api.patch_booking(booking_id, token, ["firstname", "bookingdates.checkout"])
        val.append({"request": {"endpoint": f"/booking/{booking_id}", "body": patched.patch_data}, "status_code": patched.response.status_code, "response": patched.response_data})

        r = await api.delete_booking(booking_id, token)
        val.append({"request": f"/booking/{booking_id}", "status_code": r.status_code, "response": r.text})

    with open(OUTPUT_FILE, "w", encoding="utf-8") as f:
        json.dump(val, f, indent=2)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    base_url = get_settings().base_api_url
    if not base_url:
        sys.exit("BASE_API_URL is not set")
    asyncio.run(run_flow(base_url))
    print(f"Validation complete. See {OUTPUT_FILE}")
