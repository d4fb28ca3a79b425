import httpx
import pytest
import pytest_asyncio

from app import app
from booking_api.api_helper import ApiHelper
from booking_api.config import get_settings


@pytest.fixture
def settings():
    return get_settings()


@pytest_asyncio.fixture
async def client(settings):
    """Live service when BASE_API_URL is set, the in-process mock otherwise."""
    if settings.base_api_url:
        async with httpx.AsyncClient(base_url=settings.base_api_url, timeout=settings.request_timeout) as c:
            yield c
    else:
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver", timeout=settings.request_timeout) as c:
            yield c


@pytest_asyncio.fixture
async def api(client):
    return ApiHelper(client)
