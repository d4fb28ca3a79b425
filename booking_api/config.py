"""Runtime settings for the booking API suite."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PATCH_TEST_DATA = Path(__file__).parent / "data" / "patch-test-data.json"


class Settings(BaseSettings):
    """Loaded from the environment and an optional .env file."""

    base_api_url: Optional[str] = Field(default=None, alias="BASE_API_URL")
    booker_username: str = Field(default="admin", alias="BOOKER_USERNAME")
    booker_password: str = Field(default="password123", alias="BOOKER_PASSWORD")
    patch_test_data: Path = Field(default=DEFAULT_PATCH_TEST_DATA, alias="PATCH_TEST_DATA")
    request_timeout: float = Field(default=5.0, alias="REQUEST_TIMEOUT")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)


@lru_cache
def get_settings() -> Settings:
    return Settings()
