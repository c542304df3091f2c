from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MapsConfig(BaseSettings):
    """Configuration for Google Maps API access.

    Automatically loads from environment variables and .env file.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    api_key: str | None = Field(default=None, alias="GOOGLE_MAPS_API_KEY")
    base_url: str = Field(default="https://maps.googleapis.com", alias="GOOGLE_MAPS_BASE_URL")
    language: str = Field(default="de", alias="GOOGLE_MAPS_LANGUAGE")
    timeout_seconds: float = Field(default=30.0, alias="GOOGLE_MAPS_TIMEOUT")

    # Places Autocomplete defaults
    autocomplete_components: str = "country:at"


@lru_cache
def get_maps_config() -> MapsConfig:
    """Get Google Maps configuration (cached singleton).

    Returns:
        MapsConfig with values from .env file or environment variables.
    """
    return MapsConfig()
