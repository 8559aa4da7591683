"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_IMAGE_REF = (
    "https://substackcdn.com/image/fetch/f_auto,q_auto:good,fl_progressive:steep/"
    "https%3A%2F%2Fbucketeer-e05bbc84-baa3-437e-9518-adb32be77984.s3.amazonaws.com"
    "%2Fpublic%2Fimages%2Fda435093-5e78-410d-b72b-ba3500a18130"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    asset_bucket: str = "food-images"
    asset_folder: str = "macro-tracker"
    default_image_ref: str = DEFAULT_IMAGE_REF
    default_timezone: str = "+01:00"
    max_image_bytes: int = 5 * 1024 * 1024
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
