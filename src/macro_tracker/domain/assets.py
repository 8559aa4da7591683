"""Domain models for uploaded assets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageUpload:
    """Raw image bytes received with a food entry."""

    filename: str
    content_type: str
    content: bytes
