"""Supabase Storage adapter for food images."""

import logging
from dataclasses import dataclass
from uuid import UUID, uuid4

import httpx
from supabase import Client, StorageException

from macro_tracker.domain.assets import ImageUpload
from macro_tracker.errors import DependencyFailureError
from macro_tracker.services.foods import AssetStore

_logger = logging.getLogger(__name__)

_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
    "image/gif": ".gif",
}


@dataclass
class SupabaseAssetStore(AssetStore):
    """Stores images in a Supabase Storage bucket under a folder prefix."""

    client: Client
    bucket: str
    folder: str

    def upload(self, owner_id: UUID, image: ImageUpload) -> str:
        """Upload an image and return its storage path."""
        extension = _EXTENSIONS.get(image.content_type, "")
        path = f"{self.folder}/{owner_id}/{uuid4().hex}{extension}"
        try:
            self.client.storage.from_(self.bucket).upload(
                path=path,
                file=image.content,
                file_options={"content-type": image.content_type},
            )
        except (StorageException, httpx.HTTPError) as exc:
            _logger.exception("Image upload failed: path=%s", path)
            raise DependencyFailureError("Could not store image") from exc
        _logger.info("Image uploaded: path=%s size=%s", path, len(image.content))
        return path

    def delete(self, ref: str) -> None:
        """Remove an image; removing a missing object succeeds."""
        try:
            self.client.storage.from_(self.bucket).remove([ref])
        except (StorageException, httpx.HTTPError) as exc:
            _logger.exception("Image deletion failed: path=%s", ref)
            raise DependencyFailureError("Could not delete associated image") from exc

    def owns(self, ref: str) -> bool:
        """Return True for paths inside the managed folder."""
        return ref.startswith(f"{self.folder}/")

    def public_url(self, ref: str) -> str:
        """Return the public URL of a stored image."""
        return self.client.storage.from_(self.bucket).get_public_url(ref)
