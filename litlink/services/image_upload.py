"""Profile image hosting through the ImageKit upload API."""

import logging

import httpx

from litlink.config import Settings

logger = logging.getLogger(__name__)


class ImageUploadError(Exception):
    """Raised when an image could not be handed to the image host."""


class ImageUploader:
    """Uploads inline-encoded images to ImageKit and returns their hosted URL."""

    def __init__(self, settings: Settings) -> None:
        self.upload_url = settings.imagekit_upload_url
        self.private_key = settings.imagekit_private_key
        self.timeout = 30.0

    @property
    def is_configured(self) -> bool:
        """Check if an ImageKit private key is available."""
        return bool(self.private_key)

    async def upload(self, file: str, file_name: str, folder: str) -> str:
        """Upload a base64 (or data URI) encoded image.

        Args:
            file: Inline-encoded image content
            file_name: Name to store the file under
            folder: Target folder on the image host

        Returns:
            Public URL of the uploaded image
        """
        if not self.is_configured:
            raise ImageUploadError("ImageKit is not configured")

        # ImageKit authenticates with the private key as the basic-auth username
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.upload_url,
                    auth=(self.private_key, ""),
                    files={
                        "file": (None, file),
                        "fileName": (None, file_name),
                        "folder": (None, folder),
                    },
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            logger.error(f"HTTP error uploading {file_name} to ImageKit: {e}")
            raise ImageUploadError(str(e)) from e
        except ValueError as e:
            logger.error(f"ImageKit returned a non-JSON body for {file_name}: {e}")
            raise ImageUploadError("ImageKit response was not JSON") from e

        url = data.get("url") if isinstance(data, dict) else None
        if not url:
            logger.error(f"ImageKit response for {file_name} has no url: {data}")
            raise ImageUploadError("ImageKit response did not include a url")

        logger.info(f"Uploaded {file_name} to {url}")
        return url
