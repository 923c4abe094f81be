"""Image hosting client.

Uploads go to an ImgBB-compatible endpoint. Any failure falls back to one
of the placeholder images; there is no retry.
"""

import random
from typing import Optional

import requests

from bazaar import get_logger
from bazaar.config import Settings

LOGGER = get_logger("image_host")

FALLBACK_IMAGES = (
    "https://i.ibb.co/9hLBbbc/phone-default.jpg",
    "https://i.ibb.co/CWjYGsR/tablet-default.jpg",
    "https://i.ibb.co/h84WDgZ/laptop-default.jpg",
    "https://i.ibb.co/5xpPP1N/accessory-default.jpg",
)


class ImageHost:
    """Uploads listing images and returns their public URL."""

    def __init__(
        self,
        api_key: Optional[str],
        upload_url: str,
        timeout: float,
        rng: Optional[random.Random] = None,
    ):
        self.api_key = api_key
        self.upload_url = upload_url
        self.timeout = timeout
        self._rng = rng or random.Random()

    @classmethod
    def from_settings(cls, settings: Settings) -> "ImageHost":
        return cls(
            api_key=settings.imgbb_key,
            upload_url=settings.imgbb_url,
            timeout=settings.upload_timeout,
        )

    def fallback_url(self) -> str:
        """Pick a placeholder image at random."""
        return self._rng.choice(FALLBACK_IMAGES)

    def upload(self, data: bytes, filename: str = "image.jpg") -> str:
        """Upload image bytes.

        Returns:
            Public URL of the uploaded image, or a placeholder URL when the
            upload times out, fails or the host reports no success
        """
        if not self.api_key:
            LOGGER.warning("No image host key configured, using fallback image")
            return self.fallback_url()

        try:
            response = requests.post(
                self.upload_url,
                data={"key": self.api_key},
                files={"image": (filename, data)},
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            LOGGER.error("Error uploading image: %s", exc)
            return self.fallback_url()

        url = None
        if isinstance(payload, dict) and payload.get("success"):
            url = (payload.get("data") or {}).get("url")
        if not url:
            LOGGER.warning("Image upload failed, using fallback image")
            return self.fallback_url()
        return url
