"""
Product image URLs on the object store.

Local image paths follow ``/products/{product_id}/{index}.jpg`` (optionally
under ``public/``). When a bucket URL is configured they are rewritten onto
it; otherwise the local path is served as-is.
"""

import logging
import re
from typing import List, Optional

import httpx

from app.config.settings import S3Settings

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER_URL = "/placeholder.jpg"
DEFAULT_MAX_IMAGES = 10

_LOCAL_PREFIX = re.compile(r"^/?(public/)?")


class ImageUrlResolver:
    """Maps local product image paths to object store URLs."""

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = base_url.rstrip("/") if base_url else None

    @classmethod
    def from_settings(cls, s3: S3Settings) -> "ImageUrlResolver":
        return cls(s3.bucket_url)

    def resolve(self, local_path: str) -> str:
        """
        Convert a local image path to its object store URL.

        Without a configured bucket the path is returned unchanged.
        """
        if not self.base_url:
            logger.warning("S3_BUCKET_URL environment variable not set, using local path")
            return local_path

        clean_path = _LOCAL_PREFIX.sub("", local_path, count=1)
        return f"{self.base_url}/{clean_path}"

    def product_image_url(self, product_id: str, image_index: int) -> str:
        return self.resolve(f"/products/{product_id}/{image_index}.jpg")

    def product_images(self, product_id: str, max_images: int = DEFAULT_MAX_IMAGES) -> List[str]:
        return [self.product_image_url(product_id, i) for i in range(max_images)]


class FallbackImage:
    """
    Display state for one product image.

    The image starts on its resolved URL. The first load failure swaps it to
    the fallback URL; failures after that (including of the fallback itself)
    change nothing. There are no retries.
    """

    def __init__(self, src: str, fallback_src: str = DEFAULT_PLACEHOLDER_URL, priority: bool = False):
        self.src = src
        self.fallback_src = fallback_src
        self.priority = priority
        self.is_error = False
        self.loading = True
        self.loaded = False
        self.error: Optional[str] = None

    @classmethod
    def for_product(
        cls,
        resolver: ImageUrlResolver,
        product_id: str,
        image_index: int,
        fallback_src: str = DEFAULT_PLACEHOLDER_URL,
    ) -> "FallbackImage":
        return cls(
            resolver.product_image_url(product_id, image_index),
            fallback_src=fallback_src,
            priority=image_index == 0,
        )

    def handle_error(self) -> bool:
        """Swap to the fallback once. Returns True if this call swapped."""
        if self.is_error:
            return False
        self.is_error = True
        self.src = self.fallback_src
        return True

    async def load(self, client: httpx.AsyncClient) -> bool:
        """
        Fetch the current ``src`` once through ``client``.

        A transport error or non-success status marks the image as failed
        and triggers :meth:`handle_error`. Returns whether the load succeeded.
        """
        self.loading = True
        try:
            response = await client.get(self.src)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(f"Failed to load image {self.src}: {e}")
            self.loading = False
            self.loaded = False
            self.error = "Failed to load image"
            self.handle_error()
            return False

        self.loading = False
        self.loaded = True
        self.error = None
        return True
