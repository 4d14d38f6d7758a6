import base64
import binascii
import hashlib
import io
import re
from typing import Tuple

from PIL import Image, UnidentifiedImageError

from app.config import settings
from app.core.logging import logger
from app.database import DataStore
from app.shared.exceptions import ValidationFailedException


DATA_URL_PATTERN = re.compile(r"^data:(?P<mime>image/[\w.+-]+);base64,(?P<payload>.+)$", re.DOTALL)

ALLOWED_TYPES = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "image/gif": "gif",
}


def is_local_image(value: str) -> bool:
    """True for image data that has not been uploaded yet (a data URL)."""
    return bool(value) and value.startswith("data:")


class FileService:
    """Simulated object storage for images sent as base64 data URLs."""

    def __init__(self, store: DataStore):
        self.store = store

    @staticmethod
    def decode_data_url(data_url: str) -> Tuple[str, bytes]:
        """
        Split a data URL into its MIME type and raw bytes.

        Raises:
            ValidationFailedException: not a supported base64 image data URL
        """
        match = DATA_URL_PATTERN.match(data_url or "")
        if not match:
            raise ValidationFailedException("Expected a base64 image data URL")

        mime = match.group("mime").lower()
        if mime not in ALLOWED_TYPES:
            raise ValidationFailedException(
                "Invalid file type. Only JPG, PNG, WEBP and GIF images are allowed."
            )

        try:
            content = base64.b64decode(match.group("payload"), validate=True)
        except (binascii.Error, ValueError):
            raise ValidationFailedException("Image payload is not valid base64")

        return mime, content

    async def upload_file(self, data_url: str) -> str:
        """
        Store an image and return its public URL.

        The URL is derived from the content digest, so uploading the same
        image twice yields the same reference.
        """
        await self.store.latency.wait("upload")

        mime, content = self.decode_data_url(data_url)

        file_size_mb = len(content) / (1024 * 1024)
        if file_size_mb > settings.MAX_UPLOAD_SIZE_MB:
            raise ValidationFailedException(
                f"File size exceeds {settings.MAX_UPLOAD_SIZE_MB}MB limit. Please upload a smaller image."
            )

        try:
            Image.open(io.BytesIO(content)).verify()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError) as e:
            logger.error(f"Error processing image: {str(e)}")
            raise ValidationFailedException("Invalid image file. Please upload a valid image.")

        digest = hashlib.sha256(content).hexdigest()[:16]
        url = f"{settings.MEDIA_BASE_URL}/{digest}.{ALLOWED_TYPES[mime]}"

        logger.info(f"Uploaded image ({len(content)} bytes) to {url}")
        return url

    async def resolve_image(self, value: str) -> str:
        """Upload ``value`` if it is local image data, else return it unchanged."""
        if is_local_image(value):
            return await self.upload_file(value)
        return value
