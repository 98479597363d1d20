"""
Pillow implementation of the image codec.
"""

from io import BytesIO
from pathlib import Path
from typing import BinaryIO

from loguru import logger
from PIL import Image as PILImage

from .base import ImageCodec

# Modes each encoder can store without conversion.
_ENCODER_MODES: dict[str, tuple[str, ...]] = {
    "PNG": ("1", "L", "LA", "P", "RGB", "RGBA", "I", "I;16"),
    "JPEG": ("L", "RGB", "CMYK"),
}


class PillowCodec(ImageCodec):
    """Scales with Lanczos resampling and encodes through ``Image.save``."""

    def size(self, image: PILImage.Image) -> tuple[int, int]:
        return image.size

    def scale(self, image: PILImage.Image, width: int, height: int) -> PILImage.Image:
        return image.resize((width, height), PILImage.Resampling.LANCZOS)

    def encode(
        self,
        image: PILImage.Image,
        output: BinaryIO,
        image_format: str,
        quality: int,
    ) -> None:
        image_format = image_format.upper()
        allowed = _ENCODER_MODES.get(image_format)
        if allowed is not None and image.mode not in allowed:
            has_transparency = image.mode in ("RGBA", "LA", "PA") or (
                image.mode == "P" and "transparency" in image.info
            )
            target = "RGBA" if has_transparency and "RGBA" in allowed else "RGB"
            logger.debug("Converting {} image to {} for {}", image.mode, target, image_format)
            image = image.convert(target)

        if image_format == "JPEG":
            image.save(output, format=image_format, quality=quality, optimize=True)
        else:
            image.save(output, format=image_format, optimize=True)

    def open(self, path: Path | str) -> PILImage.Image:
        """
        Load an image file fully into memory.

        Raises:
            PIL.UnidentifiedImageError: If image format is not recognized
            OSError: If the file cannot be read
        """
        return self.decode(Path(path).read_bytes())

    def decode(self, data: bytes) -> PILImage.Image:
        """Decode image bytes into a loaded Pillow image."""
        img = PILImage.open(BytesIO(data))
        img.load()
        return img
