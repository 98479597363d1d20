"""
Abstract base class for image codecs.

The cache only needs to read an image's size, scale it and encode it to a
stream; decoding formats and resampling filters live behind this interface.
"""

from abc import ABC, abstractmethod
from typing import Any, BinaryIO


class ImageCodec(ABC):
    """Abstract interface for the image scale/encode primitive."""

    @abstractmethod
    def size(self, image: Any) -> tuple[int, int]:
        """Return (width, height) of an in-memory image."""
        pass

    @abstractmethod
    def scale(self, image: Any, width: int, height: int) -> Any:
        """
        Return a new image resized to exactly width x height.

        Args:
            image: Source image, left untouched
            width: Target width in pixels
            height: Target height in pixels
        """
        pass

    @abstractmethod
    def encode(self, image: Any, output: BinaryIO, image_format: str, quality: int) -> None:
        """
        Encode an image to a binary stream.

        Args:
            image: Image to encode
            output: Writable binary stream
            image_format: Encoder name (e.g., "PNG", "JPEG")
            quality: Encoder quality (1-100)
        """
        pass
