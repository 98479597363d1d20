"""
Data models for the artwork cache.

Provides Pydantic models for artwork identity, cached thumbnails and purge results.
"""

import zlib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .catalog import MediaCategory, SizeTier

MAX_FINGERPRINT = 0xFFFFFFFF


class Artwork(BaseModel):
    """One piece of cover art, identified by a checksum of its bytes."""

    model_config = ConfigDict(frozen=True)

    media_category: MediaCategory = Field(description="Media category the artwork belongs to")
    fingerprint: int = Field(
        ge=0,
        le=MAX_FINGERPRINT,
        description="Unsigned 32-bit checksum of the artwork bytes",
    )

    @classmethod
    def from_bytes(cls, media_category: MediaCategory, data: bytes) -> "Artwork":
        """Build an artwork whose fingerprint is the CRC-32 of ``data``."""
        return cls(media_category=media_category, fingerprint=zlib.crc32(data) & MAX_FINGERPRINT)


class CachedImage(BaseModel):
    """A resized thumbnail handed back to the caller."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    image: Any = Field(description="In-memory resized image, owned by the caller")
    tier: SizeTier = Field(description="Size tier the image was produced for")
    width: int = Field(gt=0, description="Image width in pixels")
    height: int = Field(gt=0, description="Image height in pixels")
    path: Path = Field(description="File the image was written to")


class PurgeResult(BaseModel):
    """Outcome of a cache purge."""

    deleted: int = Field(default=0, description="Number of files deleted")
    failed: int = Field(default=0, description="Number of files that could not be deleted")
    failed_paths: list[Path] = Field(
        default_factory=list,
        description="Files that could not be deleted",
    )

    def record_failure(self, path: Path) -> None:
        """Count a file that could not be deleted."""
        self.failed += 1
        self.failed_paths.append(path)
