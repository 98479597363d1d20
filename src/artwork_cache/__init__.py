"""
Artwork thumbnail cache.

Generates and persists music, video and picture cover thumbnails at several
sizes on a capacity-limited storage volume, and purges them again.

Usage:
    # Check free space and mount state
    artwork-cache info

    # Cache a cover
    artwork-cache add cover.jpg --category video --tier big

    # Clear the cache
    artwork-cache purge
"""

__version__ = "0.1.0"

from .cache import ThumbnailCache
from .catalog import MediaCategory, SizeTier
from .errors import (
    CacheError,
    DirectoryCreateFailed,
    ImageWriteFailed,
    InsufficientSpace,
    VolumeUnavailable,
)
from .models import Artwork, CachedImage, PurgeResult

__all__ = [
    "ThumbnailCache",
    "MediaCategory",
    "SizeTier",
    "Artwork",
    "CachedImage",
    "PurgeResult",
    "CacheError",
    "VolumeUnavailable",
    "InsufficientSpace",
    "DirectoryCreateFailed",
    "ImageWriteFailed",
]
