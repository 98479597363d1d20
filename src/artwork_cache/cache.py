"""
Thumbnail cache facade.

Wires the path builder, space monitor, writer and purger for one cache root so
that the writer and purger share a single lock registry.
"""

from pathlib import Path

from loguru import logger

from .catalog import MediaCategory, SizeTier, all_categories, all_tiers
from .config import Settings
from .config import settings as default_settings
from .imaging.pillow import PillowCodec
from .locks import CacheLocks
from .models import Artwork, CachedImage, PurgeResult
from .paths import CachePathBuilder
from .purger import CachePurger
from .space import SpaceMonitor
from .storage import create_volume
from .storage.base import VolumeStats
from .writer import CacheWriter


class ThumbnailCache:
    """Manages thumbnail generation, free space checks and purging."""

    def __init__(
        self,
        settings: Settings | None = None,
        volume: VolumeStats | None = None,
        codec: PillowCodec | None = None,
    ):
        """
        Initialize the thumbnail cache.

        Args:
            settings: Configuration; defaults to the global settings
            volume: Volume statistics backend; defaults to the configured one
            codec: Image codec; defaults to Pillow
        """
        self.settings = settings or default_settings
        self.codec = codec or PillowCodec()
        self.locks = CacheLocks()
        self.paths = CachePathBuilder(self.settings.cache_root)
        self.monitor = SpaceMonitor(
            volume
            or create_volume(
                volume_type=self.settings.volume_type,
                path=self.settings.volume_path,
            ),
            min_free_percent=self.settings.min_free_percent,
        )
        self.writer = CacheWriter(
            self.paths,
            self.codec,
            locks=self.locks,
            image_format=self.settings.image_format,
            quality=self.settings.image_quality,
            write_timeout=self.settings.write_timeout,
            rollback_on_failure=self.settings.rollback_on_failure,
        )
        self.purger = CachePurger(self.paths, locks=self.locks)
        logger.debug("ThumbnailCache initialized: root={}", self.paths.root)

    def check_precondition(self) -> str | None:
        """Return a reason new thumbnails should not be written, or None."""
        return self.monitor.check_precondition()

    def add(self, artwork: Artwork, image, desired_tier: SizeTier) -> CachedImage:
        """Cache an already decoded image at every size tier."""
        return self.writer.add_to_cache(artwork, image, desired_tier)

    def add_file(
        self,
        path: Path | str,
        category: MediaCategory,
        desired_tier: SizeTier = SizeTier.BIG,
    ) -> CachedImage:
        """
        Fingerprint, decode and cache an artwork file.

        Args:
            path: Image file to cache
            category: Media category of the artwork
            desired_tier: Tier whose resized image is returned

        Returns:
            CachedImage for ``desired_tier``

        Raises:
            OSError: If the file cannot be read
            PIL.UnidentifiedImageError: If the file is not a recognized image
            DirectoryCreateFailed: If a tier directory cannot be created
            ImageWriteFailed: If any tier cannot be written
        """
        data = Path(path).read_bytes()
        artwork = Artwork.from_bytes(category, data)
        logger.debug("Fingerprinted {} as {:08x}", path, artwork.fingerprint)
        return self.add(artwork, self.codec.decode(data), desired_tier)

    def purge(self) -> PurgeResult:
        """Delete every cached thumbnail."""
        return self.purger.purge_all()

    def stats(self) -> dict[tuple[MediaCategory, SizeTier], int]:
        """
        Count cached thumbnails per category and tier.

        Returns:
            Mapping from (category, tier) to the number of cached files,
            hidden files (the marker and staging files) excluded
        """
        counts = {}
        for category in all_categories():
            for tier in all_tiers():
                directory = self.paths.directory_path(category, tier)
                with self.locks.directory(category, tier):
                    if directory.is_dir():
                        counts[(category, tier)] = sum(
                            1
                            for entry in directory.iterdir()
                            if entry.is_file() and not entry.name.startswith(".")
                        )
                    else:
                        counts[(category, tier)] = 0
        return counts

    def close(self) -> None:
        self.writer.close()
