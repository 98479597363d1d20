"""
Multi-size thumbnail generation.

Writes one artwork at every size tier and hands back the tier the caller asked
for. A failure at any tier aborts the whole batch.

With rollback enabled each tier is first encoded to a hidden staging file next
to its final name. Only once every tier has been written are the staging files
moved into place, so an aborted batch never leaves a mix of old and new sizes.
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from pathlib import Path
from typing import Any
from uuid import uuid4

from loguru import logger

from .catalog import SizeTier, all_tiers, pixel_size
from .errors import DirectoryCreateFailed, ImageWriteFailed
from .imaging.base import ImageCodec
from .locks import CacheLocks
from .models import Artwork, CachedImage
from .paths import CachePathBuilder
from .resize import target_dimensions

STAGING_SUFFIX = ".part"


def staging_path(path: Path) -> Path:
    """Return a unique hidden sibling of ``path`` to encode into."""
    return path.with_name(f".{path.name}.{uuid4().hex[:8]}{STAGING_SUFFIX}")


def _drop_late_write(path: Path) -> None:
    """Remove a staging file written by an encode that outlived its timeout."""
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Could not remove late thumbnail {}: {}", path, e)
    else:
        logger.debug("Removed late thumbnail {}", path)


class CacheWriter:
    """Resizes and persists artwork into the cache directory layout."""

    def __init__(
        self,
        paths: CachePathBuilder,
        codec: ImageCodec,
        locks: CacheLocks | None = None,
        image_format: str = "PNG",
        quality: int = 100,
        write_timeout: float | None = 30.0,
        rollback_on_failure: bool = True,
        max_workers: int = 2,
    ):
        """
        Initialize the cache writer.

        Args:
            paths: Path builder for the cache root
            codec: Image scale/encode primitive
            locks: Lock registry, shared with the purger of the same cache
            image_format: Encoder format for every tier
            quality: Encoder quality (1-100)
            write_timeout: Seconds allowed per tier encode/write, None for no bound
            rollback_on_failure: Stage tiers and publish them only when all succeed
            max_workers: Threads used for bounded writes
        """
        self.paths = paths
        self.codec = codec
        self.locks = locks if locks is not None else CacheLocks()
        self.image_format = image_format
        self.quality = quality
        self.write_timeout = write_timeout
        self.rollback_on_failure = rollback_on_failure
        self._executor: ThreadPoolExecutor | None = None
        if write_timeout is not None:
            self._executor = ThreadPoolExecutor(
                max_workers=max_workers,
                thread_name_prefix="artwork-cache-write",
            )
        logger.debug(
            "CacheWriter initialized: root={}, format={}, timeout={}, rollback={}",
            paths.root,
            image_format,
            write_timeout,
            rollback_on_failure,
        )

    def add_to_cache(
        self,
        artwork: Artwork,
        source_image: Any,
        desired_tier: SizeTier,
    ) -> CachedImage:
        """
        Write ``source_image`` at every size tier.

        Args:
            artwork: Category and fingerprint of the artwork
            source_image: Decoded source image, not modified
            desired_tier: Tier whose resized image is returned

        Returns:
            CachedImage for ``desired_tier``

        Raises:
            DirectoryCreateFailed: If a tier directory or its marker cannot be created
            ImageWriteFailed: If scaling, encoding or writing any tier fails
        """
        desired_tier = SizeTier(desired_tier)
        category = artwork.media_category
        source_width, source_height = self.codec.size(source_image)
        logger.debug(
            "Caching {} artwork {:08x} ({}x{})",
            category.value,
            artwork.fingerprint,
            source_width,
            source_height,
        )

        # (tier, file actually written, final cache path)
        staged: list[tuple[SizeTier, Path, Path]] = []
        cached: dict[SizeTier, CachedImage] = {}
        with self.locks.artwork(category, artwork.fingerprint):
            try:
                for tier in all_tiers():
                    with self.locks.directory(category, tier):
                        self._ensure_directory(artwork, tier)
                        width, height = target_dimensions(
                            source_width, source_height, category, pixel_size(tier)
                        )
                        path = self.paths.file_path(category, tier, artwork.fingerprint)
                        target = staging_path(path) if self.rollback_on_failure else path
                        # Recorded before writing so a half-written file is discarded too.
                        staged.append((tier, target, path))
                        resized = self._write(source_image, width, height, target)
                    cached[tier] = CachedImage(
                        image=resized, tier=tier, width=width, height=height, path=path
                    )
                if self.rollback_on_failure:
                    self._publish(artwork, staged)
            except (DirectoryCreateFailed, ImageWriteFailed):
                if self.rollback_on_failure:
                    self._discard(artwork, staged)
                raise

        logger.info(
            "Cached {} artwork {:08x} at {} sizes",
            category.value,
            artwork.fingerprint,
            len(cached),
        )
        return cached[desired_tier]

    def _ensure_directory(self, artwork: Artwork, tier: SizeTier) -> Path:
        """Create a tier directory and its marker file on first use."""
        directory = self.paths.directory_path(artwork.media_category, tier)
        if directory.is_dir():
            return directory
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Could not create cache directory {}: {}", directory, e)
            raise DirectoryCreateFailed(
                f"Could not create cache directory {directory}: {e}", path=directory
            ) from e

        marker = self.paths.marker_path(artwork.media_category, tier)
        try:
            marker.touch()
        except OSError as e:
            logger.error("Could not create marker {}: {}", marker, e)
            # A directory without its marker would never get one on a later call.
            try:
                directory.rmdir()
            except OSError as cleanup_error:
                logger.warning("Could not remove {}: {}", directory, cleanup_error)
            raise DirectoryCreateFailed(
                f"Could not create marker {marker}: {e}", path=marker
            ) from e
        logger.debug("Created cache directory {}", directory)
        return directory

    def _write(self, source_image: Any, width: int, height: int, path: Path) -> Any:
        """Scale and persist one tier, bounded by ``write_timeout``."""
        try:
            resized = self.codec.scale(source_image, width, height)
            if self._executor is None:
                self._persist(resized, path)
            else:
                future = self._executor.submit(self._persist, resized, path)
                try:
                    future.result(timeout=self.write_timeout)
                except FutureTimeoutError:
                    # A queued write is cancelled; a running one is cleaned up when it ends.
                    if not future.cancel() and self.rollback_on_failure:
                        future.add_done_callback(lambda _: _drop_late_write(path))
                    raise
        except FutureTimeoutError as e:
            logger.error("Timed out after {}s writing {}", self.write_timeout, path)
            raise ImageWriteFailed(
                f"Timed out after {self.write_timeout}s writing {path}", path=path
            ) from e
        except Exception as e:
            logger.error("Could not write thumbnail {}: {}", path, e)
            raise ImageWriteFailed(f"Could not write thumbnail {path}: {e}", path=path) from e
        logger.debug("Wrote {}x{} thumbnail to {}", width, height, path)
        return resized

    def _persist(self, image: Any, path: Path) -> None:
        with open(path, "wb") as out:
            self.codec.encode(image, out, self.image_format, self.quality)

    def _publish(self, artwork: Artwork, staged: list[tuple[SizeTier, Path, Path]]) -> None:
        """
        Move every staged tier onto its final cache path.

        If a move fails, every size of the artwork is removed, so the cache
        never holds old and new sizes side by side.

        Raises:
            ImageWriteFailed: If a staged file cannot be moved into place
        """
        category = artwork.media_category
        failure: tuple[Path, OSError] | None = None
        for tier, staging, path in staged:
            with self.locks.directory(category, tier):
                try:
                    os.replace(staging, path)
                except OSError as e:
                    failure = (path, e)
            if failure is not None:
                break
        if failure is None:
            return

        path, error = failure
        logger.error("Could not publish thumbnail {}: {}", path, error)
        self._remove(artwork, [(tier, final) for tier, _, final in staged])
        raise ImageWriteFailed(f"Could not publish thumbnail {path}: {error}", path=path) from error

    def _discard(self, artwork: Artwork, staged: list[tuple[SizeTier, Path, Path]]) -> None:
        """Delete the staging files of an aborted batch."""
        self._remove(artwork, [(tier, staging) for tier, staging, _ in staged])
        logger.warning(
            "Discarded {} staged thumbnails of {} artwork {:08x}",
            len(staged),
            artwork.media_category.value,
            artwork.fingerprint,
        )

    def _remove(self, artwork: Artwork, files: list[tuple[SizeTier, Path]]) -> None:
        for tier, path in files:
            with self.locks.directory(artwork.media_category, tier):
                try:
                    path.unlink(missing_ok=True)
                except OSError as e:
                    logger.warning("Could not remove thumbnail {}: {}", path, e)

    def close(self) -> None:
        """Shut down the write executor."""
        if self._executor is not None:
            self._executor.shutdown(wait=False)
            self._executor = None

    def __enter__(self) -> CacheWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
