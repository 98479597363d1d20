"""
Free space accounting for the storage volume.

The precondition check is advisory: callers run it before asking the writer to
cache new artwork; :class:`~artwork_cache.writer.CacheWriter` never calls it.
"""

from loguru import logger

from .errors import InsufficientSpace, VolumeUnavailable
from .storage.base import VolumeStats

DEFAULT_MIN_FREE_PERCENT = 15.0

NOT_MOUNTED_MESSAGE = "The storage volume is not mounted. It is required for caching thumbnails."


class SpaceMonitor:
    """Reports capacity of a volume and gates cache writes on free space."""

    def __init__(self, volume: VolumeStats, min_free_percent: float = DEFAULT_MIN_FREE_PERCENT):
        self.volume = volume
        self.min_free_percent = min_free_percent

    def free_bytes(self) -> int:
        """Return the number of bytes available on the volume."""
        return self.volume.available_blocks() * self.volume.block_size()

    def total_bytes(self) -> int:
        """Return the size of the volume in bytes."""
        return self.volume.total_blocks() * self.volume.block_size()

    def free_percentage(self) -> float:
        """Return free space in percent, within [0, 100]."""
        total = self.volume.total_blocks()
        if total <= 0:
            return 0.0
        percent = self.volume.available_blocks() / total * 100
        return min(max(percent, 0.0), 100.0)

    def check_precondition(self, min_free_percent: float | None = None) -> str | None:
        """
        Check that new thumbnails may be written.

        Args:
            min_free_percent: Threshold override; defaults to the monitor's threshold

        Returns:
            A human-readable reason when the volume is unmounted or below the
            threshold, otherwise None
        """
        threshold = self.min_free_percent if min_free_percent is None else min_free_percent
        if not self.volume.is_mounted():
            logger.warning("Precondition failed: volume not mounted")
            return NOT_MOUNTED_MESSAGE
        free = self.free_percentage()
        if free < threshold:
            logger.warning("Precondition failed: {:.1f}% free, need {}%", free, threshold)
            return f"You need to have more than {threshold}% of free space on the storage volume."
        logger.debug("Precondition passed: {:.1f}% free", free)
        return None

    def ensure_writable(self, min_free_percent: float | None = None) -> None:
        """
        Raise if :meth:`check_precondition` reports a failure.

        Raises:
            VolumeUnavailable: If the volume is not mounted
            InsufficientSpace: If free space is below the threshold
        """
        reason = self.check_precondition(min_free_percent)
        if reason is None:
            return
        if reason == NOT_MOUNTED_MESSAGE:
            raise VolumeUnavailable(reason)
        raise InsufficientSpace(reason)
