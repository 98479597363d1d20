"""
Abstract base class for storage volume statistics.

Enables swapping the statvfs backed local volume for fakes in tests or other
platforms.
"""

from abc import ABC, abstractmethod


class VolumeStats(ABC):
    """Abstract interface for block statistics of the volume holding the cache."""

    @abstractmethod
    def block_size(self) -> int:
        """Return the size of one block in bytes."""
        pass

    @abstractmethod
    def available_blocks(self) -> int:
        """Return the number of blocks available to unprivileged writers."""
        pass

    @abstractmethod
    def total_blocks(self) -> int:
        """Return the total number of blocks on the volume."""
        pass

    @abstractmethod
    def is_mounted(self) -> bool:
        """Return True if the volume is mounted and usable."""
        pass
