"""
Exceptions raised by the artwork cache.

Precondition failures (:class:`VolumeUnavailable`, :class:`InsufficientSpace`)
are advisory and only raised by :meth:`SpaceMonitor.ensure_writable`. Write
failures (:class:`DirectoryCreateFailed`, :class:`ImageWriteFailed`) abort a
whole multi-size batch.
"""

from pathlib import Path


class CacheError(Exception):
    """Base class for all artwork cache errors."""


class VolumeUnavailable(CacheError):
    """The storage volume is not mounted or not usable."""


class InsufficientSpace(CacheError):
    """Free space on the storage volume is below the configured threshold."""


class CacheWriteError(CacheError):
    """A cache write failed for ``path``."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class DirectoryCreateFailed(CacheWriteError):
    """A size directory or its marker file could not be created."""


class ImageWriteFailed(CacheWriteError):
    """A resized thumbnail could not be scaled, encoded or written."""
