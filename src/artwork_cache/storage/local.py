"""
Local filesystem volume statistics backed by ``os.statvfs``.
"""

import os
from pathlib import Path

from loguru import logger

from .base import VolumeStats


class LocalVolume(VolumeStats):
    """Block statistics for the filesystem containing ``path``."""

    def __init__(self, path: Path | str):
        """
        Initialize the local volume.

        Args:
            path: Any path on the volume, usually its mount point
        """
        self.path = Path(path)
        logger.debug("LocalVolume initialized: path={}", self.path)

    def _statvfs(self) -> os.statvfs_result:
        return os.statvfs(self.path)

    def block_size(self) -> int:
        # f_frsize is the unit f_blocks and f_bavail are counted in
        return self._statvfs().f_frsize

    def available_blocks(self) -> int:
        return self._statvfs().f_bavail

    def total_blocks(self) -> int:
        return self._statvfs().f_blocks

    def is_mounted(self) -> bool:
        mounted = self.path.is_dir() and os.access(self.path, os.W_OK)
        if not mounted:
            logger.debug("Volume not usable: {}", self.path)
        return mounted
