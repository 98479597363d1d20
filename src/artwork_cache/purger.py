"""
Full cache purge.

Deletes every file (marker files included) in every category and size
directory. The directories themselves are kept.
"""

from loguru import logger

from .catalog import all_categories, all_tiers
from .locks import CacheLocks
from .models import PurgeResult
from .paths import CachePathBuilder


class CachePurger:
    """Clears the cache directory layout below one root."""

    def __init__(self, paths: CachePathBuilder, locks: CacheLocks | None = None):
        self.paths = paths
        self.locks = locks if locks is not None else CacheLocks()

    def purge_all(self) -> PurgeResult:
        """
        Delete every file directly inside each (category, tier) directory.

        Failures on individual files are logged and counted; the sweep always
        continues.

        Returns:
            PurgeResult with deleted and failed counts
        """
        result = PurgeResult()
        for category in all_categories():
            for tier in all_tiers():
                directory = self.paths.directory_path(category, tier)
                with self.locks.directory(category, tier):
                    if not directory.is_dir():
                        continue
                    try:
                        entries = list(directory.iterdir())
                    except OSError as e:
                        logger.warning("Could not list {}: {}", directory, e)
                        result.record_failure(directory)
                        continue
                    for entry in entries:
                        if entry.is_dir():
                            continue
                        try:
                            entry.unlink()
                            result.deleted += 1
                        except OSError as e:
                            logger.warning("Could not delete {}: {}", entry, e)
                            result.record_failure(entry)

        logger.info(
            "Purged cache at {}: {} deleted, {} failed",
            self.paths.root,
            result.deleted,
            result.failed,
        )
        return result
