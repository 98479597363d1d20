"""
Storage volume package.

Provides a factory function to create the configured volume statistics backend.
"""

from pathlib import Path

from .base import VolumeStats
from .local import LocalVolume


def create_volume(
    volume_type: str = "local",
    path: str | Path = ".",
) -> VolumeStats:
    """
    Factory function to create a volume statistics backend.

    Args:
        volume_type: Type of volume ("local")
        path: Mount point of the volume

    Returns:
        Configured VolumeStats instance

    Raises:
        ValueError: If volume_type is not recognized
    """
    if volume_type == "local":
        return LocalVolume(path=path)
    else:
        raise ValueError(f"Unknown volume type: {volume_type}")


__all__ = [
    "VolumeStats",
    "LocalVolume",
    "create_volume",
]
