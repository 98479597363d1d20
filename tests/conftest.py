"""Pytest fixtures and configuration for artwork-cache tests.

This module provides shared fixtures for testing the size catalog, resizer,
cache writer, purger and command line.
"""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from PIL import Image

from artwork_cache.config import Settings
from artwork_cache.imaging.pillow import PillowCodec
from artwork_cache.paths import CachePathBuilder
from artwork_cache.storage.base import VolumeStats


class FakeVolume(VolumeStats):
    """In-memory volume statistics."""

    def __init__(
        self,
        available: int = 500,
        total: int = 1000,
        block: int = 4096,
        mounted: bool = True,
    ):
        self.available = available
        self.total = total
        self.block = block
        self.mounted = mounted

    def block_size(self) -> int:
        return self.block

    def available_blocks(self) -> int:
        return self.available

    def total_blocks(self) -> int:
        return self.total

    def is_mounted(self) -> bool:
        return self.mounted


# --- Temporary Directory Fixtures ---


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


@pytest.fixture
def cache_root(temp_dir: Path) -> Path:
    """Return a cache root inside the temporary volume (not created)."""
    return temp_dir / "xbmc"


@pytest.fixture
def path_builder(cache_root: Path) -> CachePathBuilder:
    """Create a path builder for the temporary cache root."""
    return CachePathBuilder(cache_root)


# --- Collaborator Fixtures ---


@pytest.fixture
def fake_volume() -> FakeVolume:
    """Create a mounted volume that is half full."""
    return FakeVolume()


@pytest.fixture
def volume_factory() -> type[FakeVolume]:
    """Return the fake volume class for tests that need custom statistics."""
    return FakeVolume


@pytest.fixture
def codec() -> PillowCodec:
    """Create the Pillow codec."""
    return PillowCodec()


# --- Sample Data Fixtures ---


@pytest.fixture
def wide_image() -> Image.Image:
    """Create a 1000x500 image (aspect ratio 2)."""
    return Image.new("RGB", (1000, 500), color="red")


@pytest.fixture
def poster_image() -> Image.Image:
    """Create a 400x600 portrait image."""
    return Image.new("RGB", (400, 600), color="blue")


@pytest.fixture
def sample_image_file(temp_dir: Path) -> Path:
    """Write a 300x200 JPEG to disk and return its path."""
    path = temp_dir / "cover.jpg"
    Image.new("RGB", (300, 200), color="green").save(path, format="JPEG")
    return path


# --- Settings Override Fixtures ---


@pytest.fixture
def test_settings(temp_dir: Path) -> Settings:
    """Create settings pointing at the temporary volume."""
    return Settings(
        volume_path=str(temp_dir),
        cache_dir="xbmc",
        min_free_percent=15.0,
        write_timeout=10.0,
        log_level="DEBUG",
    )
