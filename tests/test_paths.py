"""
Tests for cache path composition.
"""

from pathlib import Path

import pytest

from artwork_cache.catalog import MediaCategory, SizeTier
from artwork_cache.paths import CachePathBuilder, format_fingerprint


class TestFormatFingerprint:
    """Test fingerprint formatting."""

    def test_lowercase_hex(self):
        """Test fingerprints are formatted as lowercase hex."""
        assert format_fingerprint(0xDEADBEEF) == "deadbeef"

    def test_zero_padded(self):
        """Test small fingerprints are padded to 8 digits."""
        assert format_fingerprint(0x1F) == "0000001f"

    @pytest.mark.parametrize("value", [-1, 0x100000000])
    def test_out_of_range(self, value):
        """Test values outside 32 bits are rejected."""
        with pytest.raises(ValueError):
            format_fingerprint(value)


class TestCachePathBuilder:
    """Test CachePathBuilder class."""

    def test_directory_path(self):
        """Test directory path joins category folder and size fragment."""
        builder = CachePathBuilder("/mnt/sdcard/xbmc")

        path = builder.directory_path(MediaCategory.MUSIC, SizeTier.SMALL)

        assert path == Path("/mnt/sdcard/xbmc/music/small")

    def test_file_path(self):
        """Test file path uses the hex fingerprint as filename."""
        builder = CachePathBuilder("/mnt/sdcard/xbmc")

        path = builder.file_path(MediaCategory.VIDEO, SizeTier.BIG, 0xABCDEF01)

        assert path == Path("/mnt/sdcard/xbmc/video/big/abcdef01")

    def test_marker_path(self):
        """Test marker path sits in the tier directory."""
        builder = CachePathBuilder("/cache")

        path = builder.marker_path(MediaCategory.PICTURES, SizeTier.MEDIUM)

        assert path == Path("/cache/pictures/medium/.nomedia")

    def test_deterministic(self):
        """Test identical inputs produce identical paths."""
        first = CachePathBuilder("/cache").file_path(MediaCategory.MUSIC, SizeTier.BIG, 42)
        second = CachePathBuilder("/cache").file_path(MediaCategory.MUSIC, SizeTier.BIG, 42)

        assert str(first) == str(second)

    def test_no_io(self, temp_dir):
        """Test building paths does not touch the filesystem."""
        builder = CachePathBuilder(temp_dir / "xbmc")

        builder.file_path(MediaCategory.MUSIC, SizeTier.SMALL, 1)

        assert not (temp_dir / "xbmc").exists()
