"""
Tests for the size catalog.

Tests tier pixel sizes, directory fragments and category folders.
"""

import pytest

from artwork_cache.catalog import (
    MediaCategory,
    SizeTier,
    all_categories,
    all_tiers,
    category_folder,
    directory_fragment,
    pixel_size,
)


class TestSizeTiers:
    """Test size tier lookups."""

    def test_all_tiers_order(self):
        """Test tiers are listed smallest first."""
        assert all_tiers() == (SizeTier.SMALL, SizeTier.MEDIUM, SizeTier.BIG)

    def test_pixel_sizes(self):
        """Test each tier maps to its pixel size."""
        assert pixel_size(SizeTier.SMALL) == 54
        assert pixel_size(SizeTier.MEDIUM) == 105
        assert pixel_size(SizeTier.BIG) == 256

    def test_pixel_sizes_increase(self):
        """Test pixel sizes grow with the tier."""
        sizes = [pixel_size(tier) for tier in all_tiers()]

        assert sizes == sorted(sizes)

    def test_directory_fragments_unique(self):
        """Test every tier gets its own directory."""
        fragments = {directory_fragment(tier) for tier in all_tiers()}

        assert len(fragments) == len(all_tiers())
        assert directory_fragment(SizeTier.SMALL) == "/small"

    def test_lookup_by_value(self):
        """Test tiers can be looked up by their string value."""
        assert pixel_size("big") == 256

    def test_unknown_tier_raises(self):
        """Test unknown tiers are a programming error."""
        with pytest.raises(ValueError):
            pixel_size("huge")


class TestCategories:
    """Test media category lookups."""

    def test_all_categories(self):
        """Test all categories are listed."""
        assert set(all_categories()) == {
            MediaCategory.PICTURES,
            MediaCategory.MUSIC,
            MediaCategory.VIDEO,
        }

    def test_category_folders(self):
        """Test each category maps to its folder."""
        assert category_folder(MediaCategory.MUSIC) == "music"
        assert category_folder(MediaCategory.VIDEO) == "video"
        assert category_folder(MediaCategory.PICTURES) == "pictures"

    def test_unknown_category_raises(self):
        """Test unknown categories are a programming error."""
        with pytest.raises(ValueError):
            category_folder("podcasts")
