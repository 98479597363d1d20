"""
Size tiers and media categories.

Static lookups from a thumbnail size tier to its pixel size and directory
fragment, and from a media category to its cache folder.
"""

from enum import Enum


class MediaCategory(str, Enum):
    """Kind of media a piece of artwork belongs to."""

    PICTURES = "pictures"
    MUSIC = "music"
    VIDEO = "video"


class SizeTier(str, Enum):
    """Supported thumbnail resolutions."""

    SMALL = "small"
    MEDIUM = "medium"
    BIG = "big"


_PIXEL_SIZES: dict[SizeTier, int] = {
    SizeTier.SMALL: 54,
    SizeTier.MEDIUM: 105,
    SizeTier.BIG: 256,
}

_DIRECTORY_FRAGMENTS: dict[SizeTier, str] = {
    SizeTier.SMALL: "/small",
    SizeTier.MEDIUM: "/medium",
    SizeTier.BIG: "/big",
}

_CATEGORY_FOLDERS: dict[MediaCategory, str] = {
    MediaCategory.PICTURES: "pictures",
    MediaCategory.MUSIC: "music",
    MediaCategory.VIDEO: "video",
}


def pixel_size(tier: SizeTier) -> int:
    """Return the dominant-axis pixel size of a tier."""
    return _PIXEL_SIZES[SizeTier(tier)]


def directory_fragment(tier: SizeTier) -> str:
    """Return the directory fragment appended to a category folder."""
    return _DIRECTORY_FRAGMENTS[SizeTier(tier)]


def all_tiers() -> tuple[SizeTier, ...]:
    return tuple(SizeTier)


def category_folder(category: MediaCategory) -> str:
    """Return the cache sub-folder for a media category."""
    return _CATEGORY_FOLDERS[MediaCategory(category)]


def all_categories() -> tuple[MediaCategory, ...]:
    return tuple(MediaCategory)
