"""
Target dimensions for cached thumbnails.

Pictures and music covers keep their aspect ratio with the shorter side set to
the tier's pixel size. Video artwork is first classified by shape (poster,
backdrop, square icon, banner) because each shape wants a different dominant
axis.
"""

from collections.abc import Callable
from enum import Enum

from loguru import logger

from .catalog import MediaCategory

# Height / width of a standard movie poster.
POSTER_ASPECT_RATIO = 1.4799154334038054968287526427061

SQUARE_MIN = 0.98
SQUARE_MAX = 1.02
LANDSCAPE_MAX = 2.0
BANNER_MIN = 5.0


class VideoShape(str, Enum):
    """Shape buckets for video artwork."""

    SQUARE = "square"
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"
    BANNER = "banner"
    IRREGULAR = "irregular"


def classify_video_shape(ar: float) -> VideoShape:
    """Classify a video artwork aspect ratio (width / height)."""
    if SQUARE_MIN <= ar <= SQUARE_MAX:
        return VideoShape.SQUARE
    if ar < SQUARE_MIN:
        return VideoShape.PORTRAIT
    if ar < LANDSCAPE_MAX:
        return VideoShape.LANDSCAPE
    if ar > BANNER_MIN:
        return VideoShape.BANNER
    return VideoShape.IRREGULAR


def _fixed_height(ar: float, size: int) -> tuple[int, int]:
    return round(size * ar), size


def _fixed_width(ar: float, size: int) -> tuple[int, int]:
    return size, round(size / ar)


def _rectangular(ar: float, size: int) -> tuple[int, int]:
    if ar < 1:
        return _fixed_width(ar, size)
    return _fixed_height(ar, size)


def _square(ar: float, size: int) -> tuple[int, int]:
    return size, size


def _portrait(ar: float, size: int) -> tuple[int, int]:
    width, height = _fixed_width(ar, size)
    poster_height = round(POSTER_ASPECT_RATIO * width)
    if height < poster_height:
        # Never shorter than a poster; width may grow past the tier size.
        height = poster_height
        width = round(height * ar)
    return width, height


def _banner(ar: float, size: int) -> tuple[int, int]:
    return _fixed_width(ar, size * 2)


_VIDEO_RULES: dict[VideoShape, Callable[[float, int], tuple[int, int]]] = {
    VideoShape.SQUARE: _square,
    VideoShape.PORTRAIT: _portrait,
    VideoShape.LANDSCAPE: _fixed_height,
    VideoShape.BANNER: _banner,
    VideoShape.IRREGULAR: _fixed_height,
}


def target_dimensions(
    source_width: int,
    source_height: int,
    category: MediaCategory | str,
    size: int,
) -> tuple[int, int]:
    """
    Compute thumbnail dimensions for one size tier.

    Args:
        source_width: Source image width in pixels
        source_height: Source image height in pixels
        category: Media category; unrecognized values use the pictures/music rule
        size: Tier pixel size from the size catalog

    Returns:
        Tuple of (width, height), each at least 1

    Raises:
        ValueError: If any input dimension is not positive
    """
    if source_width < 1 or source_height < 1 or size < 1:
        raise ValueError(
            f"Dimensions must be positive: source={source_width}x{source_height}, size={size}"
        )

    ar = source_width / source_height
    if category == MediaCategory.VIDEO:
        shape = classify_video_shape(ar)
        width, height = _VIDEO_RULES[shape](ar, size)
        logger.debug("Video shape {} (ar={:.3f})", shape.value, ar)
    else:
        width, height = _rectangular(ar, size)

    width, height = max(width, 1), max(height, 1)
    logger.debug("Resizing {}x{} to {}x{}", source_width, source_height, width, height)
    return width, height
