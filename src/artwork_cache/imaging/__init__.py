"""
Image codec package.

Provides the scale/encode primitive the cache writer consumes.
"""

from .base import ImageCodec
from .pillow import PillowCodec

__all__ = [
    "ImageCodec",
    "PillowCodec",
]
