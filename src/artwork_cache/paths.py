"""
Cache path composition.

Layout::

    <root>/<category-folder><size-fragment>/<lowercase-hex-fingerprint>
    <root>/<category-folder><size-fragment>/.nomedia
"""

from pathlib import Path

from .catalog import MediaCategory, SizeTier, category_folder, directory_fragment
from .models import MAX_FINGERPRINT

MARKER_NAME = ".nomedia"


def format_fingerprint(fingerprint: int) -> str:
    """Format a 32-bit fingerprint as 8 lowercase hex digits."""
    if not 0 <= fingerprint <= MAX_FINGERPRINT:
        raise ValueError(f"Fingerprint out of 32-bit range: {fingerprint}")
    return f"{fingerprint:08x}"


class CachePathBuilder:
    """Builds deterministic cache paths below a root directory. Performs no I/O."""

    def __init__(self, root: Path | str):
        self.root = Path(root)

    def directory_path(self, category: MediaCategory, tier: SizeTier) -> Path:
        return self.root / f"{category_folder(category)}{directory_fragment(tier)}"

    def file_path(self, category: MediaCategory, tier: SizeTier, fingerprint: int) -> Path:
        return self.directory_path(category, tier) / format_fingerprint(fingerprint)

    def marker_path(self, category: MediaCategory, tier: SizeTier) -> Path:
        return self.directory_path(category, tier) / MARKER_NAME
