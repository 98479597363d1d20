"""Configuration management using pydantic-settings.

Loads from environment variables and .env file.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    Attributes:
        volume_path: Mount point of the storage volume holding the cache.
        volume_type: Volume statistics backend, currently only "local".
        cache_dir: Cache directory name, relative to the volume.
        min_free_percent: Minimum free space (percent) required before caching.
        image_format: Encoder format for cached thumbnails.
        image_quality: Encoder quality (1-100, ignored by lossless formats).
        write_timeout: Seconds allowed for a single thumbnail encode/write,
            or None (WRITE_TIMEOUT=None) to write inline without a bound.
        rollback_on_failure: Stage every size and publish them together, so an
            aborted batch leaves the previous cache contents untouched.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_json: Output logs in JSON format for production.

    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_parse_none_str="None",
    )

    # Storage volume
    volume_path: str = "."
    volume_type: str = "local"
    cache_dir: str = "xbmc"
    min_free_percent: float = 15.0

    # Thumbnail encoding
    image_format: str = "PNG"
    image_quality: int = 100
    write_timeout: float | None = 30.0
    rollback_on_failure: bool = True

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    @property
    def volume(self) -> Path:
        """Return the storage volume mount point as a Path object.

        Returns:
            Path: Path to the storage volume.

        """
        return Path(self.volume_path)

    @property
    def cache_root(self) -> Path:
        """Return the cache root directory as a Path object.

        Returns:
            Path: The cache directory inside the storage volume.

        """
        return self.volume / self.cache_dir


# Global settings instance
settings = Settings()
