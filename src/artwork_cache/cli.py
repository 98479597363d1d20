"""
CLI for the artwork thumbnail cache.

Commands:
- info: Show configuration and storage volume status
- add: Cache an artwork file at every size
- purge: Delete every cached thumbnail
- stats: Count cached thumbnails per category and size
"""

from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from .catalog import MediaCategory, SizeTier, pixel_size
from .config import settings
from .errors import CacheError
from .logging import setup_logging

app = typer.Typer(
    name="artwork-cache",
    help="Thumbnail cache for music, video and picture artwork",
)
console = Console()


def _format_bytes(value: int) -> str:
    size = float(value)
    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} TB"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Artwork cache - multi-size thumbnail cache for cover art."""
    log_level = "DEBUG" if verbose else settings.log_level
    setup_logging(level=log_level, json_output=settings.log_json)
    logger.debug("CLI initialized with log level: {}", log_level)


@app.command()
def info():
    """Show configuration and storage volume status."""
    from .cache import ThumbnailCache

    logger.debug("Displaying configuration and status")
    console.print("[bold blue]Artwork Cache Configuration[/]")

    table = Table(title="Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Volume Path", settings.volume_path)
    table.add_row("Cache Root", str(settings.cache_root))
    table.add_row("Minimum Free Space", f"{settings.min_free_percent}%")
    table.add_row("Image Format", settings.image_format)
    timeout = "none" if settings.write_timeout is None else f"{settings.write_timeout}s"
    table.add_row("Write Timeout", timeout)
    table.add_row("Rollback On Failure", str(settings.rollback_on_failure))

    console.print(table)

    console.print("\n[bold]Storage Volume Status[/]")
    cache = ThumbnailCache(settings)
    try:
        reason = cache.check_precondition()
        if cache.monitor.volume.is_mounted():
            console.print(f"Total: {_format_bytes(cache.monitor.total_bytes())}")
            console.print(f"Free: {_format_bytes(cache.monitor.free_bytes())}")
            console.print(f"Free percentage: {cache.monitor.free_percentage():.1f}%")
        if reason:
            console.print(f"[red]{reason}[/]")
        else:
            console.print("[green]Ready for caching[/]")
    except OSError as e:
        logger.error("Error reading storage volume: {}", e)
        console.print(f"[red]Error reading storage volume: {e}[/]")
    finally:
        cache.close()


@app.command()
def add(
    image_file: Path = typer.Argument(..., help="Artwork image file to cache"),
    category: MediaCategory = typer.Option(
        MediaCategory.MUSIC, "--category", "-c", help="Media category of the artwork"
    ),
    tier: SizeTier = typer.Option(SizeTier.BIG, "--tier", "-t", help="Size to report back"),
    force: bool = typer.Option(False, "--force", help="Skip the free space check"),
):
    """Cache an artwork file at every thumbnail size."""
    from .cache import ThumbnailCache

    logger.info("Caching {} as {} artwork", image_file, category.value)
    cache = ThumbnailCache(settings)
    try:
        reason = cache.check_precondition()
        if reason and not force:
            console.print(f"[red]{reason}[/]")
            raise typer.Exit(1)
        if reason:
            console.print(f"[yellow]Warning: {reason}[/]")

        try:
            cached = cache.add_file(image_file, category, tier)
        except (CacheError, OSError) as e:
            logger.error("Caching {} failed: {}", image_file, e)
            console.print(f"[red]Error: {e}[/]")
            raise typer.Exit(1) from e

        console.print(f"[bold green]Cached {image_file}[/]")
        console.print(
            f"{tier.value} ({pixel_size(tier)}px): {cached.width}x{cached.height} -> {cached.path}"
        )
    finally:
        cache.close()


@app.command()
def purge(
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
):
    """Delete every cached thumbnail."""
    from .cache import ThumbnailCache

    if not yes and not typer.confirm(f"Delete all thumbnails in {settings.cache_root}?"):
        console.print("[yellow]Aborted[/]")
        raise typer.Exit(1)

    cache = ThumbnailCache(settings)
    try:
        result = cache.purge()
    finally:
        cache.close()

    console.print(f"[green]Deleted {result.deleted} files[/]")
    if result.failed:
        console.print(f"[red]Could not delete {result.failed} files[/]")
        for path in result.failed_paths:
            console.print(f"  {path}")


@app.command()
def stats():
    """Count cached thumbnails per category and size."""
    from .cache import ThumbnailCache

    cache = ThumbnailCache(settings)
    try:
        counts = cache.stats()
    finally:
        cache.close()

    table = Table(title="Cached Thumbnails")
    table.add_column("Category", style="cyan")
    table.add_column("Size", style="cyan")
    table.add_column("Files", style="green")
    for (category, tier), count in counts.items():
        table.add_row(category.value, f"{tier.value} ({pixel_size(tier)}px)", str(count))
    table.add_row("[bold]Total[/]", "", f"[bold]{sum(counts.values())}[/]")
    console.print(table)


if __name__ == "__main__":
    app()
