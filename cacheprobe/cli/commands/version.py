import typer
import importlib.metadata
from cacheprobe.internal.logging import get_logger

logger = get_logger(__name__)

def version_callback(value: bool):
    """
    Show the cacheprobe version and exit.
    """
    if not value:
        return
    try:
        # Read version from installed package metadata
        package_version = importlib.metadata.version("cacheprobe")
        typer.echo(f"cacheprobe version: {package_version}")
    except importlib.metadata.PackageNotFoundError:
        typer.echo("cacheprobe is not installed or version metadata not found.", err=True)
        typer.echo("Please install the package first (e.g., pip install . or pip install -e .)", err=True)
        logger.warning("cacheprobe package version not found.")
        raise typer.Exit(1)
    raise typer.Exit()
