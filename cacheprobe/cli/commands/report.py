import os
from pathlib import Path

import typer
from rich.console import Console

from cacheprobe.cli.commands.version import version_callback
from cacheprobe.internal.constants import LOG_FILE_ENV_VAR
from cacheprobe.internal.logging import get_logger, setup_logging
from cacheprobe.kernel import detection
from cacheprobe.kernel.render import render_text

logger = get_logger(__name__)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)

def report(
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the cacheprobe version and exit.",
    ),
):
    """
    Report the CPU architecture, model and cache hierarchy.

    Logging only: CACHEPROBE_LOG_LEVEL sets the log level and CACHEPROBE_LOG_FILE
    adds a rotating log file. Neither changes the report.
    """
    log_file = os.environ.get(LOG_FILE_ENV_VAR)
    setup_logging(log_file_path=Path(log_file) if log_file else None)

    try:
        info = detection.detect()
    except OSError as e:
        logger.exception("Cache detection failed", exc_info=e)
        err_console.print(f"Cache detection failed: {e}", markup=False)
        raise typer.Exit(1)

    for notice in info.diagnostics:
        err_console.print(notice, markup=False)

    typer.echo(render_text(info))

if __name__ == "__main__":
    typer.run(report)
