"""Typer-based CLI application for hfetch."""

import logging
from typing import Annotated, Optional

import typer

from hfetch import __version__
from hfetch.core.banner import print_banner
from hfetch.core.collectors import collect_system_info

app = typer.Typer(
    name="hfetch",
    help="Print a system fetch banner: logo plus host information",
    add_completion=False,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARN", "WARNING", "ERROR"]


def version_callback(value: bool):
    """Display version and exit."""
    if value:
        typer.echo(f"hfetch v{__version__}")
        raise typer.Exit()


def configure_logging(log_level: str) -> None:
    """Configure stderr logging from a level name.

    Raises:
        typer.Exit: If the level name is not recognised
    """
    log_level_upper = log_level.upper()
    if log_level_upper not in LOG_LEVELS:
        typer.echo(
            f"❌ Invalid log level: {log_level}. "
            "Must be debug, info, warn, or error.",
            err=True,
        )
        raise typer.Exit(1)

    # Map WARN to WARNING for Python logging
    if log_level_upper == "WARN":
        log_level_upper = "WARNING"

    logging.basicConfig(
        level=getattr(logging, log_level_upper),
        format="%(message)s",
    )


@app.command()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
    # Runtime options (hidden from help - for developers)
    log_level: Annotated[
        str,
        typer.Option(
            help="Logging level (debug, info, warn, error)",
            case_sensitive=False,
            hidden=True,
        ),
    ] = "warn",
):
    """Show hostname, distro, kernel, init system, packages and memory."""
    configure_logging(log_level)
    logger = logging.getLogger(__name__)

    try:
        info = collect_system_info()
        logger.debug("Collected: %s", info.model_dump())
        print_banner(info)
    except BrokenPipeError:
        # Reader went away (e.g. piped into head); nothing left to report
        raise typer.Exit(0) from None
    except Exception as e:
        typer.echo(f"❌ Error collecting system information: {e}", err=True)
        logger.exception("Banner generation failed")
        raise typer.Exit(1) from e


if __name__ == "__main__":
    app()
