"""Root CLI entry point for strsim."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from strsim.config import ConfigError, resolve_config
from strsim.stream.processor import process_stream
from strsim.utils.logs import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help=(
        "Read lines from stdin, split each in two halves and emit the lines whose "
        "halves reach a bigram similarity threshold in range 0.0..1.0. With a "
        "REFERENCE argument every line is compared against REFERENCE instead."
    ),
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def main(
    reference: Optional[str] = typer.Argument(
        None, help="Compare each whole line against this string instead of splitting it"
    ),
    delimiter: Optional[str] = typer.Option(
        None,
        "-t",
        "--delimiter",
        envvar="STRSIM_DELIMITER",
        help="Split input lines at this character [default: tab]",
    ),
    similarity: Optional[float] = typer.Option(
        None,
        "-d",
        "--similarity",
        envvar="STRSIM_THRESHOLD",
        help="Emit lines with similarity of this value or greater [default: 0.9]",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        exists=True,
        dir_okay=False,
        readable=True,
        path_type=Path,
        help="YAML file with defaults for delimiter, threshold, reference and codepoints",
    ),
    codepoints: Optional[bool] = typer.Option(
        None,
        "--codepoints/--bytes",
        help="Pair decoded UTF-8 characters instead of raw bytes [default: bytes]",
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log debug information to stderr"),
) -> None:
    """Filter stdin down to the lines whose strings are almost equal."""

    configure_logging(verbose)

    overrides = {
        "delimiter": delimiter,
        "threshold": similarity,
        "reference": reference,
        "codepoints": codepoints,
    }
    try:
        settings = resolve_config(overrides, config)
    except ConfigError as exc:
        typer.secho(f"[ERROR] {exc.message}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    logger.debug("Resolved configuration: %s", settings)
    process_stream(
        settings,
        typer.get_binary_stream("stdin"),
        typer.get_binary_stream("stdout"),
    )


def run() -> None:
    """Execute the root CLI."""

    app()


__all__ = ["app", "main", "run"]
