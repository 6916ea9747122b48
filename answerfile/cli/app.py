"""Main CLI application."""

from __future__ import annotations

import logging

import typer
from typing_extensions import Annotated

from ..core.errors import AnswerFileError
from ..core.models import (
    DEFAULT_MAPPING,
    DEFAULT_OUTPUT,
    DEFAULT_TEMPLATE,
    BuildConfig,
)
from ..reconcile import engine
from .parsers import parse_file_mode, parse_path

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="answerfile",
    help="Embed provisioning scripts into a Windows autounattend answer file.",
)


@app.command()
def build(
    template: Annotated[
        str,
        typer.Option(
            "--template",
            "-t",
            help="Answer file template to read.",
            metavar="PATH",
        ),
    ] = str(DEFAULT_TEMPLATE),
    mapping: Annotated[
        str,
        typer.Option(
            "--mapping",
            "-m",
            help="CSV with FileOrigin and FileDestination columns.",
            metavar="PATH",
        ),
    ] = str(DEFAULT_MAPPING),
    output: Annotated[
        str,
        typer.Option(
            "--output",
            "-o",
            help="Answer file to write (overwritten).",
            metavar="PATH",
        ),
    ] = str(DEFAULT_OUTPUT),
    file_mode: Annotated[
        str,
        typer.Option(
            "--mode",
            help="File permissions in octal (default: 0644).",
            metavar="OCTAL",
        ),
    ] = "0644",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Reconcile the template's Extensions entries with the file mapping."""
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    config = BuildConfig(
        template_path=parse_path(template, DEFAULT_TEMPLATE),
        mapping_path=parse_path(mapping, DEFAULT_MAPPING),
        output_path=parse_path(output, DEFAULT_OUTPUT),
        file_mode=parse_file_mode(file_mode),
    )
    logger.debug(f"Config: {config}")

    try:
        result = engine.reconcile(config)
    except AnswerFileError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    logger.info(f"Wrote {result.output_path}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
