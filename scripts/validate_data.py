#!/usr/bin/env python3
"""
Validate Resume Data

Loads profile.json + versions.json (or legacy data.json) and prints the
validation report. Exits non-zero when validation fails.

Examples:
    # Validate the default data directory (VERSA_DATA_PATH)
    python scripts/validate_data.py

    # Validate a deployed copy
    python scripts/validate_data.py https://example.org/resume/data

    # Treat warnings as failures
    python scripts/validate_data.py data --strict
"""

import os
from pathlib import Path
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv

from versa.contexts.intake import (
    format_validation_report,
    load_documents_sync,
    validate_documents,
)
from versa.contexts.intake.logger import log_validation_result, setup_intake_logger
from versa.contexts.templating import DocumentLoadError
from versa.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Validate resume data documents",
    add_completion=False,
)


@app.command()
def main(
    source: Annotated[
        Optional[str],
        typer.Argument(help="Data directory or base URL (defaults to VERSA_DATA_PATH)"),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail on warnings as well as errors"),
    ] = False,
):
    """
    Validate resume data and print a report.

    Examples:\n
        $ validate_data.py

        $ validate_data.py data --strict
    """
    log_dir = LOGS_PATH / f"validate_{now()}"
    setup_intake_logger(log_dir, source=source)

    try:
        documents = load_documents_sync(source)
    except DocumentLoadError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Loaded {documents.structure} data from {documents.source}")

    result = validate_documents(documents.profile, documents.version_set)
    log_validation_result(result)
    typer.echo(format_validation_report(result))

    if not result.is_valid or (strict and result.warnings):
        raise typer.Exit(code=1)

    typer.secho("✓ Data is valid", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
