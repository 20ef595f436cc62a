#!/usr/bin/env python3
"""
Project Resume Versions

Builds a session from the resume data and prints what the renderer would
receive for a version.

Examples:
    # List versions (default marked with *)
    python scripts/project_version.py versions

    # Dump the default version's render model as JSON
    python scripts/project_version.py show

    # Dump a specific version from another directory into a file
    python scripts/project_version.py show ai --source data -o outs/ai.json
"""

import asyncio
import json
import os
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv

from versa.contexts.rendering import ResumeSession
from versa.contexts.rendering.logger import setup_rendering_logger
from versa.contexts.templating import DocumentLoadError, StructuralError, load_merge_settings
from versa.utils import Column, TableFormatter
from versa.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Inspect merged resume versions",
    add_completion=False,
)


def _open_session(source: Optional[str]) -> ResumeSession:
    """Load settings and documents, exiting with a message on failure."""
    try:
        settings = load_merge_settings()
        return asyncio.run(ResumeSession.load(source, settings=settings))
    except (DocumentLoadError, StructuralError, FileNotFoundError, ValueError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("versions")
def versions_command(
    source: Annotated[
        Optional[str],
        typer.Option("--source", "-s", help="Data directory or base URL"),
    ] = None,
):
    """
    List versions with display names and theme colors.

    Examples:\n
        $ project_version.py versions
    """
    setup_rendering_logger(LOGS_PATH / f"versions_{now()}")
    session = _open_session(source)
    model = session.model

    table = TableFormatter(
        columns=[
            Column("", 1),
            Column("Version", 20),
            Column("Color", 8),
            Column("Projects", 8, align=">"),
            Column("Display name", 30),
        ],
        total_width=71,
    )
    table.add_table_header().add_separator()
    for key in model.version_keys():
        version = model.get_version(key)
        marker = "*" if key == model.default_version_key else ""
        table.add_row(
            [marker, key, version.theme_color, len(model.effective_projects(key)), version.display_name]
        )
    typer.echo(table.render())

    if model.warnings:
        typer.secho(f"\n{len(model.warnings)} merge warning(s):", fg=typer.colors.YELLOW)
        for warning in model.warnings:
            typer.echo(f"  ! {warning}")


@app.command("show")
def show_command(
    version: Annotated[
        Optional[str],
        typer.Argument(help="Version key (defaults to the default version)"),
    ] = None,
    source: Annotated[
        Optional[str],
        typer.Option("--source", "-s", help="Data directory or base URL"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write JSON here instead of stdout"),
    ] = None,
):
    """
    Print the render model for a version as JSON.

    Unknown version keys fall back to the default version with a warning.

    Examples:\n
        $ project_version.py show ai

        $ project_version.py show ai -o outs/ai.json
    """
    # JSON goes to stdout, so console logging moves to stderr
    setup_rendering_logger(LOGS_PATH / f"project_{now()}", version_key=version, console=sys.stderr)
    session = _open_session(source)

    if version is not None and not session.switch_version(version):
        typer.secho(
            f"Unknown version '{version}', showing {session.current_version}",
            fg=typer.colors.YELLOW,
            err=True,
        )

    payload = json.dumps(session.render_model().to_dict(), indent=2, ensure_ascii=False)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(payload, encoding="utf-8")
        typer.secho(f"✓ Wrote {session.current_version} to {output}", fg=typer.colors.GREEN)
    else:
        typer.echo(payload)


if __name__ == "__main__":
    app()
