"""CLI application entry point for vectorpath.

This module provides the main CLI interface using Typer.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from vectorpath import __version__
from vectorpath.cli.output import (
    console,
    create_progress,
    print_error,
    print_header,
    print_outlines,
    print_path_errors,
    print_primitives,
    print_step,
    print_success,
)
from vectorpath.config import (
    GeometryConfig,
    LoggingConfig,
    ProcessingConfig,
    VectorPathSettings,
)
from vectorpath.core import DocumentProcessor, parse_path, primitive_bounds
from vectorpath.exceptions import DocumentLoadError, VectorPathError

# Create the Typer app
app = typer.Typer(
    name="vectorpath",
    help="Decode SVG path data into moves, lines and Bezier curves.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]vectorpath[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Decode SVG path data into moves, lines and Bezier curves."""


@app.command()
def decode(
    path_data: Annotated[
        str,
        typer.Argument(
            help="Path data string, e.g. 'M0,0 L10,10 Z'",
            show_default=False,
        ),
    ],
    origin_x: Annotated[
        float,
        typer.Option("--origin-x", help="Cursor x before the first command"),
    ] = 0.0,
    origin_y: Annotated[
        float,
        typer.Option("--origin-y", help="Cursor y before the first command"),
    ] = 0.0,
    arc_angle: Annotated[
        float,
        typer.Option(
            "--arc-angle",
            help="Largest arc sweep in degrees per cubic segment",
            min=1.0,
            max=180.0,
        ),
    ] = 90.0,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print primitives as JSON"),
    ] = False,
) -> None:
    """Decode one path-data string and print its primitives.

    Example:
        vectorpath decode "M0,0 C10,0 10,10 0,10 S-10,20 0,20"
    """
    config = GeometryConfig(
        origin_x=origin_x,
        origin_y=origin_y,
        arc_segment_max_angle=arc_angle,
    )

    try:
        outline = parse_path(path_data, config=config)
    except VectorPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if as_json:
        console.print_json(json.dumps([p.to_dict() for p in outline.primitives]))
        return

    print_primitives(outline.primitives)


@app.command()
def inspect(
    svg_file: Annotated[
        Path,
        typer.Argument(
            help="Path to an SVG file",
            show_default=False,
        ),
    ],
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto)",
            min=1,
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Also list every primitive of every path",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Parse every path element of an SVG file and summarize the result.

    Exits with code 1 if the file cannot be loaded or any path fails to parse.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not svg_file.exists():
        print_error(
            f"Input file not found: {svg_file}",
            details=f"The file '{svg_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        print_step("Parsing paths")

    settings = VectorPathSettings(
        processing=ProcessingConfig(max_workers=workers),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    try:
        processor = DocumentProcessor(settings)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    try:
        if not quiet:
            with create_progress() as progress:
                task_id = progress.add_task("Parsing", total=None)

                def update_progress(completed: int, total: int, *_: object) -> None:
                    progress.update(task_id, completed=completed, total=total)

                outlines, stats = processor.process(
                    svg_file,
                    max_workers=workers,
                    progress_callback=update_progress,
                )
        else:
            outlines, stats = processor.process(svg_file, max_workers=workers)
    except DocumentLoadError as e:
        print_error(f"Could not load document: {e.reason}")
        raise typer.Exit(code=1)
    except VectorPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_step("Outlines")
        print_outlines(outlines, [primitive_bounds(o.primitives) for o in outlines])

        if verbose:
            for index, outline in enumerate(outlines):
                print_step(outline.element_id or f"#{index}")
                print_primitives(outline.primitives)

        print_success(
            total_time_s=stats.duration_seconds,
            processed=stats.processed_count,
            primitives=stats.primitive_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
        )

    if stats.errors:
        print_path_errors(stats.errors)
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
