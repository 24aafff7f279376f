"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from vectorpath.domain import (
    Close,
    CubicBezier,
    GeometricPrimitive,
    LineTo,
    MoveTo,
    Outline,
    Point,
    QuadraticBezier,
    hex_to_rgb,
)

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for path processing.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]vectorpath[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def _format_point(point: Point) -> str:
    return f"({point.x:g}, {point.y:g})"


def describe_primitive(primitive: GeometricPrimitive) -> tuple[str, str]:
    """Return a (name, points) pair for table display."""
    if isinstance(primitive, MoveTo):
        return "MoveTo", _format_point(primitive.point)
    if isinstance(primitive, LineTo):
        return "LineTo", _format_point(primitive.point)
    if isinstance(primitive, CubicBezier):
        points = (primitive.control1, primitive.control2, primitive.end)
        return "CubicBezier", " ".join(_format_point(p) for p in points)
    if isinstance(primitive, QuadraticBezier):
        points = (primitive.control, primitive.end)
        return "QuadraticBezier", " ".join(_format_point(p) for p in points)
    if isinstance(primitive, Close):
        return "Close", ""
    return type(primitive).__name__, ""


def print_primitives(primitives: list[GeometricPrimitive] | tuple[GeometricPrimitive, ...]) -> None:
    """Print primitives as a numbered table.

    Args:
        primitives: Primitive sequence to show
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right", style="dim")
    table.add_column("Primitive")
    table.add_column("Points")

    for index, primitive in enumerate(primitives):
        name, points = describe_primitive(primitive)
        table.add_row(str(index), name, points)

    console.print(table)


def _color_text(color: str | None) -> Text:
    if color is None:
        return Text("none", style="dim")
    rgb = hex_to_rgb(color)
    text = Text()
    if rgb is not None:
        text.append("■ ", style=f"rgb({rgb[0]},{rgb[1]},{rgb[2]})")
    text.append(color)
    return text


def print_outlines(
    outlines: list[Outline],
    bounds: list[tuple[float, float, float, float] | None],
) -> None:
    """Print one row per outline with counts, paint and bounds.

    Args:
        outlines: Parsed outlines
        bounds: Bounding box per outline (same order)
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Path")
    table.add_column("Subpaths", justify="right")
    table.add_column("Primitives", justify="right")
    table.add_column("Fill")
    table.add_column("Stroke")
    table.add_column("Bounds")

    for index, (outline, box) in enumerate(zip(outlines, bounds)):
        bounds_str = "-" if box is None else " ".join(f"{v:g}" for v in box)
        table.add_row(
            outline.element_id or f"#{index}",
            str(outline.subpath_count),
            str(len(outline.primitives)),
            _color_text(outline.paint.fill),
            _color_text(outline.paint.stroke),
            bounds_str,
        )

    console.print(table)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    total_time_s: float,
    processed: int,
    primitives: int,
    skipped: int,
    errors: int,
) -> None:
    """Print success message with summary.

    Args:
        total_time_s: Total processing time in seconds
        processed: Number of paths parsed
        primitives: Total number of primitives produced
        skipped: Number of paths skipped
        errors: Number of paths that failed
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {processed} paths {SYM_DOT} {primitives} primitives {SYM_DOT} "
        f"{skipped} skipped {SYM_DOT} [{error_style}]{errors} errors[/{error_style}]"
    )


def print_path_errors(errors: list[tuple[str, str]]) -> None:
    """Print the paths that failed to parse.

    Args:
        errors: (label, message) pairs
    """
    for label, message in errors:
        line = Text(f"  {SYM_ERR} ", style="red")
        line.append(label, style="bold")
        line.append(f" {SYM_DOT} {message}", style="")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
