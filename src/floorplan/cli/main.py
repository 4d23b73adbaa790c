"""Typer CLI for floor plan rendering and inspection."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from floorplan.application import FloorPlanEditor, TableNotFoundError
from floorplan.application.config import (
    ConfigError,
    FloorPlanConfiguration,
    load_config,
)
from floorplan.cli.commands import display_load_error, validate_command
from floorplan.domain import SeatSections, TableShape
from floorplan.domain.services import calculate_table_size, compute_seat_positions, content_bounds
from floorplan.infrastructure.exporters import ExporterRegistry, ExportManager

app = typer.Typer(
    name="floorplan",
    help="Lay out, snap and render restaurant floor plans.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Floor plan editor tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load(config_file: Path) -> FloorPlanConfiguration:
    try:
        return load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def _editor(
    config_file: Path,
    width: float | None = None,
    height: float | None = None,
) -> FloorPlanEditor:
    """Build an editor from a floor plan file, optionally resizing the canvas."""
    editor = FloorPlanEditor.from_config(_load(config_file))
    if width is not None or height is not None:
        container = editor.viewport.container
        editor.resize(width or container.width, height or container.height)
        editor.fit()
    return editor


def _parse_formats(output_formats: str) -> list[str]:
    if output_formats.lower() == "all":
        return ExporterRegistry.available_formats()
    formats = [f.strip().lower() for f in output_formats.split(",") if f.strip()]
    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)
    return formats


@app.command()
def render(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON floor plan file")],
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write to this file instead of stdout"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: svg, json, dxf"),
    ] = "svg",
    width: Annotated[
        float | None,
        typer.Option("--width", min=1, help="Canvas width in pixels"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", min=1, help="Canvas height in pixels"),
    ] = None,
    select: Annotated[
        str | None,
        typer.Option("--select", help="Table id to draw as selected"),
    ] = None,
    focus: Annotated[
        str | None,
        typer.Option("--focus", help="Table id to zoom to"),
    ] = None,
) -> None:
    """Render a floor plan as the editor canvas shows it."""
    try:
        exporter = ExporterRegistry.get(output_format.lower())()
    except KeyError as e:
        typer.echo(f"Error: {e.args[0]}", err=True)
        raise typer.Exit(code=1)

    editor = _editor(config_file, width, height)
    try:
        if select is not None:
            editor.store.select_table(select)
        if focus is not None:
            editor.focus_table(focus)
    except TableNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    snapshot = editor.snapshot()
    if output_file is None:
        typer.echo(exporter.export_string(snapshot))
        return
    exporter.export(snapshot, output_file)
    typer.echo(f"{exporter.format_name.upper()} written to: {output_file}")


@app.command()
def seats(
    shape: Annotated[
        TableShape,
        typer.Option("--shape", "-s", help="Table shape"),
    ] = TableShape.RECTANGULAR,
    seat_count: Annotated[
        int,
        typer.Option("--seats", "-n", min=0, help="Total seat count"),
    ] = 4,
    width: Annotated[
        float | None,
        typer.Option("--width", min=1, help="Table width; computed from seats if omitted"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", min=1, help="Table height; computed from seats if omitted"),
    ] = None,
    front: Annotated[int | None, typer.Option("--front", min=0, help="Front section seats")] = None,
    back: Annotated[int | None, typer.Option("--back", min=0, help="Back section seats")] = None,
    left: Annotated[int | None, typer.Option("--left", min=0, help="Left section seats")] = None,
    right: Annotated[int | None, typer.Option("--right", min=0, help="Right section seats")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON")] = False,
) -> None:
    """Show where seats go around a table."""
    sections = None
    if any(v is not None for v in (front, back, left, right)):
        sections = SeatSections(front=front, back=back, left=left, right=right)

    size = calculate_table_size(seat_count, shape, sections)
    table_width = width if width is not None else size.width
    table_height = height if height is not None else size.height
    layout = compute_seat_positions(
        shape, seat_count, table_width / 2, table_height / 2, sections=sections
    )
    positions = [(seat.x, seat.y) for seat in layout]

    if as_json:
        typer.echo(
            json.dumps(
                {
                    "shape": shape.value,
                    "seats": seat_count,
                    "width": table_width,
                    "height": table_height,
                    "positions": [{"x": x, "y": y} for x, y in positions],
                },
                indent=2,
            )
        )
        return

    typer.echo(f"{shape.value} table, {table_width:g} x {table_height:g}")
    typer.echo(f"{len(positions)} of {seat_count} seats placed")
    for index, (x, y) in enumerate(positions, start=1):
        typer.echo(f"  {index:>3}: ({x:8.2f}, {y:8.2f})")


@app.command()
def snap(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON floor plan file")],
    table_id: Annotated[str, typer.Argument(help="Table being moved")],
    x: Annotated[float, typer.Argument(help="Candidate left edge")],
    y: Annotated[float, typer.Argument(help="Candidate top edge")],
) -> None:
    """Show how a table would snap when moved to (X, Y)."""
    editor = FloorPlanEditor.from_config(_load(config_file))
    try:
        result = editor.snap(table_id, x, y)
    except TableNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    position = result.apply(x, y)
    typer.echo(f"Position: ({position.x:g}, {position.y:g})")
    typer.echo(f"Offset:   ({result.offset_x:g}, {result.offset_y:g})")
    if not result.guide_lines:
        typer.echo("No alignment within range.")
    for line in result.guide_lines:
        typer.echo(f"Guide:    {line.axis.value} at {line.position:g}")


@app.command()
def fit(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON floor plan file")],
    width: Annotated[float | None, typer.Option("--width", min=1, help="Canvas width")] = None,
    height: Annotated[float | None, typer.Option("--height", min=1, help="Canvas height")] = None,
) -> None:
    """Show the viewport that fits every table."""
    editor = _editor(config_file, width, height)
    state = editor.viewport.state
    bounds = content_bounds(editor.tables, editor.settings.seat_radius)

    typer.echo(f"Tables:   {len(editor.tables)}")
    if bounds is not None:
        typer.echo(
            f"Content:  ({bounds.min_x:.1f}, {bounds.min_y:.1f}) to "
            f"({bounds.max_x:.1f}, {bounds.max_y:.1f})"
        )
    typer.echo(f"Zoom:     {state.zoom:.3f}")
    typer.echo(f"Origin:   ({state.origin_x:.1f}, {state.origin_y:.1f})")
    typer.echo(f"View:     {state.view_width:.1f} x {state.view_height:.1f}")


@app.command()
def export(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON floor plan file")],
    output_formats: Annotated[
        str,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats: svg,json,dxf (or 'all')",
        ),
    ] = "all",
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", help="Output directory for exported files"),
    ] = Path("."),
    project_name: Annotated[
        str,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = "floorplan",
) -> None:
    """Export a floor plan to several formats at once."""
    formats = _parse_formats(output_formats)
    editor = _editor(config_file)

    manager = ExportManager(output_dir)
    try:
        files = manager.export_all(formats, editor.snapshot(), project_name)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Exported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


if __name__ == "__main__":
    app()
