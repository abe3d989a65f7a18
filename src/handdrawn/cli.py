from __future__ import annotations

import importlib.util
import pathlib
import sys
import traceback
from types import ModuleType
from typing import Callable, List

import typer
from PIL import Image
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from handdrawn._color import to_rgba8
from handdrawn._config import get_stroke_defaults
from handdrawn.geometry import Size, StrokePath
from handdrawn.helpers import SHAPES, HandDrawnHelpers
from handdrawn.io.svg import write_svg
from handdrawn.painter import stroke_path
from handdrawn.validation import ValidationError

console = Console()
app = typer.Typer(help="Generate deterministic hand-drawn strokes, borders and dividers.")

RASTER_SUFFIXES = {".png"}
VECTOR_SUFFIXES = {".svg"}
MESH_SUFFIXES = {".vtk", ".vtp"}


class ModelBuildError(RuntimeError):
    """Raised when a model module cannot provide anything to draw."""


def _load_module(path: pathlib.Path) -> ModuleType:
    module_name = "handdrawn_user_model"
    if module_name in sys.modules:
        del sys.modules[module_name]

    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise typer.BadParameter(f"Unable to import model at {path}")

    module = importlib.util.module_from_spec(spec)
    # Register module so features relying on sys.modules (e.g., dataclasses) work.
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module


def _format_exception(exc: BaseException) -> str:
    return "".join(traceback.format_exception(exc))


def _drawables_from_module(model_path: pathlib.Path) -> Callable[[], List[object]]:
    def factory() -> List[object]:
        module = _load_module(model_path)
        builder = getattr(module, "build", None)
        if builder is None or not callable(builder):
            raise ModelBuildError(f"{model_path} must define a callable build() function.")
        result = builder()
        drawables = list(result) if isinstance(result, (list, tuple)) else [result]
        for item in drawables:
            if not callable(getattr(item, "paint", None)):
                raise ModelBuildError(f"build() returned {type(item).__name__}, which has no paint() method.")
        return drawables

    return factory


def _next_available_path(path: pathlib.Path) -> pathlib.Path:
    """Return a non-conflicting path by appending ' (n)' before the suffix."""

    if not path.exists():
        return path

    parent = path.parent
    stem = path.stem
    suffix = path.suffix
    n = 1
    while True:
        candidate = parent / f"{stem} ({n}){suffix}"
        if not candidate.exists():
            return candidate
        n += 1


def _resolve_output(output: pathlib.Path, overwrite: bool) -> pathlib.Path:
    final_output = output
    if output.exists() and not overwrite:
        final_output = _next_available_path(output)
        console.print(f"[yellow]Output {output} exists; writing to {final_output} instead.[/yellow]")
    final_output.parent.mkdir(parents=True, exist_ok=True)
    return final_output


def _make_helpers(seed: int | None, segments: int | None, irregularity: float | None) -> HandDrawnHelpers:
    configured = get_stroke_defaults()
    try:
        return HandDrawnHelpers(
            seed=configured.seed if seed is None else seed,
            segments=configured.segments if segments is None else segments,
            irregularity=configured.irregularity if irregularity is None else irregularity,
        )
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _save_png(path: StrokePath, size: Size, target: pathlib.Path, color: str, stroke_width: float, margin: float) -> None:
    canvas = (max(int(round(size.width + 2 * margin)), 1), max(int(round(size.height + 2 * margin)), 1))
    image = Image.new("RGBA", canvas, (0, 0, 0, 0))
    stroke_path(image, path, color, stroke_width, origin=(margin, margin))
    image.save(target)


@app.command()
def offsets(
    seed: int | None = typer.Option(None, help="Random seed; defaults to the configured seed."),
    segments: int | None = typer.Option(None, help="Segments per stroke."),
    irregularity: float | None = typer.Option(None, help="Jitter magnitude in pixels."),
    count: int = typer.Option(1, min=1, max=64, help="How many successive sequences to draw from one generator."),
) -> None:
    """
    Print smoothed offset sequences drawn from a single generator.
    """

    helpers = _make_helpers(seed, segments, irregularity)
    table = Table(title=f"seed={helpers.seed} segments={helpers.segments} irregularity={helpers.irregularity:g}")
    table.add_column("index", justify="right")
    for n in range(count):
        table.add_column(f"draw {n + 1}", justify="right")

    columns = [helpers.smoothed_offsets() for _ in range(count)]
    for idx in range(helpers.segments + 1):
        table.add_row(str(idx), *(f"{col[idx]:+.4f}" for col in columns))
    console.print(table)


@app.command()
def shape(
    kind: str = typer.Argument(..., help=f"Shape to draw: {', '.join(SHAPES)}."),
    width: float = typer.Option(200.0, min=0.0, help="Box width in pixels."),
    height: float = typer.Option(100.0, min=0.0, help="Box height in pixels."),
    seed: int | None = typer.Option(None, help="Random seed; defaults to the configured seed."),
    segments: int | None = typer.Option(None, help="Segments per edge."),
    irregularity: float | None = typer.Option(None, help="Jitter magnitude in pixels."),
    stroke_width: float | None = typer.Option(None, min=0.1, help="Stroke width for PNG and SVG output."),
    color: str = typer.Option("black", help="Stroke color (name or hex)."),
    output: pathlib.Path = typer.Option(
        pathlib.Path("stroke.png"),
        "--output",
        "-o",
        help="Destination file; .png, .svg, .vtk or .vtp.",
    ),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing file."),
) -> None:
    """
    Generate one built-in shape and write it to disk.
    """

    if kind not in SHAPES:
        raise typer.BadParameter(f"Unknown shape {kind!r}; expected one of {', '.join(SHAPES)}.")
    suffix = output.suffix.lower()
    if suffix not in RASTER_SUFFIXES | VECTOR_SUFFIXES | MESH_SUFFIXES:
        raise typer.BadParameter(f"Unsupported output format {output.suffix!r}.")
    try:
        to_rgba8(color)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    helpers = _make_helpers(seed, segments, irregularity)
    if stroke_width is None:
        stroke_width = get_stroke_defaults().stroke_width
    size = Size(width, height)
    path = helpers.build(kind, size)
    margin = stroke_width + helpers.irregularity

    final_output = _resolve_output(output, overwrite)
    if suffix in RASTER_SUFFIXES:
        _save_png(path, size, final_output, color, stroke_width, margin)
    elif suffix in VECTOR_SUFFIXES:
        write_svg([path], final_output, size, color=color, stroke_width=stroke_width, margin=margin)
    else:
        try:
            path.to_polydata().save(str(final_output))
        except (OSError, ValueError) as exc:
            raise typer.BadParameter(f"Failed to export {suffix}: {exc}") from exc

    console.print(
        Panel(
            f"Wrote {kind} stroke ({len(path)} points) to [green]{final_output}[/green].",
            title="Export complete",
            border_style="green",
        )
    )


@app.command()
def render(
    model: pathlib.Path = typer.Argument(..., help="Python module whose build() returns painters or widgets."),
    width: int = typer.Option(320, min=1, help="Canvas width in pixels."),
    height: int = typer.Option(200, min=1, help="Canvas height in pixels."),
    background: str | None = typer.Option(None, help="Canvas color; transparent when omitted."),
    output: pathlib.Path = typer.Option(pathlib.Path("render.png"), "--output", "-o", help="PNG file to write."),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing file."),
) -> None:
    """
    Load a model module, paint everything its build() returns and save a PNG.
    """

    if not model.exists():
        raise typer.BadParameter(f"Model path {model} does not exist.")
    if output.suffix.lower() not in RASTER_SUFFIXES:
        raise typer.BadParameter("render writes PNG files only.")

    factory = _drawables_from_module(model)
    try:
        drawables = factory()
    except ModelBuildError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except Exception as exc:
        console.print(Panel.fit(_format_exception(exc), title="Model build failed", style="red"))
        raise typer.BadParameter(f"Model execution failed: {exc}") from exc

    try:
        fill = (0, 0, 0, 0) if background is None else to_rgba8(background)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    image = Image.new("RGBA", (width, height), fill)
    for item in drawables:
        item.paint(image)

    final_output = _resolve_output(output, overwrite)
    image.save(final_output)
    console.rule("handdrawn render")
    console.print(f"Rendered [green]{len(drawables)}[/green] item(s) from {model} to [green]{final_output}[/green]")
