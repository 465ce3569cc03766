"""CLI for gesturepath."""

import logging

import click


def _options(windows: bool, left: bool, precision: int):
    from pydantic import ValidationError

    from .config import DEFAULT, WINDOWS, HorizontalDirection

    base = WINDOWS if windows else DEFAULT
    update = {"precision": precision}
    if left:
        update["horizontal"] = HorizontalDirection.LEFT
    try:
        return base.model_validate({**base.model_dump(), **update})
    except ValidationError as e:
        raise click.BadParameter(str(e), param_hint="--precision")


def _emit(builder, fmt: str, stats: bool):
    from .export import PointListExporter, format_number

    if fmt == "json":
        click.echo(PointListExporter().export(builder))
    else:
        for x, y in builder.drawing_path:
            click.echo(f"{format_number(x)} {format_number(y)}")

    if stats:
        polyline = builder.to_polyline()
        click.echo(f"Points: {len(polyline.points)}", err=True)
        click.echo(f"Length: {polyline.length:.4f}", err=True)
        click.echo(f"Bounds: {polyline.bounds()}", err=True)


def _draw_options(f):
    f = click.option("--stats", is_flag=True, help="Print point count, length and bounds")(f)
    f = click.option(
        "--format", "-f", "fmt", type=click.Choice(["json", "points"]), default="json"
    )(f)
    f = click.option("--precision", "-p", default=4, type=int, help="Decimal places")(f)
    f = click.option("--left", is_flag=True, help="X axis positive to the left")(f)
    f = click.option("--windows", is_flag=True, help="Y axis positive downward")(f)
    return f


@click.group()
@click.option("--verbose", "-v", is_flag=True)
def main(verbose: bool):
    """gesturepath - Turtle-style gesture paths."""
    from .logging_config import setup_logging

    setup_logging(logging.DEBUG if verbose else logging.WARNING)


@main.command()
@click.argument("program")
@_draw_options
def draw(program: str, windows: bool, left: bool, precision: int, fmt: str, stats: bool):
    """Run a command program, e.g. "line 4 90; forward 1"."""
    from .commands import CommandError, run_program

    options = _options(windows, left, precision)
    try:
        builder = run_program(program, options=options)
    except CommandError as e:
        raise click.ClickException(str(e))
    _emit(builder, fmt, stats)


@main.command()
@_draw_options
def demo(windows: bool, left: bool, precision: int, fmt: str, stats: bool):
    """Draw the "P" gesture."""
    from .commands import GESTURE_P, run_program

    builder = run_program(GESTURE_P, options=_options(windows, left, precision))
    _emit(builder, fmt, stats)


if __name__ == "__main__":
    main()
