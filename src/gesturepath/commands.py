"""
Small command language for driving a PathBuilder from text.

    # the "P" gesture
    line 4 90
    line 1 0; arc-relative 1 90 -180
    forward 1

One command per line or per ``;``. ``#`` starts a comment. Command names
are case-insensitive. Angles are degrees.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from .config import Options
from .turtle import PathBuilder

logger = logging.getLogger(__name__)


class CommandError(ValueError):
    """A command program could not be parsed."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        super().__init__(f"line {line}: {message}" if line is not None else message)


@dataclass(frozen=True)
class CommandSpec:
    name: str
    method: str
    params: tuple[str, ...]


COMMANDS = {
    spec.name: spec
    for spec in [
        CommandSpec("forward", "forward", ("length",)),
        CommandSpec("line", "draw_line", ("length", "angle")),
        CommandSpec("rotate", "rotate", ("angle",)),
        CommandSpec("arc", "draw_arc", ("radius", "start", "sweep")),
        CommandSpec("arc-relative", "draw_arc_relative", ("radius", "relative_start", "sweep")),
    ]
}

ALIASES = {
    "fd": "forward",
    "rt": "rotate",
    "arcrel": "arc-relative",
}

GESTURE_P = """\
line 4 90
line 1 0
arc-relative 1 90 -180
forward 1
"""


@dataclass(frozen=True)
class Command:
    name: str
    args: tuple[float, ...]
    line: int = 0

    @property
    def spec(self) -> CommandSpec:
        return COMMANDS[self.name]

    def apply(self, builder: PathBuilder) -> PathBuilder:
        return getattr(builder, self.spec.method)(*self.args)


def _parse_statement(statement: str, line: int) -> Command:
    tokens = statement.split()
    name = tokens[0].lower()
    name = ALIASES.get(name, name)

    spec = COMMANDS.get(name)
    if spec is None:
        raise CommandError(f"unknown command {tokens[0]!r}", line)

    raw_args = tokens[1:]
    if len(raw_args) != len(spec.params):
        raise CommandError(
            f"{spec.name} takes {len(spec.params)} argument(s) "
            f"({', '.join(spec.params)}), got {len(raw_args)}",
            line,
        )

    args = []
    for param, raw in zip(spec.params, raw_args):
        try:
            args.append(float(raw))
        except ValueError:
            raise CommandError(f"{param} must be a number, got {raw!r}", line) from None
    return Command(spec.name, tuple(args), line)


def parse_program(text: str) -> list[Command]:
    """Parse a command program into commands, in order."""
    commands = []
    for line_num, raw in enumerate(text.splitlines(), 1):
        body = raw.split("#", 1)[0]
        for statement in body.split(";"):
            if statement.strip():
                commands.append(_parse_statement(statement, line_num))
    return commands


def run_program(
    program: str | Iterable[Command],
    builder: PathBuilder | None = None,
    options: Options | None = None,
) -> PathBuilder:
    """Apply a program to ``builder``, or to a fresh one built with ``options``.

    An existing builder keeps its own options, so passing both is an error.
    """
    if builder is not None and options is not None:
        raise ValueError("Pass either builder or options, not both")

    commands = parse_program(program) if isinstance(program, str) else list(program)
    if builder is None:
        builder = PathBuilder(options)

    for command in commands:
        command.apply(builder)

    logger.info("Ran %d command(s), %d point(s)", len(commands), len(builder.path))
    return builder
